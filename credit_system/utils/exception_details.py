from datetime import datetime
from http import HTTPStatus


def exception_details(exc, status=HTTPStatus.BAD_REQUEST,
                      title="Bad Request! Consult the documentation", message=None):
    """Body returned for domain and conflict errors."""
    name = exc.__class__.__name__
    return {
        "title": title,
        "timestamp": datetime.utcnow().strftime("%Y-%m-%dT%H:%M:%S"),
        "status": int(status),
        "exception": name,
        "details": {name: message or str(exc)},
    }


def conflict_details(exc):
    # IntegrityError keeps the driver message on .orig
    return exception_details(
        exc,
        HTTPStatus.CONFLICT,
        title="Conflict! Consult the documentation",
        message=str(getattr(exc, "orig", exc)),
    )
