from credit_system.extension import db
from credit_system.models import ChangeLog
from datetime import datetime

def log_change(entity_type, entity_id, action, details=None):
    log_entry = ChangeLog(
        entity_type=entity_type,
        entity_id=entity_id,
        action=action,
        timestamp=datetime.utcnow(),
        details=details or {}
    )
    db.session.add(log_entry)
