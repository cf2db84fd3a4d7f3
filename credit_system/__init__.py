from credit_system.app import create_app

__all__ = ["create_app"]
