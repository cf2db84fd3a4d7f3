from datetime import datetime
from credit_system.extension import db

class ChangeLog(db.Model):
    __tablename__ = "changelogs"

    id = db.Column(db.Integer, primary_key=True)
    entity_type = db.Column(db.String(50))
    entity_id = db.Column(db.Integer)
    action = db.Column(db.String(50))  # create, update
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)
    details = db.Column(db.JSON)
