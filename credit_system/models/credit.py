import enum
import uuid
from datetime import datetime
from credit_system.extension import db


class CreditStatus(enum.Enum):
    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECT = "REJECT"


class Credit(db.Model):
    __tablename__ = 'credits'

    id = db.Column(db.Integer, primary_key=True)
    credit_code = db.Column(db.Uuid, nullable=False, unique=True, default=uuid.uuid4)
    credit_value = db.Column(db.Numeric(15, 2), nullable=False, default=0)
    day_first_installment = db.Column(db.Date, nullable=False)
    number_of_installments = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.Enum(CreditStatus), nullable=False, default=CreditStatus.IN_PROGRESS)
    customer_id = db.Column(db.Integer, db.ForeignKey('customers.id'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    customer = db.relationship("Customer", back_populates="credits")

    def __repr__(self):
        return f"<Credit {self.credit_code} customer={self.customer_id}>"
