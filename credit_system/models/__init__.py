from credit_system.extension import db
from .customer import Customer
from .credit import Credit, CreditStatus
from .changelog import ChangeLog

__all__ = ["db", "Customer", "Credit", "CreditStatus", "ChangeLog"]
