from .customer_repository import CustomerRepository
from .credit_repository import CreditRepository

__all__ = ["CustomerRepository", "CreditRepository"]
