from typing import Optional

from sqlalchemy.orm import Session

from credit_system.models import Customer

# Largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


def is_storable_id(value: int) -> bool:
    """Ids outside the column range can never match a row."""
    return 0 < value <= MAX_ID


class CustomerRepository:
    """Data access for customers, bound to one SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        if not is_storable_id(customer_id):
            return None
        return self.session.get(Customer, customer_id)

    def save(self, customer: Customer) -> Customer:
        self.session.add(customer)
        self.session.flush()
        return customer
