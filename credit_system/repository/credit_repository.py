import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from credit_system.models import Credit
from credit_system.repository.customer_repository import is_storable_id


class CreditRepository:
    """Data access for credits, bound to one SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_credit_code(self, credit_code: uuid.UUID) -> Optional[Credit]:
        stmt = (
            select(Credit)
            .options(joinedload(Credit.customer))
            .where(Credit.credit_code == credit_code)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        if not is_storable_id(customer_id):
            return []
        stmt = (
            select(Credit)
            .where(Credit.customer_id == customer_id)
            .order_by(Credit.id)
        )
        return list(self.session.execute(stmt).scalars())

    def save(self, credit: Credit) -> Credit:
        self.session.add(credit)
        self.session.flush()
        return credit
