import logging

from credit_system.exceptions import ValidationError
from credit_system.models import Customer

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("first_name", "last_name", "income", "zip_code", "street")


class CustomerService:

    def __init__(self, customer_repository):
        self.customer_repository = customer_repository

    def save(self, data):
        """Register a customer from validated schema data. The raw password is hashed, never stored."""
        data = dict(data)
        password = data.pop("password")
        customer = Customer(**data)
        customer.set_password(password)
        self.customer_repository.save(customer)
        logger.info(f"Customer registered: id={customer.id}")
        return customer

    def find_by_id(self, customer_id):
        customer = self.customer_repository.find_by_id(customer_id)
        if customer is None:
            logger.warning(f"Customer lookup failed: id={customer_id}")
            raise ValidationError(f"Id {customer_id} not found")
        return customer

    def update(self, customer_id, changes):
        customer = self.find_by_id(customer_id)
        for key, value in changes.items():
            if key in UPDATABLE_FIELDS:
                setattr(customer, key, value)
        self.customer_repository.save(customer)
        logger.info(f"Customer updated: id={customer.id} fields={sorted(changes)}")
        return customer
