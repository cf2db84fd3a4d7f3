"""
Credit creation and lookup rules.

A credit can only be created for a customer that exists, and a credit is
only handed back to the customer it belongs to. Both failures raise
ValidationError; callers cannot tell a missing code from someone else's.
"""
import logging
import uuid

from credit_system.exceptions import ValidationError
from credit_system.models import Credit, CreditStatus

logger = logging.getLogger(__name__)


class CreditService:

    def __init__(self, credit_repository, customer_service):
        self.credit_repository = credit_repository
        self.customer_service = customer_service

    def save(self, data):
        customer = self.customer_service.find_by_id(data["customer_id"])
        credit = Credit(
            credit_code=uuid.uuid4(),
            credit_value=data["credit_value"],
            day_first_installment=data["day_first_installment"],
            number_of_installments=data["number_of_installments"],
            status=CreditStatus.IN_PROGRESS,
            customer=customer,
        )
        self.credit_repository.save(credit)
        logger.info(f"Credit created: code={credit.credit_code} customer={customer.id}")
        return credit

    def find_all_by_customer(self, customer_id):
        # Unknown customers simply have no credits
        return self.credit_repository.find_all_by_customer(customer_id)

    def find_by_credit_code(self, customer_id, credit_code):
        try:
            code = credit_code if isinstance(credit_code, uuid.UUID) else uuid.UUID(str(credit_code))
        except ValueError:
            code = None

        credit = self.credit_repository.find_by_credit_code(code) if code else None
        if credit is None:
            logger.warning(f"Credit lookup failed: code={credit_code}")
            raise ValidationError(f"Creditcode {credit_code} not found")

        if credit.customer_id != customer_id:
            logger.warning(
                f"Credit {credit_code} requested by customer {customer_id}, owned by {credit.customer_id}"
            )
            raise ValidationError("Contact admin")
        return credit
