from marshmallow import Schema, fields, validate
from credit_system.extension import ma
from credit_system.models import Credit, CreditStatus


class CreditSchema(Schema):
    """Credit creation payload and the full credit view."""
    credit_code = fields.UUID(dump_only=True, data_key="creditCode")
    credit_value = fields.Decimal(
        required=True, as_string=True, data_key="creditValue",
        validate=validate.Range(min=0, min_inclusive=False),
    )
    day_first_installment = fields.Date(required=True, data_key="dayFirstOfInstallment")
    number_of_installments = fields.Int(
        required=True, strict=True, data_key="numberOfInstallments",
        validate=validate.Range(min=1),
    )
    status = fields.Enum(CreditStatus, by_value=True, dump_only=True)
    customer_id = fields.Int(required=True, strict=True, data_key="customerId")

    email_customer = fields.Method("get_email_customer", dump_only=True, data_key="emailCustomer")
    income_customer = fields.Method("get_income_customer", dump_only=True, data_key="incomeCustomer")

    def get_email_customer(self, obj):
        return obj.customer.email if obj.customer else None

    def get_income_customer(self, obj):
        return str(obj.customer.income) if obj.customer else None


class CreditListSchema(ma.SQLAlchemySchema):
    class Meta:
        model = Credit

    credit_code = fields.UUID(data_key="creditCode")
    credit_value = fields.Decimal(as_string=True, data_key="creditValue")
    number_of_installments = ma.auto_field(data_key="numberOfInstallments")
