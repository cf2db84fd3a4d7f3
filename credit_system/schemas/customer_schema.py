from marshmallow import Schema, fields, validate, validates, pre_load, ValidationError
from credit_system.extension import ma
from credit_system.models import Customer
from credit_system.utils.cpf import is_valid_cpf, normalize_cpf

_not_blank = validate.Length(min=1)


class CustomerSchema(Schema):
    id = fields.Int(dump_only=True)
    first_name = fields.Str(required=True, data_key="firstName", validate=_not_blank)
    last_name = fields.Str(required=True, data_key="lastName", validate=_not_blank)
    cpf = fields.Str(required=True)
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=_not_blank)
    income = fields.Decimal(required=True, as_string=True, validate=validate.Range(min=0))
    zip_code = fields.Str(required=True, data_key="zipCode", validate=_not_blank)
    street = fields.Str(required=True, validate=_not_blank)

    @pre_load
    def strip_cpf(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("cpf"), str):
            data = {**data, "cpf": normalize_cpf(data["cpf"])}
        return data

    @validates("cpf")
    def validate_cpf(self, value, **kwargs):
        if not is_valid_cpf(value):
            raise ValidationError("Invalid CPF")


# Only the fields a customer may change after registration
class CustomerUpdateSchema(ma.SQLAlchemySchema):
    class Meta:
        model = Customer

    first_name = ma.auto_field(data_key="firstName", validate=_not_blank)
    last_name = ma.auto_field(data_key="lastName", validate=_not_blank)
    income = fields.Decimal(as_string=True, validate=validate.Range(min=0))
    zip_code = ma.auto_field(data_key="zipCode", validate=_not_blank)
    street = ma.auto_field(validate=_not_blank)
