import logging
from flask import request
from flask_restful import Resource, Api
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError
from credit_system.extension import db
from credit_system.exceptions import ValidationError
from credit_system.repository import CreditRepository, CustomerRepository
from credit_system.schemas.credit_schema import CreditSchema, CreditListSchema
from credit_system.service.credit_service import CreditService
from credit_system.service.customer_service import CustomerService
from credit_system.utils.change_logger import log_change
from credit_system.utils.exception_details import exception_details, conflict_details
from . import credit_bp

logger = logging.getLogger(__name__)

api = Api(credit_bp)

# Schemas
credit_schema = CreditSchema()
credits_list_schema = CreditListSchema(many=True)


def get_credit_service():
    customer_service = CustomerService(CustomerRepository(db.session))
    return CreditService(CreditRepository(db.session), customer_service)


def customer_id_arg():
    """customerId query parameter as an int, or None when missing or malformed."""
    return request.args.get("customerId", type=int)


def missing_customer_id():
    return {"errors": {"customerId": ["Missing or invalid query parameter."]}}, 400


class CreditListResource(Resource):

    def get(self):
        customer_id = customer_id_arg()
        if customer_id is None:
            return missing_customer_id()

        credits = get_credit_service().find_all_by_customer(customer_id)
        return credits_list_schema.dump(credits), 200

    def post(self):
        try:
            data = credit_schema.load(request.get_json(silent=True) or {})
        except SchemaValidationError as err:
            return {"errors": err.messages}, 400

        try:
            credit = get_credit_service().save(data)
        except ValidationError as e:
            db.session.rollback()
            return exception_details(e), 400

        try:
            log_change("Credit", credit.id, "create", credit_schema.dump(credit))
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Credit creation rejected: {e.orig}")
            return conflict_details(e), 409

        return credit_schema.dump(credit), 201


class CreditResource(Resource):

    def get(self, credit_code):
        customer_id = customer_id_arg()
        if customer_id is None:
            return missing_customer_id()

        try:
            credit = get_credit_service().find_by_credit_code(customer_id, credit_code)
        except ValidationError as e:
            return exception_details(e), 400
        return credit_schema.dump(credit), 200


api.add_resource(CreditListResource, "/credits")
api.add_resource(CreditResource, "/credits/<string:credit_code>")
