import logging
from flask import request
from flask_restful import Resource, Api
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError
from credit_system.extension import db
from credit_system.exceptions import ValidationError
from credit_system.repository import CustomerRepository
from credit_system.schemas.customer_schema import CustomerSchema, CustomerUpdateSchema
from credit_system.service.customer_service import CustomerService
from credit_system.utils.change_logger import log_change
from credit_system.utils.exception_details import exception_details, conflict_details
from . import customer_bp

logger = logging.getLogger(__name__)

api = Api(customer_bp)

customer_schema = CustomerSchema()
customer_update_schema = CustomerUpdateSchema()


def get_customer_service():
    return CustomerService(CustomerRepository(db.session))


class CustomerListResource(Resource):

    def post(self):
        try:
            data = customer_schema.load(request.get_json(silent=True) or {})
        except SchemaValidationError as err:
            return {"errors": err.messages}, 400

        try:
            customer = get_customer_service().save(data)
            log_change("Customer", customer.id, "create", customer_schema.dump(customer))
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Customer registration rejected: {e.orig}")
            return conflict_details(e), 409

        return customer_schema.dump(customer), 201


class CustomerResource(Resource):

    def get(self, customer_id):
        try:
            customer = get_customer_service().find_by_id(customer_id)
        except ValidationError as e:
            return exception_details(e), 400
        return customer_schema.dump(customer), 200

    def patch(self, customer_id):
        try:
            changes = customer_update_schema.load(request.get_json(silent=True) or {}, partial=True)
        except SchemaValidationError as err:
            return {"errors": err.messages}, 400

        try:
            customer = get_customer_service().update(customer_id, changes)
        except ValidationError as e:
            return exception_details(e), 400

        try:
            log_change("Customer", customer.id, "update", customer_schema.dump(customer))
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"Customer update rejected: {e.orig}")
            return conflict_details(e), 409

        return customer_schema.dump(customer), 200


api.add_resource(CustomerListResource, "/customers")
api.add_resource(CustomerResource, "/customers/<int:customer_id>")
