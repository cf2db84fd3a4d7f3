"""Pytest configuration and fixtures."""

import datetime
import itertools
from decimal import Decimal

import pytest

from credit_system import create_app
from credit_system.extension import db
from credit_system.repository import CreditRepository, CustomerRepository
from credit_system.service.credit_service import CreditService
from credit_system.service.customer_service import CustomerService


def build_cpf(base: str) -> str:
    """Append the two CPF check digits to a 9-digit base."""
    digits = [int(d) for d in base]
    for _ in range(2):
        weight = len(digits) + 1
        remainder = sum(d * (weight - i) for i, d in enumerate(digits)) % 11
        digits.append(0 if remainder < 2 else 11 - remainder)
    return "".join(str(d) for d in digits)


_sequence = itertools.count(1)


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "AUTO_MIGRATE": False,
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def customer_payload():
    """Customer creation body; unique cpf and email on every call unless overridden."""
    def build(**overrides):
        n = next(_sequence)
        payload = {
            "firstName": "nome",
            "lastName": "sobrenome",
            "cpf": build_cpf(f"{n:09d}"),
            "email": f"joe{n}@gmail.com",
            "password": "senhaconfiavel",
            "zipCode": "986412",
            "street": "rua tranquila",
            "income": 1000.0,
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def credit_payload():
    def build(**overrides):
        payload = {
            "creditValue": 500.0,
            "dayFirstOfInstallment": "2024-04-22",
            "numberOfInstallments": 4,
            "customerId": 1,
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def customer_service(app):
    return CustomerService(CustomerRepository(db.session))


@pytest.fixture
def credit_service(app, customer_service):
    return CreditService(CreditRepository(db.session), customer_service)


@pytest.fixture
def create_customer(customer_service):
    """Persist a customer straight through the service layer."""
    def create(**overrides):
        n = next(_sequence)
        data = {
            "first_name": "nome",
            "last_name": "sobrenome",
            "cpf": build_cpf(f"{n:09d}"),
            "email": f"joe{n}@gmail.com",
            "password": "senhaconfiavel",
            "zip_code": "986412",
            "street": "rua tranquila",
            "income": Decimal("1000.0"),
        }
        data.update(overrides)
        customer = customer_service.save(data)
        db.session.commit()
        return customer
    return create


@pytest.fixture
def create_credit(credit_service):
    def create(customer, **overrides):
        data = {
            "credit_value": Decimal("500.0"),
            "day_first_installment": datetime.date(2024, 4, 22),
            "number_of_installments": 4,
            "customer_id": customer.id,
        }
        data.update(overrides)
        credit = credit_service.save(data)
        db.session.commit()
        return credit
    return create
