import base64
import json
import os

os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")

import pytest
from typing import Generator, Dict, Any
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner

from subscribepro_checkout import config as app_config
from subscribepro_checkout.app_setup.factory import create_app
from subscribepro_checkout.applepay.core import ApplePayCore
from subscribepro_checkout.checkout import (
    Address,
    CheckoutSession,
    Currency,
    CustomerSession,
    OrderRepository,
    OrderService,
    Quote,
    QuoteAddress,
    QuoteManagement,
    QuoteRepository,
    RegionDirectory,
)

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)

@pytest.fixture(scope="session")
def app():
    return create_app()

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def make_session_cookie():
    """Cookie signé au format de starlette SessionMiddleware."""
    def _make(data: Dict[str, Any]) -> str:
        payload = base64.b64encode(json.dumps(data).encode("utf-8"))
        return TimestampSigner(str(app_config.SESSION_SECRET)).sign(payload).decode("utf-8")
    return _make

@pytest.fixture
def billing_address() -> Address:
    return Address(
        firstname="Jane",
        lastname="Doe",
        company="Acme",
        street=["123 Main Street", "Apt 4B"],
        city="San Francisco",
        region="California",
        region_id=5,
        region_code="CA",
        postcode="94102",
        country_id="US",
        telephone="415-555-0100",
        email="jane.doe@example.com",
    )

@pytest.fixture
def quote() -> Quote:
    return Quote(
        id="q1",
        grand_total=118.5,
        currency_code="USD",
        customer_email="jane.doe@example.com",
        shipping_address=QuoteAddress(
            subtotal_with_discount=100,
            shipping_amount=10,
            tax_amount=8.5,
            shipping_method="flatrate_flatrate",
            firstname="Jane",
            lastname="Doe",
            street=["123 Main Street"],
            city="San Francisco",
            region_code="CA",
            postcode="94102",
            country_id="US",
        ),
    )

@pytest.fixture
def quote_repository(quote) -> QuoteRepository:
    repo = QuoteRepository()
    repo.save(quote)
    return repo

@pytest.fixture
def order_repository() -> OrderRepository:
    return OrderRepository()

@pytest.fixture
def platform_customer() -> MagicMock:
    return MagicMock(name="PlatformCustomerManager")

@pytest.fixture
def platform_payment_profile() -> MagicMock:
    return MagicMock(name="ApplePayPaymentProfileService")

@pytest.fixture
def make_core(quote_repository, order_repository, platform_customer, platform_payment_profile):
    def _make(quote_id="q1", customer_data=None, checkout_session=None, customer_session=None):
        quote_management = QuoteManagement(quote_repository, order_repository)
        return ApplePayCore(
            checkout_session=checkout_session or CheckoutSession(quote_repository, quote_id),
            customer_session=customer_session or CustomerSession(customer_data),
            currency=Currency("USD"),
            directory_region=RegionDirectory(),
            platform_customer=platform_customer,
            platform_payment_profile=platform_payment_profile,
            order_service=OrderService(quote_repository, quote_management),
            quote_management=quote_management,
        )
    return _make
