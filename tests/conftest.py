"""Shared fixtures: the seeded catalog and a test app."""

import pytest

from storefront import create_app
from storefront.services.product_repository import ProductRepository
from storefront.services.product_service import ProductService


@pytest.fixture
def catalog():
    return ProductRepository().load_catalog()


@pytest.fixture
def service(catalog):
    return ProductService(catalog)


@pytest.fixture
def app():
    return create_app({'TESTING': True, 'DATA_PATH': '', 'WHATSAPP_NUMBER': '584146395496'})


@pytest.fixture
def client(app):
    return app.test_client()
