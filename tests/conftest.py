"""Pytest configuration and fixtures"""
import json
import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("LOG_LEVEL", "INFO")

from app.domain.id_policy import IdPolicy
from app.api import create_app
from app.services.cart_store import CartStore
from app.services.product_catalog import ProductCatalog


@pytest.fixture
def products_path(tmp_path):
    return tmp_path / "products.json"


@pytest.fixture
def carts_path(tmp_path):
    return tmp_path / "carrito.json"


@pytest.fixture
def catalog(products_path):
    return ProductCatalog(products_path)


@pytest.fixture
def cart_store(carts_path):
    return CartStore(carts_path)


@pytest.fixture
def client(products_path, carts_path):
    """Test client on temporary storage files"""
    app = create_app(products_file=products_path, carts_file=carts_path, id_policy=IdPolicy.COUNT)
    return TestClient(app)


@pytest.fixture
def sample_product():
    return {"code": "A1", "name": "Widget", "price": 9.99, "stock": 10}


def read_json(path):
    return json.loads(path.read_text(encoding="utf-8"))
