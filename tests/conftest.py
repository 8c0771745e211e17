import os

# przed importem aplikacji: baza w pamieci, bez seedowania przy starcie
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_CATALOG"] = "false"
os.environ["VERIFY_ORDER_TOTALS"] = "true"

import pytest
from fastapi.testclient import TestClient

from herbal_garden.main import app
from herbal_garden.data.database import Base, SessionLocal, engine
from herbal_garden.data.seed import seed
from herbal_garden.data.snapshot import load_snapshot
from herbal_garden.client.catalog import Catalog
from herbal_garden.client.cart_manager import CartManager
from herbal_garden.client.cart_storage import FileCartStorage


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api():
    return TestClient(app)


@pytest.fixture
def seeded():
    return seed()


@pytest.fixture
def catalog():
    return Catalog(load_snapshot(), source="snapshot")


@pytest.fixture
def cart_file(tmp_path):
    return str(tmp_path / "cart.json")


@pytest.fixture
def cart(catalog, cart_file):
    return CartManager(catalog, FileCartStorage(cart_file))


@pytest.fixture
def tulsi_order():
    return {
        "customer": {"name": "A", "email": "a@b.com", "address": "X"},
        "items": [{"productId": 1, "name": "Tulsi", "quantity": 2, "price": 13.43}],
        "totalAmount": 26.86,
    }
