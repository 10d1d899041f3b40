import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from redis.exceptions import ConnectionError as RedisConnectionError

from storefront.api.routers.health import get_redis
from storefront.data.database import get_db, init_db, make_engine, make_session_factory
from storefront.data.models import CartItemModel, CartModel, CustomerModel, ProductModel, SellerModel, SellerPhoneModel
from storefront.main import create_app


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


class FakeRedis:
    def __init__(self, healthy=True):
        self.healthy = healthy

    def ping(self):
        if not self.healthy:
            raise RedisConnectionError("redis is down")
        return True


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def client(session_factory, fake_redis):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = lambda: fake_redis

    with TestClient(app) as c:
        yield c


def add_customer(db, customer_id, cart_id, name="Customer"):
    db.add(CartModel(id=cart_id))
    db.flush()
    db.add(CustomerModel(id=customer_id, cart_id=cart_id, name=name, password_hash="x"))
    db.commit()


def add_seller(db, seller_id, phones=()):
    db.add(SellerModel(
        id=seller_id,
        name=f"Seller {seller_id}",
        password_hash="x",
        phones=[SellerPhoneModel(phone=p) for p in phones],
    ))
    db.commit()


def add_product(db, product_id, cost, quantity, seller_id=None, commission="10", **kwargs):
    db.add(ProductModel(
        id=product_id,
        type=kwargs.pop("type", "shirt"),
        cost=Decimal(str(cost)),
        quantity=quantity,
        commission=Decimal(commission),
        seller_id=seller_id,
        **kwargs,
    ))
    db.commit()


def add_item(db, cart_id, product_id, quantity):
    db.add(CartItemModel(cart_id=cart_id, product_id=product_id, quantity_wished=quantity))
    db.commit()


@pytest.fixture
def shop(db):
    """cid100 with cart crt1011 holding 3 x pid1001 (cost 10005, stock 10)."""
    add_seller(db, "sid100", phones=["9000000001", "9000000002"])
    add_product(db, "pid1001", 10005, 10, seller_id="sid100", commission="5")
    add_product(db, "pid1002", 250, 4, seller_id="sid100", commission="10")
    add_customer(db, "cid100", "crt1011")
    add_item(db, "crt1011", "pid1001", 3)
    return db
