from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from storefront.data.models import CartItemModel, PaymentModel, ProductModel
from storefront.domain.errors import EmptyCart, InsufficientInventory, NotFound, ValidationError
from storefront.services.order_service import OrderService
from tests.conftest import add_customer, add_item


def quantity_of(db, product_id):
    db.expire_all()
    return db.get(ProductModel, product_id).quantity


def payment_count(db):
    return db.execute(select(func.count()).select_from(PaymentModel)).scalar_one()


def test_checkout_example_scenario(shop):
    record = OrderService(shop).checkout("cid100", "crt1011", "online")

    assert record["total_amount"] == Decimal("30015")
    assert record["payment_type"] == "online"
    assert record["payment_date"] == date.today()
    assert record["customer_id"] == "cid100"
    assert record["cart_id"] == "crt1011"
    assert [i["product_id"] for i in record["items"]] == ["pid1001"]
    assert quantity_of(shop, "pid1001") == 7


def test_checkout_flips_items_and_links_payment(shop):
    record = OrderService(shop).checkout("cid100", "crt1011", "online")

    item = shop.get(CartItemModel, ("crt1011", "pid1001"))
    assert item.purchased == "Y"
    assert item.payment_id == record["id"]

    payment = shop.get(PaymentModel, record["id"])
    assert payment.total_amount == Decimal("30015")


def test_checkout_total_matches_flipped_items(shop):
    add_item(shop, "crt1011", "pid1002", 2)

    record = OrderService(shop).checkout("cid100", "crt1011", "card")

    flipped = shop.execute(
        select(CartItemModel).where(CartItemModel.payment_id == record["id"])
    ).scalars().all()
    expected = sum(i.quantity_wished * i.product.cost for i in flipped)

    assert len(flipped) == 2
    assert record["total_amount"] == expected == Decimal("30515")
    assert quantity_of(shop, "pid1001") == 7
    assert quantity_of(shop, "pid1002") == 2


def test_checkout_ignores_already_purchased_items(shop):
    service = OrderService(shop)
    first = service.checkout("cid100", "crt1011", "online")

    add_item(shop, "crt1011", "pid1002", 1)
    second = service.checkout("cid100", "crt1011", "online")

    assert first["id"] != second["id"]
    assert second["total_amount"] == Decimal("250")
    assert [i["product_id"] for i in second["items"]] == ["pid1002"]
    assert quantity_of(shop, "pid1001") == 7


def test_checkout_can_drain_stock_to_zero(shop):
    add_customer(shop, "cid200", "crt2000")
    add_item(shop, "crt2000", "pid1002", 4)

    OrderService(shop).checkout("cid200", "crt2000", "online")

    assert quantity_of(shop, "pid1002") == 0


def test_checkout_empty_cart(shop):
    add_customer(shop, "cid200", "crt2000")

    with pytest.raises(EmptyCart):
        OrderService(shop).checkout("cid200", "crt2000", "online")


def test_checkout_twice_second_is_empty(shop):
    service = OrderService(shop)
    service.checkout("cid100", "crt1011", "online")

    with pytest.raises(EmptyCart):
        service.checkout("cid100", "crt1011", "online")


def test_checkout_cart_of_other_customer(shop):
    add_customer(shop, "cid200", "crt2000")

    with pytest.raises(NotFound):
        OrderService(shop).checkout("cid200", "crt1011", "online")

    assert quantity_of(shop, "pid1001") == 10


def test_checkout_unknown_customer(shop):
    with pytest.raises(NotFound):
        OrderService(shop).checkout("nobody", "crt1011", "online")


def test_checkout_requires_payment_type(shop):
    with pytest.raises(ValidationError):
        OrderService(shop).checkout("cid100", "crt1011", "  ")


def test_insufficient_inventory_rolls_everything_back(shop):
    # pid1001 is fine, pid1002 only has 4
    add_item(shop, "crt1011", "pid1002", 5)

    with pytest.raises(InsufficientInventory) as exc:
        OrderService(shop).checkout("cid100", "crt1011", "online")

    assert exc.value.product_id == "pid1002"
    assert payment_count(shop) == 0
    assert quantity_of(shop, "pid1001") == 10
    assert quantity_of(shop, "pid1002") == 4

    items = shop.execute(select(CartItemModel).where(CartItemModel.cart_id == "crt1011")).scalars().all()
    assert {i.purchased for i in items} == {"N"}
    assert {i.payment_id for i in items} == {None}


def test_order_history(shop):
    service = OrderService(shop)
    record = service.checkout("cid100", "crt1011", "online")

    history = service.order_history("cid100")

    assert [p["id"] for p in history] == [record["id"]]
    assert history[0]["items"][0]["quantity_wished"] == 3
    assert history[0]["items"][0]["line_total"] == Decimal("30015")


def test_order_history_unknown_customer(shop):
    with pytest.raises(NotFound):
        OrderService(shop).order_history("nobody")


def test_get_payment(shop):
    service = OrderService(shop)
    record = service.checkout("cid100", "crt1011", "online")

    payment = service.get_payment(record["id"])

    assert payment["total_amount"] == Decimal("30015")
    assert len(payment["items"]) == 1

    with pytest.raises(NotFound):
        service.get_payment("pay-missing")
