import pytest
from sqlalchemy import select

from storefront.data.models import CartModel, CustomerModel, ProductModel, SellerPhoneModel
from storefront.domain.errors import Conflict, NotFound, ValidationError
from storefront.domain.schemas import CustomerCreate, ProductCreate, ProductUpdate, SellerCreate
from storefront.services.customer_service import CustomerService
from storefront.services.inventory_service import InventoryService
from storefront.services.product_service import ProductService
from storefront.services.seller_service import SellerService
from storefront.utils.security import verify_password
from tests.conftest import add_product


def test_create_customer_creates_its_cart(db):
    customer = CustomerService(db).create_customer(
        CustomerCreate(id="cid100", password="secret", name="Asha", pincode="560001", cart_id="crt1011")
    )

    assert customer["cart_id"] == "crt1011"
    assert db.get(CartModel, "crt1011") is not None

    stored = db.get(CustomerModel, "cid100")
    assert stored.password_hash != "secret"
    assert verify_password("secret", stored.password_hash)


def test_create_customer_generates_cart_id(db):
    customer = CustomerService(db).create_customer(CustomerCreate(id="cid100", password="pw", name="Asha"))

    assert customer["cart_id"].startswith("crt")
    assert db.get(CartModel, customer["cart_id"]) is not None


def test_duplicate_customer_or_cart(db):
    service = CustomerService(db)
    service.create_customer(CustomerCreate(id="cid100", password="pw", name="Asha", cart_id="crt1011"))

    with pytest.raises(Conflict):
        service.create_customer(CustomerCreate(id="cid100", password="pw", name="Other"))

    with pytest.raises(Conflict):
        service.create_customer(CustomerCreate(id="cid200", password="pw", name="Other", cart_id="crt1011"))


def test_get_unknown_customer(db):
    with pytest.raises(NotFound):
        CustomerService(db).get_customer("cid404")


def test_seller_phones(db):
    service = SellerService(db)
    seller = service.create_seller(SellerCreate(id="sid100", password="pw", name="Ravi", phones=["111", "222"]))
    assert seller["phones"] == ["111", "222"]

    seller = service.add_phone("sid100", "333")
    assert seller["phones"] == ["111", "222", "333"]

    with pytest.raises(Conflict):
        service.add_phone("sid100", "111")

    with pytest.raises(Conflict):
        service.create_seller(SellerCreate(id="sid100", password="pw", name="Again"))


def test_delete_seller_cascades_phones_and_orphans_products(shop):
    add_product(shop, "pid2001", 50, 8)  # no seller, already orphaned

    SellerService(shop).delete_seller("sid100")
    shop.expire_all()

    phones = shop.execute(select(SellerPhoneModel).where(SellerPhoneModel.seller_id == "sid100")).scalars().all()
    assert phones == []

    p1001 = shop.get(ProductModel, "pid1001")
    assert p1001 is not None
    assert p1001.seller_id is None
    assert p1001.quantity == 10

    with pytest.raises(NotFound):
        SellerService(shop).get_seller("sid100")


def test_inventory_sweep_zeroes_orphaned_products(shop):
    add_product(shop, "pid3001", 75, 5, seller_id="sid100")
    SellerService(shop).delete_seller("sid100")

    zeroed = InventoryService(shop).sweep_orphaned_products()
    shop.expire_all()

    assert zeroed == 3
    assert {p.quantity for p in shop.execute(select(ProductModel)).scalars()} == {0}

    # nothing left to sweep
    assert InventoryService(shop).sweep_orphaned_products() == 0


def test_sweep_keeps_products_with_a_seller(shop):
    assert InventoryService(shop).sweep_orphaned_products() == 0
    assert shop.get(ProductModel, "pid1001").quantity == 10


def test_restock(shop):
    product = InventoryService(shop).restock("pid1002", 6)

    assert product["quantity"] == 10

    with pytest.raises(NotFound):
        InventoryService(shop).restock("pid404", 1)


def test_product_crud(shop):
    service = ProductService(shop)

    created = service.create_product(
        ProductCreate(id="pid5000", type="shoe", color="red", size="9", gender="F", cost="1200", quantity=3, seller_id="sid100")
    )
    assert created["cost"] == 1200

    with pytest.raises(Conflict):
        service.create_product(ProductCreate(id="pid5000", type="shoe", cost="1"))

    with pytest.raises(NotFound):
        service.create_product(ProductCreate(id="pid5001", type="shoe", cost="1", seller_id="sid404"))

    updated = service.update_product("pid5000", ProductUpdate(quantity=7, color="blue"))
    assert updated["quantity"] == 7
    assert updated["color"] == "blue"
    assert updated["size"] == "9"

    service.delete_product("pid5000")
    with pytest.raises(NotFound):
        service.get_product("pid5000")


def test_update_product_clears_optional_attributes_with_null(shop):
    add_product(shop, "pid6000", 40, 2, color="green", size="M", gender="U")
    service = ProductService(shop)

    updated = service.update_product("pid6000", ProductUpdate(color=None, size=None))

    assert updated["color"] is None
    assert updated["size"] is None
    assert updated["gender"] == "U"
    assert updated["quantity"] == 2

    shop.expire_all()
    assert shop.get(ProductModel, "pid6000").color is None


def test_update_product_rejects_null_for_required_fields(shop):
    with pytest.raises(ValidationError):
        ProductService(shop).update_product("pid1002", ProductUpdate(cost=None))

    assert ProductService(shop).get_product("pid1002")["cost"] == 250


def test_product_in_a_cart_cannot_be_deleted(shop):
    with pytest.raises(Conflict):
        ProductService(shop).delete_product("pid1001")
