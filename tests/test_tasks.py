from storefront.data.models import ProductModel
from storefront.services.seller_service import SellerService
from storefront.tasks.sweep import sweep_orphaned_products_task


def test_sweep_task(shop, session_factory, monkeypatch):
    monkeypatch.setattr("storefront.tasks.sweep.SessionLocal", session_factory)
    SellerService(shop).delete_seller("sid100")

    result = sweep_orphaned_products_task()

    assert result == {"products_zeroed": 2}
    shop.expire_all()
    assert shop.get(ProductModel, "pid1001").quantity == 0
