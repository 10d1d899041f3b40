#every model imported here so SQLAlchemy registers it in Base.metadata

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.customer import CustomerModel
from storefront.data.models.payment import PaymentModel
from storefront.data.models.product import ProductModel
from storefront.data.models.seller import SellerModel, SellerPhoneModel

__all__ = [
    "CartModel",
    "CartItemModel",
    "CustomerModel",
    "PaymentModel",
    "ProductModel",
    "SellerModel",
    "SellerPhoneModel",
]
