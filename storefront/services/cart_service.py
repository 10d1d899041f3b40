# storefront/services/cart_service.py
from datetime import date
from decimal import Decimal
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel, NOT_PURCHASED, PURCHASED
from storefront.domain.errors import Conflict, NotFound, ValidationError
from storefront.repos.cart_repo import CartRepo
from storefront.repos.customer_repo import CustomerRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases of the cart domain.
    commands (add, set quantity, remove) only touch unpurchased items,
    purchased items are history and read only.
    query (get) only reads.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.customer_repo = CustomerRepo(db)
        self.product_repo = ProductRepo(db)

    def _cart_id_of(self, customer_id: str) -> str:
        customer = self.customer_repo.get_customer(customer_id)
        if not customer:
            raise NotFound(f"Customer {customer_id} not found")
        return customer.cart_id

    #query
    def get_cart(self, customer_id: str) -> Dict[str, Any]:
        cart_id = self._cart_id_of(customer_id)
        items = self.repo.get_cart_items(cart_id)

        lines = [
            {
                "product_id": i.product_id,
                "quantity_wished": i.quantity_wished,
                "cost": i.product.cost,
                "line_total": i.product.cost * i.quantity_wished,
                "date_added": i.date_added,
            }
            for i in items
        ]

        return {
            "cart_id": cart_id,
            "customer_id": customer_id,
            "items": lines,
            "total": sum((line["line_total"] for line in lines), Decimal("0.00")),
        }

    #commands
    def add_product(self, customer_id: str, product_id: str, quantity: int) -> Dict[str, Any]:
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")

        cart_id = self._cart_id_of(customer_id)

        if not self.product_repo.get_product(product_id):
            raise NotFound(f"Product {product_id} not found")

        try:
            self._upsert_item(cart_id, product_id, quantity)
            self.repo.commit()
        except IntegrityError:
            # a parallel request inserted the same (cart, product) row first,
            # second pass finds it and takes the update branch
            self.repo.rollback()
            logger.info(f"Product {product_id} inserted concurrently into cart {cart_id}, retrying as update")
            self._upsert_item(cart_id, product_id, quantity)
            self.repo.commit()

        return self.get_cart(customer_id)

    def _upsert_item(self, cart_id: str, product_id: str, quantity: int) -> None:
        self.repo.lock_cart(cart_id)
        existing_item = self.repo.get_cart_item(cart_id, product_id)

        if existing_item and existing_item.purchased == PURCHASED:
            # (cart, product) is the key and that row is already history
            raise Conflict(f"Product {product_id} was already purchased with cart {cart_id}")

        if existing_item:
            logger.info(
                f"Product {product_id} already in cart {cart_id}, quantity "
                f"{existing_item.quantity_wished} -> {existing_item.quantity_wished + quantity}"
            )
            existing_item.quantity_wished += quantity
        else:
            logger.info(f"Adding product {product_id} to cart {cart_id}")
            self.repo.add_cart_item(
                CartItemModel(
                    cart_id=cart_id,
                    product_id=product_id,
                    quantity_wished=quantity,
                    date_added=date.today(),
                    purchased=NOT_PURCHASED,
                )
            )

    def set_quantity(self, customer_id: str, product_id: str, quantity: int) -> Dict[str, Any]:
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")

        cart_id = self._cart_id_of(customer_id)
        self.repo.lock_cart(cart_id)
        item = self.repo.get_cart_item(cart_id, product_id)

        if not item:
            raise NotFound(f"Product {product_id} is not in cart {cart_id}")

        if item.purchased == PURCHASED:
            raise Conflict(f"Product {product_id} in cart {cart_id} is already purchased")

        item.quantity_wished = quantity
        self.repo.commit()

        logger.info(f"Cart {cart_id}: product {product_id} quantity set to {quantity}")
        return self.get_cart(customer_id)

    def remove_product(self, customer_id: str, product_id: str) -> Dict[str, Any]:
        cart_id = self._cart_id_of(customer_id)
        self.repo.lock_cart(cart_id)
        item = self.repo.get_cart_item(cart_id, product_id)

        if not item:
            raise NotFound(f"Product {product_id} is not in cart {cart_id}")

        if item.purchased == PURCHASED:
            raise Conflict(f"Product {product_id} in cart {cart_id} is already purchased")

        self.repo.delete_cart_item(cart_id, product_id)
        self.repo.commit()

        logger.info(f"Removed product {product_id} from cart {cart_id}")
        return self.get_cart(customer_id)
