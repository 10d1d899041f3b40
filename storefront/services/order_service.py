# storefront/services/order_service.py
import uuid
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.payment import PaymentModel
from storefront.domain.errors import Conflict, EmptyCart, InsufficientInventory, NotFound, ValidationError
from storefront.repos.cart_repo import CartRepo
from storefront.repos.customer_repo import CustomerRepo
from storefront.repos.payment_repo import PaymentRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger
from storefront.utils.retry import db_retry

logger = get_logger(__name__)


def new_payment_id() -> str:
    return f"pay{uuid.uuid4().hex}"


def payment_to_dict(payment: PaymentModel, items: List[CartItemModel]) -> Dict[str, Any]:
    return {
        "id": payment.id,
        "customer_id": payment.customer_id,
        "cart_id": payment.cart_id,
        "payment_type": payment.payment_type,
        "payment_date": payment.payment_date,
        "total_amount": payment.total_amount,
        "items": [
            {
                "product_id": i.product_id,
                "quantity_wished": i.quantity_wished,
                "cost": i.product.cost,
                "line_total": i.product.cost * i.quantity_wished,
            }
            for i in items
        ],
    }


class OrderService:
    """
    Checkout and order history.
    Payment insert, inventory decrement and the purchased flag commit
    together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = PaymentRepo(db)
        self.cart_repo = CartRepo(db)
        self.customer_repo = CustomerRepo(db)
        self.product_repo = ProductRepo(db)

    @db_retry()
    def checkout(self, customer_id: str, cart_id: str, payment_type: str) -> Dict[str, Any]:
        """
        Use case: turn every unpurchased item of the cart into one payment.

        1. customer must own the cart, the cart row is locked first
        2. lock the products and compute the total
        3. insert the payment
        4. decrement stock (guarded, never below zero) and flip items to 'Y'
           (guarded, an item already bought by a parallel checkout is a Conflict)

        Any failure rolls the whole transaction back. Lock contention
        (OperationalError) re-runs the whole thing.
        """
        try:
            record = self._checkout(customer_id, cart_id, payment_type)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            f"Checkout of cart {cart_id} committed: payment {record['id']}, "
            f"total {record['total_amount']}, {len(record['items'])} item(s)"
        )
        return record

    def _checkout(self, customer_id: str, cart_id: str, payment_type: str) -> Dict[str, Any]:
        if not payment_type or not payment_type.strip():
            raise ValidationError("Payment type is required")

        customer = self.customer_repo.get_customer(customer_id)
        if not customer or customer.cart_id != cart_id:
            raise NotFound(f"Cart {cart_id} of customer {customer_id} not found")

        if not self.cart_repo.lock_cart(cart_id):
            raise NotFound(f"Cart {cart_id} not found")

        items = self.cart_repo.get_cart_items(cart_id)
        if not items:
            raise EmptyCart(cart_id)

        logger.info(f"Checkout of cart {cart_id} for customer {customer_id} started ({len(items)} item(s))")

        products = {p.id: p for p in self.product_repo.lock_products(i.product_id for i in items)}

        total = sum(
            (products[i.product_id].cost * i.quantity_wished for i in items),
            Decimal("0.00"),
        )

        payment = self.repo.create_payment(
            PaymentModel(
                id=new_payment_id(),
                payment_date=date.today(),
                payment_type=payment_type.strip(),
                customer_id=customer_id,
                cart_id=cart_id,
                total_amount=total,
            )
        )

        #inventory decrement is part of the same transaction
        for item in items:
            rowcount = self.product_repo.decrement_quantity(item.product_id, item.quantity_wished)
            if rowcount == 0:
                logger.warning(
                    f"Checkout of cart {cart_id} aborted: product {item.product_id} "
                    f"cannot cover {item.quantity_wished}"
                )
                raise InsufficientInventory(item.product_id, item.quantity_wished)

            if self.cart_repo.mark_purchased(cart_id, item.product_id, payment.id) == 0:
                raise Conflict(f"Product {item.product_id} in cart {cart_id} was purchased by another checkout")

        return payment_to_dict(payment, items)

    def get_payment(self, payment_id: str) -> Dict[str, Any]:
        payment = self.repo.get_payment(payment_id)
        if not payment:
            raise NotFound(f"Payment {payment_id} not found")
        return payment_to_dict(payment, self.repo.get_payment_items(payment_id))

    def order_history(self, customer_id: str) -> List[Dict[str, Any]]:
        """Payments of the customer, newest first, each with the items it bought."""
        if not self.customer_repo.get_customer(customer_id):
            raise NotFound(f"Customer {customer_id} not found")

        return [
            payment_to_dict(p, self.repo.get_payment_items(p.id))
            for p in self.repo.get_payments_by_customer(customer_id)
        ]
