# storefront/services/customer_service.py
import uuid
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.customer import CustomerModel
from storefront.domain.errors import Conflict, NotFound
from storefront.domain.schemas import CustomerCreate
from storefront.repos.cart_repo import CartRepo
from storefront.repos.customer_repo import CustomerRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import hash_password

logger = get_logger(__name__)


def new_cart_id() -> str:
    return f"crt{uuid.uuid4().hex[:12]}"


def customer_to_dict(customer: CustomerModel) -> Dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "address": customer.address,
        "pincode": customer.pincode,
        "phone": customer.phone,
        "cart_id": customer.cart_id,
    }


class CustomerService:
    def __init__(self, db: Session):
        self.repo = CustomerRepo(db)
        self.cart_repo = CartRepo(db)

    def create_customer(self, payload: CustomerCreate) -> Dict[str, Any]:
        """Customer and its cart are created together, a customer never exists without one."""
        if self.repo.get_customer(payload.id):
            raise Conflict(f"Customer {payload.id} already exists")

        cart_id = payload.cart_id or new_cart_id()
        if self.cart_repo.get_cart(cart_id):
            raise Conflict(f"Cart {cart_id} already exists")

        customer = CustomerModel(
            id=payload.id,
            password_hash=hash_password(payload.password),
            name=payload.name,
            address=payload.address,
            pincode=payload.pincode,
            phone=payload.phone,
            cart_id=cart_id,
        )

        try:
            self.repo.create_customer(customer, CartModel(id=cart_id))
            self.repo.commit()
        except IntegrityError:
            self.repo.rollback()
            raise Conflict(f"Customer {payload.id} or cart {cart_id} already exists")

        logger.info(f"Created customer {payload.id} with cart {cart_id}")
        return customer_to_dict(customer)

    def get_customer(self, customer_id: str) -> Dict[str, Any]:
        customer = self.repo.get_customer(customer_id)
        if not customer:
            raise NotFound(f"Customer {customer_id} not found")
        return customer_to_dict(customer)
