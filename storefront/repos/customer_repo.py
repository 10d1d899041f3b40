# storefront/repos/customer_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.customer import CustomerModel


class CustomerRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: str) -> CustomerModel | None:
        return self.db.get(CustomerModel, customer_id)

    def get_customer_by_cart(self, cart_id: str) -> CustomerModel | None:
        return self.db.execute(
            select(CustomerModel).where(CustomerModel.cart_id == cart_id)
        ).scalar_one_or_none()

    def create_customer(self, customer: CustomerModel, cart: CartModel) -> CustomerModel:
        self.db.add(cart)
        self.db.flush()
        self.db.add(customer)
        self.db.flush()
        return customer

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
