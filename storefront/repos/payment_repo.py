# storefront/repos/payment_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.payment import PaymentModel


class PaymentRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_payment(self, payment: PaymentModel) -> PaymentModel:
        self.db.add(payment)
        self.db.flush()
        return payment

    def get_payment(self, payment_id: str) -> PaymentModel | None:
        return self.db.get(PaymentModel, payment_id)

    def get_payments_by_customer(self, customer_id: str) -> List[PaymentModel]:
        return list(
            self.db.execute(
                select(PaymentModel)
                .where(PaymentModel.customer_id == customer_id)
                .order_by(PaymentModel.payment_date.desc(), PaymentModel.id)
            ).scalars().all()
        )

    def get_payment_items(self, payment_id: str) -> List[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .options(joinedload(CartItemModel.product))
                .where(CartItemModel.payment_id == payment_id)
                .order_by(CartItemModel.product_id)
            ).scalars().all()
        )
