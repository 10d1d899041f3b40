# storefront/repos/report_repo.py
from datetime import date
from typing import List, Tuple

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel, PURCHASED
from storefront.data.models.customer import CustomerModel
from storefront.data.models.payment import PaymentModel
from storefront.data.models.product import ProductModel


class ReportRepo:
    """Read only aggregations, nothing here writes."""

    def __init__(self, db: Session):
        self.db = db

    def top_purchased_product(self) -> Tuple[str, int] | None:
        total = func.sum(CartItemModel.quantity_wished).label("total")
        row = self.db.execute(
            select(CartItemModel.product_id, total)
            .where(CartItemModel.purchased == PURCHASED)
            .group_by(CartItemModel.product_id)
            # ties: lowest product id wins
            .order_by(total.desc(), CartItemModel.product_id.asc())
            .limit(1)
        ).first()
        if row is None:
            return None
        return row.product_id, int(row.total)

    def revenue_by_date(self, start: date | None = None, end: date | None = None):
        revenue = func.sum(PaymentModel.total_amount).label("revenue")
        stmt = select(PaymentModel.payment_date, revenue).where(PaymentModel.total_amount.is_not(None))
        if start is not None:
            stmt = stmt.where(PaymentModel.payment_date >= start)
        if end is not None:
            stmt = stmt.where(PaymentModel.payment_date <= end)
        return self.db.execute(
            stmt.group_by(PaymentModel.payment_date).order_by(PaymentModel.payment_date)
        ).all()

    def customers_without_payments(self) -> List[CustomerModel]:
        has_payment = exists().where(PaymentModel.customer_id == CustomerModel.id)
        return list(
            self.db.execute(
                select(CustomerModel).where(~has_payment).order_by(CustomerModel.id)
            ).scalars().all()
        )

    def purchased_lines(self):
        """(product_id, seller_id, quantity_wished, cost, commission) per purchased item."""
        return self.db.execute(
            select(
                CartItemModel.product_id,
                ProductModel.seller_id,
                CartItemModel.quantity_wished,
                ProductModel.cost,
                ProductModel.commission,
            )
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.purchased == PURCHASED)
            .order_by(CartItemModel.product_id)
        ).all()
