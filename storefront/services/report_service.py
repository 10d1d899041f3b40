# storefront/services/report_service.py
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.domain.errors import NotFound, ValidationError
from storefront.repos.product_repo import ProductRepo
from storefront.repos.report_repo import ReportRepo
from storefront.services.customer_service import customer_to_dict
from storefront.services.product_service import product_to_dict

CENT = Decimal("0.01")


class ReportService:
    """Stateless read queries, none of them writes."""

    def __init__(self, db: Session):
        self.repo = ReportRepo(db)
        self.product_repo = ProductRepo(db)

    def most_popular_product(self) -> Dict[str, Any]:
        """
        Product with the highest summed quantity over purchased items.
        Equal sums resolve to the lowest product id.
        """
        top = self.repo.top_purchased_product()
        if top is None:
            raise NotFound("No product has been purchased yet")

        product_id, quantity_sold = top
        return {"product_id": product_id, "quantity_sold": quantity_sold}

    def search_products(
        self,
        type: str | None = None,
        color: str | None = None,
        size: str | None = None,
        gender: str | None = None,
        min_cost: Decimal | None = None,
        max_cost: Decimal | None = None,
        seller_id: str | None = None,
        in_stock: bool | None = None,
    ) -> List[Dict[str, Any]]:
        if min_cost is not None and min_cost < 0:
            raise ValidationError("min_cost must not be negative")
        if min_cost is not None and max_cost is not None and min_cost > max_cost:
            raise ValidationError("min_cost must not be greater than max_cost")

        products = self.product_repo.search(
            type=type,
            color=color,
            size=size,
            gender=gender,
            min_cost=min_cost,
            max_cost=max_cost,
            seller_id=seller_id,
            in_stock=in_stock,
        )
        return [product_to_dict(p) for p in products]

    def revenue_by_date(self, start: date | None = None, end: date | None = None) -> List[Dict[str, Any]]:
        if start is not None and end is not None and start > end:
            raise ValidationError("start must not be after end")

        return [
            {"payment_date": row.payment_date, "revenue": Decimal(row.revenue).quantize(CENT)}
            for row in self.repo.revenue_by_date(start, end)
        ]

    def customers_without_payments(self) -> List[Dict[str, Any]]:
        return [customer_to_dict(c) for c in self.repo.customers_without_payments()]

    def platform_profit(self) -> Decimal:
        """Sum of quantity * cost * commission / 100 over purchased items."""
        profit = sum(
            (
                Decimal(line.quantity_wished) * Decimal(line.cost) * Decimal(line.commission) / 100
                for line in self.repo.purchased_lines()
            ),
            Decimal("0"),
        )
        return profit.quantize(CENT)

    def seller_sales(self) -> List[Dict[str, Any]]:
        units = defaultdict(int)
        gross = defaultdict(lambda: Decimal("0"))

        for line in self.repo.purchased_lines():
            units[line.seller_id] += line.quantity_wished
            gross[line.seller_id] += Decimal(line.quantity_wished) * Decimal(line.cost)

        #orphaned products (seller deleted) are grouped under None, listed last
        ordered = sorted(units, key=lambda s: (s is None, s or ""))
        return [
            {
                "seller_id": seller_id,
                "units_sold": units[seller_id],
                "gross_sales": gross[seller_id].quantize(CENT),
            }
            for seller_id in ordered
        ]
