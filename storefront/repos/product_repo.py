# storefront/repos/product_repo.py
from decimal import Decimal
from typing import Iterable, List

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def lock_products(self, product_ids: Iterable[str]) -> List[ProductModel]:
        #row locks taken in id order so two checkouts never wait on each other in a cycle
        ids = sorted(set(product_ids))
        return list(
            self.db.execute(
                select(ProductModel)
                .where(ProductModel.id.in_(ids))
                .order_by(ProductModel.id)
                .with_for_update()
            ).scalars().all()
        )

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.flush()

    def is_referenced(self, product_id: str) -> bool:
        return self.db.execute(
            select(CartItemModel.cart_id)
            .where(CartItemModel.product_id == product_id)
            .limit(1)
        ).first() is not None

    def decrement_quantity(self, product_id: str, amount: int) -> int:
        """
        Guarded decrement, the row only changes when enough stock is left.
        Returns rowcount, 0 means the stock would go negative.
        """
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.quantity >= amount)
            .values(quantity=ProductModel.quantity - amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def increment_quantity(self, product_id: str, amount: int) -> int:
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(quantity=ProductModel.quantity + amount)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def zero_orphaned(self) -> int:
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.seller_id.is_(None), ProductModel.quantity != 0)
            .values(quantity=0)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def search(
        self,
        type: str | None = None,
        color: str | None = None,
        size: str | None = None,
        gender: str | None = None,
        min_cost: Decimal | None = None,
        max_cost: Decimal | None = None,
        seller_id: str | None = None,
        in_stock: bool | None = None,
    ) -> List[ProductModel]:
        stmt = select(ProductModel)

        if type is not None:
            stmt = stmt.where(ProductModel.type == type)
        if color is not None:
            stmt = stmt.where(ProductModel.color == color)
        if size is not None:
            stmt = stmt.where(ProductModel.size == size)
        if gender is not None:
            stmt = stmt.where(ProductModel.gender == gender)
        if min_cost is not None:
            stmt = stmt.where(ProductModel.cost >= min_cost)
        if max_cost is not None:
            stmt = stmt.where(ProductModel.cost <= max_cost)
        if seller_id is not None:
            stmt = stmt.where(ProductModel.seller_id == seller_id)
        if in_stock is True:
            stmt = stmt.where(ProductModel.quantity > 0)
        elif in_stock is False:
            stmt = stmt.where(ProductModel.quantity == 0)

        return list(self.db.execute(stmt.order_by(ProductModel.id)).scalars().all())

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
