# storefront/repos/cart_repo.py
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, joinedload

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel, NOT_PURCHASED, PURCHASED


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: str) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def lock_cart(self, cart_id: str) -> CartModel | None:
        #serializes checkouts and edits of one cart, taken before any item is read
        return self.db.execute(
            select(CartModel).where(CartModel.id == cart_id).with_for_update()
        ).scalar_one_or_none()

    def get_cart_item(self, cart_id: str, product_id: str) -> CartItemModel | None:
        return self.db.get(CartItemModel, (cart_id, product_id))

    def get_cart_items(self, cart_id: str, purchased: str | None = NOT_PURCHASED) -> List[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .options(joinedload(CartItemModel.product))
            .where(CartItemModel.cart_id == cart_id)
        )
        if purchased is not None:
            stmt = stmt.where(CartItemModel.purchased == purchased)
        stmt = stmt.order_by(CartItemModel.product_id).execution_options(populate_existing=True)
        return list(self.db.execute(stmt).scalars().all())

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def mark_purchased(self, cart_id: str, product_id: str, payment_id: str) -> int:
        """
        Guarded flip, only an unpurchased row changes.
        Returns rowcount, 0 means someone else already bought it.
        """
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
                CartItemModel.purchased == NOT_PURCHASED,
            )
            .values(purchased=PURCHASED, payment_id=payment_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_cart_item(self, cart_id: str, product_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
                CartItemModel.purchased == NOT_PURCHASED,
            )
        )
        return result.rowcount

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
