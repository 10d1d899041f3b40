# storefront/data/models/cart_item.py
from datetime import date

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from storefront.data.database import Base

PURCHASED = "Y"
NOT_PURCHASED = "N"


class CartItemModel(Base):
    __tablename__ = "cart_items"

    cart_id = Column(String(20), ForeignKey("carts.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(String(20), ForeignKey("products.id"), primary_key=True)

    quantity_wished = Column(Integer, nullable=False)
    date_added = Column(Date, nullable=False, default=date.today)
    purchased = Column(String(1), nullable=False, default=NOT_PURCHASED)

    # set by checkout together with purchased = 'Y'
    payment_id = Column(String(40), ForeignKey("payments.id"), nullable=True, index=True)

    cart = relationship("CartModel", back_populates="items")
    product = relationship("ProductModel")

    __table_args__ = (
        CheckConstraint("purchased IN ('Y', 'N')", name="ck_cart_item_purchased_flag"),
        CheckConstraint("quantity_wished > 0", name="ck_cart_item_quantity_positive"),
    )
