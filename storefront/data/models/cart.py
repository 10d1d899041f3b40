# storefront/data/models/cart.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(String(20), primary_key=True)

    customer = relationship("CustomerModel", back_populates="cart", uselist=False)
    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
