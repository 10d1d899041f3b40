# storefront/data/models/customer.py
from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class CustomerModel(Base):
    __tablename__ = "customers"

    id = Column(String(20), primary_key=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=True)
    pincode = Column(String(10), nullable=True)
    phone = Column(String(15), nullable=True)

    #1:1, every customer owns exactly one cart
    cart_id = Column(String(20), ForeignKey("carts.id"), nullable=False, unique=True)

    cart = relationship("CartModel", back_populates="customer")
