# storefront/data/models/seller.py
from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class SellerModel(Base):
    __tablename__ = "sellers"

    id = Column(String(20), primary_key=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=True)

    phones = relationship(
        "SellerPhoneModel",
        back_populates="seller",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class SellerPhoneModel(Base):
    __tablename__ = "seller_phone_numbers"

    seller_id = Column(String(20), ForeignKey("sellers.id", ondelete="CASCADE"), primary_key=True)
    phone = Column(String(15), primary_key=True)

    seller = relationship("SellerModel", back_populates="phones")
