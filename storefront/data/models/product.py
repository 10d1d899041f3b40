# storefront/data/models/product.py
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(20), primary_key=True)
    type = Column(String(30), nullable=False)
    color = Column(String(20), nullable=True)
    size = Column(String(10), nullable=True)
    gender = Column(String(10), nullable=True)

    commission = Column(Numeric(5, 2), nullable=False, default=0)  # percent
    cost = Column(Numeric(12, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    #seller removed -> product stays, reference nulled by the db
    seller_id = Column(String(20), ForeignKey("sellers.id", ondelete="SET NULL"), nullable=True, index=True)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_product_quantity_non_negative"),
        CheckConstraint("commission >= 0 AND commission <= 100", name="ck_product_commission_percent"),
    )
