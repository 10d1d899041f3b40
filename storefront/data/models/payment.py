# storefront/data/models/payment.py
from datetime import date

from sqlalchemy import Column, Date, ForeignKey, Numeric, String

from storefront.data.database import Base


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(String(40), primary_key=True)
    payment_date = Column(Date, nullable=False, default=date.today, index=True)
    payment_type = Column(String(20), nullable=False)

    customer_id = Column(String(20), ForeignKey("customers.id"), nullable=False, index=True)
    cart_id = Column(String(20), ForeignKey("carts.id"), nullable=False)

    total_amount = Column(Numeric(14, 2), nullable=True)
