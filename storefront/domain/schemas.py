# storefront/domain/schemas.py
from datetime import date
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    """Schema for registering a customer (its cart is created with it)."""

    id: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    address: str | None = Field(None, max_length=255)
    pincode: str | None = Field(None, max_length=10)
    phone: str | None = Field(None, max_length=15)
    cart_id: str | None = Field(None, min_length=1, max_length=20, description="generated when omitted")


class CustomerOut(BaseModel):
    id: str
    name: str
    address: str | None = None
    pincode: str | None = None
    phone: str | None = None
    cart_id: str

    model_config = ConfigDict(from_attributes=True)


class SellerCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    address: str | None = Field(None, max_length=255)
    phones: List[str] = Field(default_factory=list)


class PhoneIn(BaseModel):
    phone: str = Field(..., min_length=1, max_length=15)


class SellerOut(BaseModel):
    id: str
    name: str
    address: str | None = None
    phones: List[str]


class ProductCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=20)
    type: str = Field(..., min_length=1, max_length=30)
    color: str | None = Field(None, max_length=20)
    size: str | None = Field(None, max_length=10)
    gender: str | None = Field(None, max_length=10)
    commission: Decimal = Field(Decimal("0"), ge=0, le=100, description="percent of cost kept by the platform")
    cost: Decimal = Field(..., ge=0)
    quantity: int = Field(0, ge=0)
    seller_id: str | None = None


class ProductUpdate(BaseModel):
    type: str | None = Field(None, min_length=1, max_length=30)
    color: str | None = Field(None, max_length=20)
    size: str | None = Field(None, max_length=10)
    gender: str | None = Field(None, max_length=10)
    commission: Decimal | None = Field(None, ge=0, le=100)
    cost: Decimal | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)


class ProductOut(BaseModel):
    id: str
    type: str
    color: str | None = None
    size: str | None = None
    gender: str | None = None
    commission: Decimal
    cost: Decimal
    quantity: int
    seller_id: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RestockIn(BaseModel):
    amount: int = Field(..., gt=0)


class SweepOut(BaseModel):
    products_zeroed: int


class ItemIn(BaseModel):
    """Schema for adding a product to the cart."""

    product_id: str = Field(..., min_length=1, max_length=20)
    quantity: int = Field(..., gt=0, description="must be > 0")


class QuantityIn(BaseModel):
    quantity: int = Field(..., gt=0)


class CartItemOut(BaseModel):
    product_id: str
    quantity_wished: int
    cost: Decimal
    line_total: Decimal
    date_added: date


class CartOut(BaseModel):
    cart_id: str
    customer_id: str
    items: List[CartItemOut]
    total: Decimal


class CheckoutIn(BaseModel):
    customer_id: str = Field(..., min_length=1)
    cart_id: str = Field(..., min_length=1)
    payment_type: str = Field(..., min_length=1, max_length=20)


class PaymentItemOut(BaseModel):
    product_id: str
    quantity_wished: int
    cost: Decimal
    line_total: Decimal


class PaymentOut(BaseModel):
    """Payment record produced by a checkout."""

    id: str
    customer_id: str
    cart_id: str
    payment_type: str
    payment_date: date
    total_amount: Decimal | None
    items: List[PaymentItemOut]


class PopularProductOut(BaseModel):
    product_id: str
    quantity_sold: int


class RevenueByDateOut(BaseModel):
    payment_date: date
    revenue: Decimal


class ProfitOut(BaseModel):
    profit: Decimal


class SellerSalesOut(BaseModel):
    seller_id: str | None
    units_sold: int
    gross_sales: Decimal
