# storefront/api/routers/orders.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import CheckoutIn, PaymentOut
from storefront.services.order_service import OrderService

router = APIRouter(tags=["orders"])


@router.post("/checkout", response_model=PaymentOut, status_code=201)
def checkout(payload: CheckoutIn, db: Session = Depends(get_db)):
    """
    Pays for every unpurchased item of the cart and takes the items out of stock.
    Nothing is written when any product cannot cover its quantity.
    """
    return OrderService(db).checkout(payload.customer_id, payload.cart_id, payload.payment_type)


@router.get("/payments/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: str, db: Session = Depends(get_db)):
    return OrderService(db).get_payment(payment_id)
