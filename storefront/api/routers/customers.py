# storefront/api/routers/customers.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import CustomerCreate, CustomerOut, PaymentOut
from storefront.services.customer_service import CustomerService
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("/", response_model=CustomerOut, status_code=201)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    return CustomerService(db).create_customer(payload)


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    return CustomerService(db).get_customer(customer_id)


@router.get("/{customer_id}/orders", response_model=List[PaymentOut])
def order_history(customer_id: str, db: Session = Depends(get_db)):
    return OrderService(db).order_history(customer_id)
