# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import CartOut, ItemIn, QuantityIn
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/customers/{customer_id}/cart", tags=["carts"])


@router.get("", response_model=CartOut)
def get_cart(customer_id: str, db: Session = Depends(get_db)):
    return CartService(db).get_cart(customer_id)


@router.post("/items", response_model=CartOut)
def add_item(customer_id: str, payload: ItemIn, db: Session = Depends(get_db)):
    return CartService(db).add_product(
        customer_id=customer_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.put("/items/{product_id}", response_model=CartOut)
def set_item_quantity(
    customer_id: str,
    product_id: str,
    payload: QuantityIn,
    db: Session = Depends(get_db),
):
    return CartService(db).set_quantity(customer_id, product_id, payload.quantity)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(customer_id: str, product_id: str, db: Session = Depends(get_db)):
    return CartService(db).remove_product(customer_id, product_id)
