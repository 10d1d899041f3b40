# storefront/api/routers/products.py
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import ProductCreate, ProductOut, ProductUpdate, RestockIn
from storefront.services.inventory_service import InventoryService
from storefront.services.product_service import ProductService
from storefront.services.report_service import ReportService

router = APIRouter(prefix="/products", tags=["products"])


@router.post("/", response_model=ProductOut, status_code=201)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return ProductService(db).create_product(payload)


@router.get("/", response_model=List[ProductOut])
def search_products(
    type: str | None = Query(None),
    color: str | None = Query(None),
    size: str | None = Query(None),
    gender: str | None = Query(None),
    min_cost: Decimal | None = Query(None),
    max_cost: Decimal | None = Query(None),
    seller_id: str | None = Query(None),
    in_stock: bool | None = Query(None),
    db: Session = Depends(get_db),
):
    return ReportService(db).search_products(
        type=type,
        color=color,
        size=size,
        gender=gender,
        min_cost=min_cost,
        max_cost=max_cost,
        seller_id=seller_id,
        in_stock=in_stock,
    )


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    return ProductService(db).get_product(product_id)


@router.patch("/{product_id}", response_model=ProductOut)
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    return ProductService(db).update_product(product_id, payload)


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    ProductService(db).delete_product(product_id)
    return Response(status_code=204)


@router.post("/{product_id}/restock", response_model=ProductOut)
def restock(product_id: str, payload: RestockIn, db: Session = Depends(get_db)):
    return InventoryService(db).restock(product_id, payload.amount)
