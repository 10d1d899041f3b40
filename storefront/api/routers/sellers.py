# storefront/api/routers/sellers.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import PhoneIn, SellerCreate, SellerOut
from storefront.services.seller_service import SellerService

router = APIRouter(prefix="/sellers", tags=["sellers"])


@router.post("/", response_model=SellerOut, status_code=201)
def create_seller(payload: SellerCreate, db: Session = Depends(get_db)):
    return SellerService(db).create_seller(payload)


@router.get("/{seller_id}", response_model=SellerOut)
def get_seller(seller_id: str, db: Session = Depends(get_db)):
    return SellerService(db).get_seller(seller_id)


@router.post("/{seller_id}/phones", response_model=SellerOut, status_code=201)
def add_phone(seller_id: str, payload: PhoneIn, db: Session = Depends(get_db)):
    return SellerService(db).add_phone(seller_id, payload.phone)


@router.delete("/{seller_id}", status_code=204)
def delete_seller(seller_id: str, db: Session = Depends(get_db)):
    SellerService(db).delete_seller(seller_id)
    return Response(status_code=204)
