# storefront/services/seller_service.py
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.seller import SellerModel, SellerPhoneModel
from storefront.domain.errors import Conflict, NotFound
from storefront.domain.schemas import SellerCreate
from storefront.repos.seller_repo import SellerRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import hash_password

logger = get_logger(__name__)


def seller_to_dict(seller: SellerModel) -> Dict[str, Any]:
    return {
        "id": seller.id,
        "name": seller.name,
        "address": seller.address,
        "phones": sorted(p.phone for p in seller.phones),
    }


class SellerService:
    def __init__(self, db: Session):
        self.repo = SellerRepo(db)

    def create_seller(self, payload: SellerCreate) -> Dict[str, Any]:
        if self.repo.get_seller(payload.id):
            raise Conflict(f"Seller {payload.id} already exists")

        seller = SellerModel(
            id=payload.id,
            password_hash=hash_password(payload.password),
            name=payload.name,
            address=payload.address,
            phones=[SellerPhoneModel(phone=p) for p in dict.fromkeys(payload.phones)],
        )

        try:
            self.repo.create_seller(seller)
            self.repo.commit()
        except IntegrityError:
            self.repo.rollback()
            raise Conflict(f"Seller {payload.id} already exists")

        logger.info(f"Created seller {seller.id} with {len(seller.phones)} phone number(s)")
        return seller_to_dict(seller)

    def get_seller(self, seller_id: str) -> Dict[str, Any]:
        seller = self.repo.get_seller(seller_id)
        if not seller:
            raise NotFound(f"Seller {seller_id} not found")
        return seller_to_dict(seller)

    def add_phone(self, seller_id: str, phone: str) -> Dict[str, Any]:
        seller = self.repo.get_seller(seller_id)
        if not seller:
            raise NotFound(f"Seller {seller_id} not found")

        if self.repo.get_phone(seller_id, phone):
            raise Conflict(f"Seller {seller_id} already has phone {phone}")

        self.repo.add_phone(SellerPhoneModel(seller_id=seller_id, phone=phone))
        self.repo.commit()

        return seller_to_dict(seller)

    def delete_seller(self, seller_id: str) -> None:
        """
        Removes the seller. Phone numbers go with it, products stay
        with seller_id = NULL until the inventory sweep zeroes their stock.
        """
        seller = self.repo.get_seller(seller_id)
        if not seller:
            raise NotFound(f"Seller {seller_id} not found")

        self.repo.delete_seller(seller)
        self.repo.commit()

        logger.info(f"Deleted seller {seller_id}")
