# storefront/repos/seller_repo.py
from sqlalchemy.orm import Session

from storefront.data.models.seller import SellerModel, SellerPhoneModel


class SellerRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_seller(self, seller_id: str) -> SellerModel | None:
        return self.db.get(SellerModel, seller_id)

    def get_phone(self, seller_id: str, phone: str) -> SellerPhoneModel | None:
        return self.db.get(SellerPhoneModel, (seller_id, phone))

    def create_seller(self, seller: SellerModel) -> SellerModel:
        self.db.add(seller)
        self.db.flush()
        return seller

    def add_phone(self, phone: SellerPhoneModel) -> SellerPhoneModel:
        self.db.add(phone)
        self.db.flush()
        return phone

    def delete_seller(self, seller: SellerModel) -> None:
        # phones cascade, products.seller_id set null, both done by the db
        self.db.delete(seller)
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
