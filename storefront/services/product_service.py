# storefront/services/product_service.py
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import Conflict, NotFound, ValidationError
from storefront.domain.schemas import ProductCreate, ProductUpdate
from storefront.repos.product_repo import ProductRepo
from storefront.repos.seller_repo import SellerRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = ("type", "commission", "cost", "quantity")


def product_to_dict(product: ProductModel) -> Dict[str, Any]:
    return {
        "id": product.id,
        "type": product.type,
        "color": product.color,
        "size": product.size,
        "gender": product.gender,
        "commission": product.commission,
        "cost": product.cost,
        "quantity": product.quantity,
        "seller_id": product.seller_id,
    }


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)
        self.seller_repo = SellerRepo(db)

    def create_product(self, payload: ProductCreate) -> Dict[str, Any]:
        if self.repo.get_product(payload.id):
            raise Conflict(f"Product {payload.id} already exists")

        if payload.seller_id is not None and not self.seller_repo.get_seller(payload.seller_id):
            raise NotFound(f"Seller {payload.seller_id} not found")

        product = ProductModel(**payload.model_dump())

        try:
            self.repo.create_product(product)
            self.repo.commit()
        except IntegrityError:
            self.repo.rollback()
            raise Conflict(f"Product {payload.id} already exists")

        logger.info(f"Created product {product.id} (quantity {product.quantity})")
        return product_to_dict(product)

    def get_product(self, product_id: str) -> Dict[str, Any]:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound(f"Product {product_id} not found")
        return product_to_dict(product)

    def update_product(self, product_id: str, payload: ProductUpdate) -> Dict[str, Any]:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound(f"Product {product_id} not found")

        # an explicit null clears color, size or gender
        changes = payload.model_dump(exclude_unset=True)
        cleared = [f for f in REQUIRED_FIELDS if f in changes and changes[f] is None]
        if cleared:
            raise ValidationError(f"Product fields cannot be null: {', '.join(cleared)}")

        for field, value in changes.items():
            setattr(product, field, value)

        self.repo.commit()

        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return product_to_dict(product)

    def delete_product(self, product_id: str) -> None:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFound(f"Product {product_id} not found")

        #cart items (also purchased history) point at it
        if self.repo.is_referenced(product_id):
            raise Conflict(f"Product {product_id} is referenced by cart items")

        self.repo.delete_product(product)
        self.repo.commit()

        logger.info(f"Deleted product {product_id}")
