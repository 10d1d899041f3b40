# storefront/services/inventory_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.domain.errors import NotFound, ValidationError
from storefront.repos.product_repo import ProductRepo
from storefront.services.product_service import product_to_dict
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class InventoryService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def sweep_orphaned_products(self) -> int:
        """
        Products whose seller was deleted keep existing with seller_id NULL,
        they can no longer be sold so their stock is zeroed.
        """
        count = self.repo.zero_orphaned()
        self.repo.commit()

        logger.info(f"Inventory sweep zeroed {count} orphaned product(s)")
        return count

    def restock(self, product_id: str, amount: int) -> Dict[str, Any]:
        if amount <= 0:
            raise ValidationError("Restock amount must be greater than 0")

        if not self.repo.get_product(product_id):
            raise NotFound(f"Product {product_id} not found")

        self.repo.increment_quantity(product_id, amount)
        self.repo.commit()

        product = self.repo.get_product(product_id)
        logger.info(f"Restocked product {product_id} by {amount}, now {product.quantity}")
        return product_to_dict(product)
