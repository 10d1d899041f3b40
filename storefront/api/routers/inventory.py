# storefront/api/routers/inventory.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import SweepOut
from storefront.services.inventory_service import InventoryService

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.post("/sweep", response_model=SweepOut)
def sweep_orphaned_products(db: Session = Depends(get_db)):
    return {"products_zeroed": InventoryService(db).sweep_orphaned_products()}
