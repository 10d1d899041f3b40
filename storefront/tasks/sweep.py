# storefront/tasks/sweep.py
from storefront.celery_worker import celery_app
from storefront.data.database import SessionLocal
from storefront.services.inventory_service import InventoryService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(name="storefront.tasks.sweep.sweep_orphaned_products_task")
def sweep_orphaned_products_task():
    logger.info("Inventory sweep task started")

    db = SessionLocal()
    try:
        count = InventoryService(db).sweep_orphaned_products()
    finally:
        db.close()

    return {"products_zeroed": count}
