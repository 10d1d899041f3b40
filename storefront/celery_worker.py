# storefront/celery_worker.py
from celery import Celery

# every model registered before any mapper is configured
import storefront.data.models  # noqa: F401

from storefront.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, INVENTORY_SWEEP_SECONDS

celery_app = Celery(
    "storefront",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# tasks must be imported explicitly so the worker registers them
celery_app.conf.imports = (
    "storefront.tasks.sweep",
)

celery_app.conf.beat_schedule = {
    "sweep-orphaned-products": {
        "task": "storefront.tasks.sweep.sweep_orphaned_products_task",
        "schedule": INVENTORY_SWEEP_SECONDS,
    },
}

celery_app.conf.timezone = "UTC"
