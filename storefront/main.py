# storefront/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from storefront.api.routers import carts, customers, health, inventory, orders, products, reports, sellers
from storefront.data.database import init_db
import storefront.data.models  # noqa: F401
from storefront.domain.errors import StorefrontError
from storefront.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Initializing database")
    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")
    yield


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error_code, "message": exc.detail}},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront Order Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(StorefrontError, storefront_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(customers.router)
    app.include_router(sellers.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(inventory.router)
    app.include_router(reports.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
