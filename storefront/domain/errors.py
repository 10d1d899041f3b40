# storefront/domain/errors.py
"""
Domain errors raised by services.
Each one knows the HTTP status and error code the api renders it with.
"""


class StorefrontError(Exception):
    status_code = 400
    error_code = "STOREFRONT_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFound(StorefrontError):
    """Missing customer / cart / product / seller reference."""

    status_code = 404
    error_code = "NOT_FOUND"


class Conflict(StorefrontError):
    """Duplicate primary key or a write against read-only state."""

    status_code = 409
    error_code = "CONFLICT"


class InsufficientInventory(StorefrontError):
    status_code = 409
    error_code = "INSUFFICIENT_INVENTORY"

    def __init__(self, product_id: str, requested: int):
        super().__init__(f"Not enough stock of product {product_id} to sell {requested}")
        self.product_id = product_id
        self.requested = requested


class EmptyCart(StorefrontError):
    status_code = 409
    error_code = "EMPTY_CART"

    def __init__(self, cart_id: str):
        super().__init__(f"Cart {cart_id} has no unpurchased items")
        self.cart_id = cart_id


class ValidationError(StorefrontError):
    status_code = 422
    error_code = "VALIDATION_ERROR"
