"""Business errors raised by the marketplace services.

Every error carries a stable ``code`` so clients can tell an out-of-stock
book apart from an empty cart or a missing record, plus the HTTP status the
API layer answers with.
"""
from typing import Any


class MarketplaceError(Exception):
    status_code = 400
    code = "marketplace_error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"detail": self.message, "code": self.code, **self.details}


class NotFoundError(MarketplaceError):
    status_code = 404
    code = "not_found"


class ForbiddenError(MarketplaceError):
    status_code = 403
    code = "forbidden"


class ValidationError(MarketplaceError):
    status_code = 400
    code = "validation_error"


class OutOfStockError(MarketplaceError):
    status_code = 400
    code = "out_of_stock"


class EmptyCartError(MarketplaceError):
    status_code = 400
    code = "empty_cart"
