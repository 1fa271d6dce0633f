"""
Domain-specific exceptions for orders app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class OrdersServiceError(Exception):
    """Base exception for all orders service errors."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Raised when an active order does not exist."""
    pass


class OrderItemNotFoundError(OrdersServiceError):
    """Raised when an order has no line for the given product."""
    pass


class EmptyOrderError(OrdersServiceError):
    """Raised when an order is submitted without products."""
    pass


class DuplicateOrderItemError(OrdersServiceError):
    """Raised when the same product appears twice in one order."""
    pass


class UnknownProductError(OrdersServiceError):
    """Raised when an ordered product is not in the catalog."""
    pass


class ProductNotAvailableError(OrdersServiceError):
    """Raised when a product is not offered to the ordering restaurant."""
    pass


class InvalidStatusError(OrdersServiceError):
    """Raised when an item status is not one of the known statuses."""
    pass


class OrderHasPendingItemsError(OrdersServiceError):
    """Raised when completing an order that still has pending items."""
    pass


class NothingToDispatchError(OrdersServiceError):
    """Raised when none of the selected items exist in active orders."""
    pass


class DispatchRecordNotFoundError(OrdersServiceError):
    """Raised when a dispatch record does not exist."""
    pass


class DispatchEntryNotFoundError(OrdersServiceError):
    """Raised when a dispatch record has no entry at the given index."""
    pass


class UnknownSupplierError(OrdersServiceError):
    """Raised when a supplier is not in the configured supplier list."""
    pass
