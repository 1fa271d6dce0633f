"""
Orders app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations run in a single transaction.
"""

from .exceptions import (
    OrdersServiceError,
    OrderNotFoundError,
    OrderItemNotFoundError,
    EmptyOrderError,
    DuplicateOrderItemError,
    UnknownProductError,
    ProductNotAvailableError,
    InvalidStatusError,
    OrderHasPendingItemsError,
    NothingToDispatchError,
    DispatchRecordNotFoundError,
    DispatchEntryNotFoundError,
    UnknownSupplierError,
)

from .order_submission import (
    submit_order,
    get_order_by_id,
    list_active_orders,
)

from .reconciliation import (
    parse_amount,
    set_item_status,
    set_item_actuals,
    complete_order,
)

from .dispatch import (
    dispatch_items,
    set_dispatch_supplier,
    resolve_selected_items,
)

from .shopping_list import (
    build_shopping_list_text,
)

from .history import (
    list_completed_orders,
    list_unavailable_items,
    list_dispatch_records,
    group_by_day,
)


__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderNotFoundError',
    'OrderItemNotFoundError',
    'EmptyOrderError',
    'DuplicateOrderItemError',
    'UnknownProductError',
    'ProductNotAvailableError',
    'InvalidStatusError',
    'OrderHasPendingItemsError',
    'NothingToDispatchError',
    'DispatchRecordNotFoundError',
    'DispatchEntryNotFoundError',
    'UnknownSupplierError',

    # Submission
    'submit_order',
    'get_order_by_id',
    'list_active_orders',

    # Reconciliation
    'parse_amount',
    'set_item_status',
    'set_item_actuals',
    'complete_order',

    # Dispatch
    'dispatch_items',
    'set_dispatch_supplier',
    'resolve_selected_items',
    'build_shopping_list_text',

    # History
    'list_completed_orders',
    'list_unavailable_items',
    'list_dispatch_records',
    'group_by_day',
]
