"""
Supplier dispatch service.

Selected lines of active orders are moved into a dispatch record, each
tagged with the restaurant and chef it came from. Orders emptied by a
dispatch are deleted. Suppliers are assigned to the recorded lines
afterwards, one line at a time.
"""

import logging
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.orders.models import Order, OrderItem, DispatchRecord

from .exceptions import (
    NothingToDispatchError,
    DispatchRecordNotFoundError,
    DispatchEntryNotFoundError,
    UnknownSupplierError,
)

logger = logging.getLogger(__name__)


def normalize_selections(selections) -> list:
    """
    Turn ``(order_id, product_id)`` pairs into UUID pairs.

    Duplicates are dropped and the first-seen order is kept.
    """
    seen = []
    for order_id, product_id in selections:
        pair = (UUID(str(order_id)), UUID(str(product_id)))
        if pair not in seen:
            seen.append(pair)
    return seen


def resolve_selected_items(selections) -> list:
    """
    Find the active order lines named by ``(order_id, product_id)`` pairs.

    Pairs that match nothing are skipped. Returned lines follow the
    selection order and carry their order via ``select_related``.
    """
    pairs = normalize_selections(selections)
    if not pairs:
        return []

    order_ids = {order_id for order_id, _ in pairs}
    lookup = {
        (item.order_id, item.product_id): item
        for item in OrderItem.objects.select_related('order').filter(order_id__in=order_ids)
    }
    return [lookup[pair] for pair in pairs if pair in lookup]


@transaction.atomic
def dispatch_items(*, selections) -> DispatchRecord:
    """
    Move selected order lines to suppliers.

    This is a multi-step operation wrapped in a transaction:
    1. Remove the selected lines from their orders
    2. Delete orders that have no lines left
    3. Create one dispatch record with the removed lines

    Args:
        selections: Iterable of ``(order_id, product_id)`` pairs

    Returns:
        The created DispatchRecord

    Raises:
        NothingToDispatchError: If no pair matches an active order line
    """
    pairs = normalize_selections(selections)
    order_ids = {order_id for order_id, _ in pairs}

    # Lock the touched orders before reading their lines
    list(Order.objects.select_for_update().filter(id__in=order_ids))

    items = resolve_selected_items(pairs)
    if not items:
        raise NothingToDispatchError("None of the selected items are in active orders.")

    entries = [
        {
            'product_id': str(item.product_id),
            'product': item.product_snapshot,
            'quantity': str(item.dispatch_quantity),
            'unit': item.unit,
            'restaurant': item.order.restaurant,
            'chef': item.order.chef,
            'supplier': None,
        }
        for item in items
    ]

    touched = {item.order_id for item in items}
    OrderItem.objects.filter(id__in=[item.id for item in items]).delete()
    emptied, _ = Order.objects.filter(id__in=touched, items__isnull=True).delete()

    record = DispatchRecord.objects.create(date=timezone.now(), items=entries)

    logger.info(
        "Dispatch %s created with %d items, %d emptied orders removed",
        record.id, len(entries), emptied
    )
    return record


@transaction.atomic
def set_dispatch_supplier(*, record_id: UUID, index: int, supplier) -> DispatchRecord:
    """
    Assign a supplier to one line of a dispatch record.

    An empty supplier clears the assignment.

    Raises:
        DispatchRecordNotFoundError: If the record doesn't exist
        DispatchEntryNotFoundError: If the record has no line at ``index``
        UnknownSupplierError: If the supplier is not configured
    """
    supplier = (supplier or '').strip() or None
    if supplier is not None and supplier not in settings.KITCHEN_SUPPLIERS:
        raise UnknownSupplierError(f"Unknown supplier: {supplier}")

    try:
        record = DispatchRecord.objects.select_for_update().get(id=record_id)
    except DispatchRecord.DoesNotExist:
        raise DispatchRecordNotFoundError(f"Dispatch record with ID {record_id} not found")

    items = list(record.items)
    if index < 0 or index >= len(items):
        raise DispatchEntryNotFoundError(f"Dispatch record has no item at position {index}")

    items[index] = {**items[index], 'supplier': supplier}
    record.items = items
    record.save(update_fields=['items'])

    logger.info("Dispatch %s item %d assigned to %s", record_id, index, supplier)
    return record
