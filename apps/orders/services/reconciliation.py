"""
Reconciliation service.

The administrator walks an active order line by line: marks each product
purchased, unavailable or forwarded, records what was actually bought and
at what price, and finally completes the order into the archive.
"""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.orders.models import (
    Order,
    OrderItem,
    ItemStatus,
    CompletedOrder,
    UnavailableItem,
)

from .exceptions import (
    OrderNotFoundError,
    OrderItemNotFoundError,
    InvalidStatusError,
    OrderHasPendingItemsError,
)

logger = logging.getLogger(__name__)

QUANTITY_STEP = Decimal('0.001')
PRICE_STEP = Decimal('0.01')
MAX_AMOUNT = Decimal('1000000000')


def parse_amount(value, step: Decimal) -> Optional[Decimal]:
    """
    Read a user-entered number.

    Returns None for anything that is not a finite, non-negative number
    (empty text, words, NaN, infinity). A decimal comma is accepted.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip().replace(',', '.'))
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount < 0 or amount >= MAX_AMOUNT:
        return None
    return amount.quantize(step, rounding=ROUND_HALF_UP)


def _lock_order(order_id: UUID) -> Order:
    try:
        return Order.objects.select_for_update().get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order with ID {order_id} not found")


def _get_item(order: Order, product_id: UUID) -> OrderItem:
    try:
        return order.items.get(product_id=product_id)
    except OrderItem.DoesNotExist:
        raise OrderItemNotFoundError(f"Order has no item for product {product_id}")


@transaction.atomic
def set_item_status(*, order_id: UUID, product_id: UUID, status: str) -> OrderItem:
    """
    Toggle the status of one order line.

    Setting the status an item already has returns it to pending; any other
    status is applied as given. Other lines are untouched.

    Raises:
        OrderNotFoundError: If the order doesn't exist
        OrderItemNotFoundError: If the order has no line for the product
        InvalidStatusError: If the status is unknown
    """
    if status not in ItemStatus.values:
        raise InvalidStatusError(f"Unknown item status: {status}")

    order = _lock_order(order_id)
    item = _get_item(order, product_id)

    item.status = ItemStatus.PENDING if item.status == status else status
    item.save(update_fields=['status'])

    logger.debug("Order %s item %s is now %s", order_id, product_id, item.status)
    return item


@transaction.atomic
def set_item_actuals(
    *,
    order_id: UUID,
    product_id: UUID,
    actual_quantity=None,
    price_per_unit=None,
) -> OrderItem:
    """
    Record the purchased quantity and unit price of one order line.

    Each value is optional. A value that does not parse as a finite
    non-negative number is ignored and the stored value is kept.

    Raises:
        OrderNotFoundError: If the order doesn't exist
        OrderItemNotFoundError: If the order has no line for the product
    """
    order = _lock_order(order_id)
    item = _get_item(order, product_id)

    changed = []
    quantity = parse_amount(actual_quantity, QUANTITY_STEP)
    if quantity is not None:
        item.actual_quantity = quantity
        changed.append('actual_quantity')

    price = parse_amount(price_per_unit, PRICE_STEP)
    if price is not None:
        item.price_per_unit = price
        changed.append('price_per_unit')

    if changed:
        item.save(update_fields=changed)
    return item


@transaction.atomic
def complete_order(*, order_id: UUID) -> CompletedOrder:
    """
    Archive a fully reconciled order.

    This is a multi-step operation wrapped in a transaction:
    1. Create the completed order with every line as recorded
    2. Create one unavailable-item record per unavailable line
    3. Delete the active order

    Returns:
        The created CompletedOrder

    Raises:
        OrderNotFoundError: If the order doesn't exist
        OrderHasPendingItemsError: If any line is still pending
    """
    order = _lock_order(order_id)
    items = list(order.items.all())

    pending = sum(1 for item in items if item.status == ItemStatus.PENDING)
    if pending:
        raise OrderHasPendingItemsError(
            f"Order still has {pending} pending item(s)."
        )

    completed = CompletedOrder.objects.create(
        source_order_id=order.id,
        restaurant=order.restaurant,
        chef=order.chef,
        date=order.date,
        completion_date=timezone.now(),
        items=[item.as_document() for item in items],
    )

    UnavailableItem.objects.bulk_create([
        UnavailableItem(
            product_id=item.product_id,
            product_snapshot=item.product_snapshot,
            order_id=order.id,
            restaurant=order.restaurant,
            date=order.date,
        )
        for item in items
        if item.status == ItemStatus.UNAVAILABLE
    ])

    order.delete()

    logger.info("Order %s completed as %s", order_id, completed.id)
    return completed
