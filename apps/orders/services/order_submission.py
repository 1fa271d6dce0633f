"""
Order submission service.

A chef submits one order per request; every line starts out pending with a
snapshot of the product as it is in the catalog at that moment.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.catalog.models import Product
from apps.orders.models import Order, OrderItem, ItemStatus

from .exceptions import (
    OrderNotFoundError,
    EmptyOrderError,
    DuplicateOrderItemError,
    UnknownProductError,
    ProductNotAvailableError,
)

logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = Decimal('1')


@transaction.atomic
def submit_order(*, restaurant: str, chef: str, items: list) -> Order:
    """
    Create an active order for a restaurant.

    Args:
        restaurant: Restaurant code of the ordering kitchen
        chef: Name of the chef placing the order
        items: List of dicts with ``product_id`` and optional ``quantity``
            (default 1) and ``unit`` (default: the product's default unit)

    Returns:
        Created Order instance with its items

    Raises:
        EmptyOrderError: If no items are given
        DuplicateOrderItemError: If a product appears more than once
        UnknownProductError: If a product is not in the catalog
        ProductNotAvailableError: If a product is not offered to the restaurant
    """
    if not items:
        raise EmptyOrderError("An order needs at least one product.")

    product_ids = [UUID(str(line['product_id'])) for line in items]
    if len(set(product_ids)) != len(product_ids):
        raise DuplicateOrderItemError("Each product can appear only once in an order.")

    products = Product.objects.in_bulk(product_ids)
    for product_id in product_ids:
        product = products.get(product_id)
        if product is None:
            raise UnknownProductError(f"Product with ID {product_id} not found")
        if not product.is_available_to(restaurant):
            raise ProductNotAvailableError(
                f"{product.name_ka} is not offered to this restaurant."
            )

    order = Order.objects.create(restaurant=restaurant, chef=chef)

    order_items = []
    for position, (product_id, line) in enumerate(zip(product_ids, items)):
        product = products[product_id]
        quantity = line.get('quantity')
        order_items.append(OrderItem(
            order=order,
            product_id=product_id,
            product_snapshot=product.snapshot(),
            status=ItemStatus.PENDING,
            quantity=DEFAULT_QUANTITY if quantity is None else Decimal(str(quantity)),
            unit=line.get('unit') or product.default_unit,
            position=position,
        ))
    OrderItem.objects.bulk_create(order_items)

    logger.info(
        "Order %s submitted by %s (%s) with %d items",
        order.id, chef, restaurant, len(order_items)
    )
    return order


def get_order_by_id(*, order_id: UUID) -> Order:
    """
    Get an active order with its items.

    Raises:
        OrderNotFoundError: If the order doesn't exist
    """
    try:
        return Order.objects.prefetch_related('items').get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order with ID {order_id} not found")


def list_active_orders(*, restaurant: Optional[str] = None):
    """Active orders newest first, optionally for one restaurant."""
    orders = Order.objects.prefetch_related('items')
    if restaurant:
        orders = orders.filter(restaurant=restaurant)
    return orders.order_by('-date')
