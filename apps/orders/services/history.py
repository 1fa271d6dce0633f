"""
Read access to archived records.

Completed orders, unavailable items and dispatch records are listed newest
first and can be grouped by calendar day for the history screens.
"""

from typing import Optional

from django.utils import timezone

from apps.orders.models import CompletedOrder, UnavailableItem, DispatchRecord


def list_completed_orders(*, restaurant: Optional[str] = None):
    orders = CompletedOrder.objects.all()
    if restaurant:
        orders = orders.filter(restaurant=restaurant)
    return orders.order_by('-completion_date')


def list_unavailable_items(*, restaurant: Optional[str] = None):
    items = UnavailableItem.objects.all()
    if restaurant:
        items = items.filter(restaurant=restaurant)
    return items.order_by('-date')


def list_dispatch_records():
    return DispatchRecord.objects.order_by('-date')


def group_by_day(records, field: str) -> list:
    """
    Group records by the local calendar day of a datetime field.

    Days are returned newest first; records keep their incoming order
    within a day.

    Returns:
        list of {'day': date, 'records': [...]}
    """
    groups = {}
    for record in records:
        day = timezone.localdate(getattr(record, field))
        groups.setdefault(day, []).append(record)

    return [
        {'day': day, 'records': groups[day]}
        for day in sorted(groups, reverse=True)
    ]
