"""
Supplier shopping list.

Builds the plain-text message the administrator sends to suppliers for a
selection of active order lines: quantities of the same product and unit
are added up, and products are listed under their Georgian category.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.utils import timezone

from apps.catalog.categories import sort_categories

from .dispatch import resolve_selected_items

GEORGIAN_WEEKDAYS = [
    'ორშაბათი', 'სამშაბათი', 'ოთხშაბათი', 'ხუთშაბათი',
    'პარასკევი', 'შაბათი', 'კვირა',
]

GEORGIAN_MONTHS = [
    'იანვარი', 'თებერვალი', 'მარტი', 'აპრილი', 'მაისი', 'ივნისი',
    'ივლისი', 'აგვისტო', 'სექტემბერი', 'ოქტომბერი', 'ნოემბერი', 'დეკემბერი',
]


def format_georgian_date(day) -> str:
    """``ორშაბათი, 19 ოქტომბერი`` style long date."""
    return f"{GEORGIAN_WEEKDAYS[day.weekday()]}, {day.day} {GEORGIAN_MONTHS[day.month - 1]}"


def format_quantity(quantity: Decimal) -> str:
    """Drop trailing zeros: 2.500 -> 2.5, 3.000 -> 3."""
    return format(quantity.normalize(), 'f')


def aggregate_lines(items) -> dict:
    """
    Sum requested quantities per (Georgian name, unit).

    Returns:
        {category: {(name, unit): quantity}}
    """
    grouped = {}
    for item in items:
        product = item.product_snapshot
        name = product.get('name_ka', '')
        category = product.get('category_ka', '')
        lines = grouped.setdefault(category, {})
        key = (name, item.unit)
        lines[key] = lines.get(key, Decimal('0')) + item.quantity
    return grouped


def build_shopping_list_text(*, selections, day: Optional[date] = None) -> str:
    """
    Render the supplier message for ``(order_id, product_id)`` selections.

    Layout: configured header (with the date), then each category followed
    by ``name - quantity unit`` lines sorted by name, then the configured
    footer. Selections that match no active line are skipped.
    """
    items = resolve_selected_items(selections)
    grouped = aggregate_lines(items)

    sections = []
    for category in sort_categories(grouped):
        lines = sorted(grouped[category].items(), key=lambda entry: entry[0][0])
        body = '\n'.join(
            f"{name} - {format_quantity(quantity)} {unit}"
            for (name, unit), quantity in lines
        )
        sections.append(f"{category}:\n{body}")

    day = day or timezone.localdate()
    header = settings.SHOPPING_LIST_HEADER.replace('{date}', format_georgian_date(day))
    parts = [header, '\n\n'.join(sections), settings.SHOPPING_LIST_FOOTER]
    return '\n\n'.join(part.strip() for part in parts if part and part.strip())
