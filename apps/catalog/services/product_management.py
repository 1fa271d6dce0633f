"""
Product catalog service.

Handles product CRUD and the chef's ad-hoc items. Orders and archive
records embed product snapshots, so editing or deleting a product never
rewrites history.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Q

from ..models import Product, Restaurant, Unit
from .exceptions import ProductNotFoundError, InvalidRestaurantError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'name_ka', 'name_en', 'name_ru',
    'category_ka', 'category_en', 'category_ru',
    'default_unit', 'restaurants',
)


def _clean_restaurants(restaurants) -> list:
    cleaned = []
    for restaurant in restaurants or []:
        if restaurant not in Restaurant.values:
            raise InvalidRestaurantError(f"Unknown restaurant: {restaurant}")
        if restaurant not in cleaned:
            cleaned.append(restaurant)
    return cleaned


def list_products(*, restaurant: Optional[str] = None, search: str = '') -> list:
    """
    List catalog products ordered by Georgian name.

    Args:
        restaurant: If given, only products eligible for this restaurant
        search: Case-insensitive substring matched against all localized names
    """
    products = Product.objects.all()

    search = (search or '').strip()
    if search:
        products = products.filter(
            Q(name_ka__icontains=search) |
            Q(name_en__icontains=search) |
            Q(name_ru__icontains=search)
        )

    # JSON containment lookups are not portable across backends
    products = list(products)
    if restaurant:
        products = [p for p in products if p.is_available_to(restaurant)]
    return products


@transaction.atomic
def create_product(
    *,
    name_ka: str,
    category_ka: str,
    default_unit: str = Unit.KILOGRAM,
    restaurants=None,
    name_en: str = '',
    name_ru: str = '',
    category_en: str = '',
    category_ru: str = '',
) -> Product:
    """
    Create a catalog product.

    Missing English and Russian texts fall back to the Georgian ones.

    Raises:
        InvalidRestaurantError: If a restaurant code is unknown
    """
    product = Product.objects.create(
        name_ka=name_ka,
        name_en=name_en or name_ka,
        name_ru=name_ru or name_ka,
        category_ka=category_ka,
        category_en=category_en or category_ka,
        category_ru=category_ru or category_ka,
        default_unit=default_unit,
        restaurants=_clean_restaurants(restaurants),
    )
    logger.info("Created product %s (%s)", product.id, product.name_ka)
    return product


def create_adhoc_product(
    *,
    restaurant: str,
    name: str,
    category: str,
    default_unit: str = Unit.KILOGRAM,
) -> Product:
    """
    Create a product a chef needs that the catalog lacks.

    Every localized name and category is the text the chef entered, and the
    product is offered only to the chef's restaurant.
    """
    return create_product(
        name_ka=name,
        name_en=name,
        name_ru=name,
        category_ka=category,
        category_en=category,
        category_ru=category,
        default_unit=default_unit,
        restaurants=[restaurant],
    )


@transaction.atomic
def update_product(*, product_id: UUID, **changes) -> Product:
    """
    Update editable product fields.

    Raises:
        ProductNotFoundError: If product doesn't exist
        InvalidRestaurantError: If a restaurant code is unknown
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product with ID {product_id} not found")

    for field, value in changes.items():
        if field not in EDITABLE_FIELDS:
            continue
        if field == 'restaurants':
            value = _clean_restaurants(value)
        setattr(product, field, value)

    product.save()
    logger.info("Updated product %s", product.id)
    return product


@transaction.atomic
def delete_product(*, product_id: UUID) -> None:
    """
    Delete a product from the catalog.

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    deleted, _ = Product.objects.filter(id=product_id).delete()
    if not deleted:
        raise ProductNotFoundError(f"Product with ID {product_id} not found")
    logger.info("Deleted product %s", product_id)
