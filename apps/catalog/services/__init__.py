"""
Catalog app services layer.

Services contain business logic for the product catalog.
"""

from .exceptions import (
    CatalogServiceError,
    ProductNotFoundError,
    InvalidRestaurantError,
)

from .product_management import (
    list_products,
    create_product,
    create_adhoc_product,
    update_product,
    delete_product,
)


__all__ = [
    # Exceptions
    'CatalogServiceError',
    'ProductNotFoundError',
    'InvalidRestaurantError',

    # Product Management
    'list_products',
    'create_product',
    'create_adhoc_product',
    'update_product',
    'delete_product',
]
