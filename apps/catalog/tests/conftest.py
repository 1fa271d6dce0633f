import pytest

from apps.catalog.models import Product, Restaurant, Unit


@pytest.fixture
def catalog(beef, mussels, pork, tomatoes):
    """All shared catalog products."""
    return [beef, mussels, pork, tomatoes]


@pytest.fixture
def unlisted_category_product(db):
    """Product in a category missing from the curated order."""
    return Product.objects.create(
        name_ka='ბადრიჯანი',
        category_ka='ახალი კატეგორია',
        category_en='New category',
        default_unit=Unit.KILOGRAM,
        restaurants=[Restaurant.MIDIEBI],
    )
