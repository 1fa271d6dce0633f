import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.catalog.models import Product, Restaurant, Unit


def make_access_token(*, role, restaurant=None, chef=''):
    """Access token with the same claims the login endpoint issues."""
    token = AccessToken()
    token['user_id'] = 'admin' if restaurant is None else f'{restaurant}:{chef}'
    token['role'] = role
    token['restaurant'] = restaurant
    token['chef'] = chef
    return str(token)


def authenticated_client(token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


# =============================================================================
# Clients
# =============================================================================

@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_client():
    """Return API client signed in as the administrator."""
    return authenticated_client(make_access_token(role='ADMIN'))


@pytest.fixture
def chef_client():
    """Return API client signed in as a chef of მიდიები."""
    return authenticated_client(make_access_token(
        role=Restaurant.MIDIEBI, restaurant=Restaurant.MIDIEBI, chef='გიორგი',
    ))


@pytest.fixture
def sakhinkle_chef_client():
    """Return API client signed in as a chef of სახინკლე."""
    return authenticated_client(make_access_token(
        role=Restaurant.SAKHINKLE, restaurant=Restaurant.SAKHINKLE, chef='დავითი',
    ))


# =============================================================================
# Catalog
# =============================================================================

@pytest.fixture
def beef(db):
    """Product offered to both restaurants."""
    return Product.objects.create(
        name_ka='საქონლის ხორცი',
        name_en='Beef',
        name_ru='Говядина',
        category_ka='ხორცი და ხორცპროდუქტები',
        category_en='Meat and meat products',
        category_ru='Мясо и мясопродукты',
        default_unit=Unit.KILOGRAM,
        restaurants=[Restaurant.MIDIEBI, Restaurant.SAKHINKLE],
    )


@pytest.fixture
def mussels(db):
    """Product offered only to მიდიები."""
    return Product.objects.create(
        name_ka='მიდიები',
        name_en='Mussels',
        name_ru='Мидии',
        category_ka='ზღვის პროდუქტები',
        category_en='Seafood',
        category_ru='Морепродукты',
        default_unit=Unit.KILOGRAM,
        restaurants=[Restaurant.MIDIEBI],
    )


@pytest.fixture
def pork(db):
    """Product offered only to სახინკლე."""
    return Product.objects.create(
        name_ka='ღორის ხორცი',
        name_en='Pork',
        name_ru='Свинина',
        category_ka='ხორცი და ხორცპროდუქტები',
        category_en='Meat and meat products',
        category_ru='Мясо и мясопродукты',
        default_unit=Unit.KILOGRAM,
        restaurants=[Restaurant.SAKHINKLE],
    )


@pytest.fixture
def tomatoes(db):
    """Product offered to both restaurants, sold by the piece."""
    return Product.objects.create(
        name_ka='პომიდორი',
        name_en='Tomatoes',
        name_ru='Помидоры',
        category_ka='ბოსტნეული, ხილი, თხილი და მწვანილი',
        category_en='Vegetables, fruit, nuts and herbs',
        category_ru='Овощи, фрукты, орехи и зелень',
        default_unit=Unit.PIECE,
        restaurants=[Restaurant.MIDIEBI, Restaurant.SAKHINKLE],
    )
