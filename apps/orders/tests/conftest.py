from decimal import Decimal

import pytest

from apps.catalog.models import Restaurant
from apps.orders.services import submit_order


@pytest.fixture
def midiebi_order(beef, mussels):
    """Active მიდიები order: 2 kg beef, 5 kg mussels."""
    return submit_order(
        restaurant=Restaurant.MIDIEBI,
        chef='გიორგი',
        items=[
            {'product_id': beef.id, 'quantity': Decimal('2')},
            {'product_id': mussels.id, 'quantity': Decimal('5')},
        ],
    )


@pytest.fixture
def sakhinkle_order(beef, pork):
    """Active სახინკლე order: 3 kg beef, 1.5 kg pork."""
    return submit_order(
        restaurant=Restaurant.SAKHINKLE,
        chef='დავითი',
        items=[
            {'product_id': beef.id, 'quantity': Decimal('3')},
            {'product_id': pork.id, 'quantity': Decimal('1.5')},
        ],
    )


@pytest.fixture
def suppliers(settings):
    settings.KITCHEN_SUPPLIERS = ['ნიკორა', 'ბაზარი']
    return settings.KITCHEN_SUPPLIERS
