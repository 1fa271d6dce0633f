from datetime import timedelta

import pytest
from django.utils import timezone

from apps.catalog.models import Restaurant
from apps.orders.models import CompletedOrder


def completed_line(product, *, price=None, actual=None, quantity='1', status='purchased'):
    """Completed-order line as stored by order completion."""
    return {
        'product_id': str(product.id),
        'product': product.snapshot(),
        'status': status,
        'quantity': quantity,
        'unit': product.default_unit,
        'actual_quantity': actual,
        'price_per_unit': price,
    }


@pytest.fixture
def make_completed_order(db):
    """Build a completed order ``days_ago`` days in the past."""
    def _make(*, lines, restaurant=Restaurant.MIDIEBI, days_ago=0):
        when = timezone.now() - timedelta(days=days_ago)
        return CompletedOrder.objects.create(
            source_order_id='00000000-0000-0000-0000-000000000000',
            restaurant=restaurant,
            chef='გიორგი',
            date=when - timedelta(hours=1),
            completion_date=when,
            items=lines,
        )
    return _make


@pytest.fixture
def purchase_history(make_completed_order, beef, tomatoes, mussels):
    """
    Two weeks of purchases:
    - beef at 10.00 then 14.00
    - tomatoes at 2.00 (sakhinkle)
    - mussels never priced
    """
    return [
        make_completed_order(days_ago=14, lines=[
            completed_line(beef, price='10.00', actual='2.000'),
            completed_line(mussels, status='unavailable'),
        ]),
        make_completed_order(days_ago=7, restaurant=Restaurant.SAKHINKLE, lines=[
            completed_line(tomatoes, price='2.00', actual='12.000', quantity='10'),
        ]),
        make_completed_order(days_ago=1, lines=[
            completed_line(beef, price='14.00', actual='3.000'),
            completed_line(mussels, price='0', actual='1.000'),
        ]),
    ]
