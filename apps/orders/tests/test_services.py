from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal
import uuid
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.catalog.models import Restaurant
from apps.orders.models import (
    Order,
    OrderItem,
    ItemStatus,
    CompletedOrder,
    UnavailableItem,
    DispatchRecord,
)
from apps.orders.services import (
    submit_order,
    parse_amount,
    set_item_status,
    set_item_actuals,
    complete_order,
    dispatch_items,
    set_dispatch_supplier,
    build_shopping_list_text,
    group_by_day,
    EmptyOrderError,
    DuplicateOrderItemError,
    UnknownProductError,
    ProductNotAvailableError,
    OrderNotFoundError,
    OrderItemNotFoundError,
    InvalidStatusError,
    OrderHasPendingItemsError,
    NothingToDispatchError,
    DispatchEntryNotFoundError,
    UnknownSupplierError,
)
from apps.orders.services.reconciliation import QUANTITY_STEP, PRICE_STEP
from apps.orders.services.shopping_list import format_georgian_date, format_quantity


# =============================================================================
# Submission
# =============================================================================

@pytest.mark.django_db
class TestSubmitOrder:

    def test_lines_start_pending_with_snapshot(self, midiebi_order, beef, mussels):
        items = list(midiebi_order.items.all())

        assert midiebi_order.restaurant == 'midiebi'
        assert midiebi_order.chef == 'გიორგი'
        assert [item.product_id for item in items] == [beef.id, mussels.id]
        assert all(item.status == ItemStatus.PENDING for item in items)
        assert items[0].product_snapshot['name_ka'] == 'საქონლის ხორცი'
        assert items[0].quantity == Decimal('2')
        assert items[0].unit == 'კგ'

    def test_defaults_quantity_and_unit(self, tomatoes):
        order = submit_order(
            restaurant=Restaurant.MIDIEBI, chef='ნინო',
            items=[{'product_id': tomatoes.id}],
        )

        item = order.items.get()
        assert item.quantity == Decimal('1')
        assert item.unit == 'ცალი'

    def test_custom_unit(self, beef):
        order = submit_order(
            restaurant=Restaurant.MIDIEBI, chef='ნინო',
            items=[{'product_id': beef.id, 'quantity': Decimal('4'), 'unit': 'ცალი'}],
        )

        assert order.items.get().unit == 'ცალი'

    def test_snapshot_survives_catalog_edit(self, midiebi_order, beef):
        beef.name_ka = 'ძროხის ხორცი'
        beef.save()

        item = midiebi_order.items.get(product_id=beef.id)
        assert item.product_snapshot['name_ka'] == 'საქონლის ხორცი'

    def test_empty_order(self, db):
        with pytest.raises(EmptyOrderError):
            submit_order(restaurant=Restaurant.MIDIEBI, chef='ნინო', items=[])

    def test_duplicate_product(self, beef):
        with pytest.raises(DuplicateOrderItemError):
            submit_order(
                restaurant=Restaurant.MIDIEBI, chef='ნინო',
                items=[{'product_id': beef.id}, {'product_id': beef.id}],
            )

    def test_unknown_product(self, db):
        with pytest.raises(UnknownProductError):
            submit_order(
                restaurant=Restaurant.MIDIEBI, chef='ნინო',
                items=[{'product_id': uuid.uuid4()}],
            )

    def test_product_not_offered_to_restaurant(self, pork):
        with pytest.raises(ProductNotAvailableError):
            submit_order(
                restaurant=Restaurant.MIDIEBI, chef='ნინო',
                items=[{'product_id': pork.id}],
            )

        assert Order.objects.count() == 0


# =============================================================================
# Reconciliation
# =============================================================================

class TestParseAmount:

    @pytest.mark.parametrize('raw,expected', [
        ('2,5', Decimal('2.500')),
        (' 3 ', Decimal('3.000')),
        (0, Decimal('0.000')),
        ('1.23456', Decimal('1.235')),
    ])
    def test_valid_quantities(self, raw, expected):
        assert parse_amount(raw, QUANTITY_STEP) == expected

    @pytest.mark.parametrize('raw', ['', 'abc', 'nan', 'inf', '-1', None, True])
    def test_ignored_values(self, raw):
        assert parse_amount(raw, QUANTITY_STEP) is None

    def test_price_rounds_to_cents(self):
        assert parse_amount('12.345', PRICE_STEP) == Decimal('12.35')


@pytest.mark.django_db
class TestSetItemStatus:

    def test_sets_status(self, midiebi_order, beef):
        item = set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.PURCHASED)

        assert item.status == ItemStatus.PURCHASED

    def test_same_status_toggles_back_to_pending(self, midiebi_order, beef):
        set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.UNAVAILABLE)
        item = set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.UNAVAILABLE)

        assert item.status == ItemStatus.PENDING

    def test_other_status_replaces(self, midiebi_order, beef):
        set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.FORWARDED)
        item = set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.PURCHASED)

        assert item.status == ItemStatus.PURCHASED

    def test_other_lines_untouched(self, midiebi_order, beef, mussels):
        set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.PURCHASED)

        assert midiebi_order.items.get(product_id=mussels.id).status == ItemStatus.PENDING

    def test_unknown_status(self, midiebi_order, beef):
        with pytest.raises(InvalidStatusError):
            set_item_status(order_id=midiebi_order.id, product_id=beef.id, status='lost')

    def test_missing_order(self, db, beef):
        with pytest.raises(OrderNotFoundError):
            set_item_status(order_id=uuid.uuid4(), product_id=beef.id, status=ItemStatus.PURCHASED)

    def test_product_not_in_order(self, midiebi_order, pork):
        with pytest.raises(OrderItemNotFoundError):
            set_item_status(order_id=midiebi_order.id, product_id=pork.id, status=ItemStatus.PURCHASED)


@pytest.mark.django_db
class TestSetItemActuals:

    def test_records_quantity_and_price(self, midiebi_order, beef):
        item = set_item_actuals(
            order_id=midiebi_order.id, product_id=beef.id,
            actual_quantity='2,5', price_per_unit='18.40',
        )

        item.refresh_from_db()
        assert item.actual_quantity == Decimal('2.5')
        assert item.price_per_unit == Decimal('18.40')

    def test_invalid_values_keep_stored_ones(self, midiebi_order, beef):
        set_item_actuals(
            order_id=midiebi_order.id, product_id=beef.id,
            actual_quantity='2', price_per_unit='10',
        )
        item = set_item_actuals(
            order_id=midiebi_order.id, product_id=beef.id,
            actual_quantity='abc', price_per_unit='nan',
        )

        item.refresh_from_db()
        assert item.actual_quantity == Decimal('2')
        assert item.price_per_unit == Decimal('10')

    def test_only_price(self, midiebi_order, mussels):
        item = set_item_actuals(order_id=midiebi_order.id, product_id=mussels.id, price_per_unit='7')

        item.refresh_from_db()
        assert item.actual_quantity is None
        assert item.price_per_unit == Decimal('7')


@pytest.mark.django_db
class TestCompleteOrder:

    def test_archives_order_and_unavailable_items(self, midiebi_order, beef, mussels):
        set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.UNAVAILABLE)
        set_item_status(order_id=midiebi_order.id, product_id=mussels.id, status=ItemStatus.PURCHASED)
        set_item_actuals(
            order_id=midiebi_order.id, product_id=mussels.id,
            actual_quantity='4.5', price_per_unit='12',
        )

        completed = complete_order(order_id=midiebi_order.id)

        assert not Order.objects.filter(id=midiebi_order.id).exists()
        assert OrderItem.objects.count() == 0
        assert completed.source_order_id == midiebi_order.id
        assert completed.restaurant == 'midiebi'
        assert completed.chef == 'გიორგი'

        statuses = {entry['product_id']: entry['status'] for entry in completed.items}
        assert statuses == {str(beef.id): 'unavailable', str(mussels.id): 'purchased'}
        bought = next(entry for entry in completed.items if entry['product_id'] == str(mussels.id))
        assert Decimal(bought['actual_quantity']) == Decimal('4.5')
        assert Decimal(bought['price_per_unit']) == Decimal('12')
        skipped = next(entry for entry in completed.items if entry['product_id'] == str(beef.id))
        assert skipped['actual_quantity'] is None
        assert skipped['price_per_unit'] is None

        unavailable = UnavailableItem.objects.get()
        assert unavailable.product_id == beef.id
        assert unavailable.order_id == midiebi_order.id
        assert unavailable.restaurant == 'midiebi'
        assert unavailable.product_snapshot['name_en'] == 'Beef'

    def test_pending_items_block_completion(self, midiebi_order, beef):
        set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.PURCHASED)

        with pytest.raises(OrderHasPendingItemsError):
            complete_order(order_id=midiebi_order.id)

        assert Order.objects.filter(id=midiebi_order.id).exists()
        assert CompletedOrder.objects.count() == 0

    def test_missing_order(self, db):
        with pytest.raises(OrderNotFoundError):
            complete_order(order_id=uuid.uuid4())


# =============================================================================
# Dispatch
# =============================================================================

@pytest.mark.django_db
class TestDispatchItems:

    def test_same_product_from_two_restaurants(self, midiebi_order, sakhinkle_order, beef, mussels, pork):
        record = dispatch_items(selections=[
            (midiebi_order.id, beef.id),
            (sakhinkle_order.id, beef.id),
        ])

        assert [(e['restaurant'], e['chef']) for e in record.items] == [
            ('midiebi', 'გიორგი'),
            ('sakhinkle', 'დავითი'),
        ]
        assert all(e['product_id'] == str(beef.id) for e in record.items)
        assert all(e['supplier'] is None for e in record.items)
        assert [Decimal(e['quantity']) for e in record.items] == [Decimal('2'), Decimal('3')]

        assert list(midiebi_order.items.values_list('product_id', flat=True)) == [mussels.id]
        assert list(sakhinkle_order.items.values_list('product_id', flat=True)) == [pork.id]

    def test_emptied_order_is_deleted(self, midiebi_order, sakhinkle_order, beef, mussels):
        dispatch_items(selections=[
            (midiebi_order.id, beef.id),
            (midiebi_order.id, mussels.id),
            (sakhinkle_order.id, beef.id),
        ])

        assert not Order.objects.filter(id=midiebi_order.id).exists()
        assert Order.objects.filter(id=sakhinkle_order.id).exists()

    def test_uses_actual_quantity_when_recorded(self, midiebi_order, beef):
        set_item_actuals(order_id=midiebi_order.id, product_id=beef.id, actual_quantity='2,5')

        record = dispatch_items(selections=[(midiebi_order.id, beef.id)])

        assert Decimal(record.items[0]['quantity']) == Decimal('2.5')

    def test_nothing_matches(self, midiebi_order, pork):
        with pytest.raises(NothingToDispatchError):
            dispatch_items(selections=[(midiebi_order.id, pork.id)])

        assert DispatchRecord.objects.count() == 0

    def test_duplicate_selection_dispatched_once(self, midiebi_order, beef):
        record = dispatch_items(selections=[
            (midiebi_order.id, beef.id),
            (str(midiebi_order.id), str(beef.id)),
        ])

        assert len(record.items) == 1


@pytest.mark.django_db
class TestSetDispatchSupplier:

    @pytest.fixture
    def record(self, midiebi_order, sakhinkle_order, beef):
        return dispatch_items(selections=[
            (midiebi_order.id, beef.id),
            (sakhinkle_order.id, beef.id),
        ])

    def test_assigns_one_line(self, record, suppliers):
        updated = set_dispatch_supplier(record_id=record.id, index=1, supplier='ნიკორა')

        assert [e['supplier'] for e in updated.items] == [None, 'ნიკორა']

    def test_empty_supplier_clears(self, record, suppliers):
        set_dispatch_supplier(record_id=record.id, index=0, supplier='ბაზარი')
        updated = set_dispatch_supplier(record_id=record.id, index=0, supplier='')

        record.refresh_from_db()
        assert updated.items[0]['supplier'] is None
        assert record.items[0]['supplier'] is None

    def test_unknown_supplier(self, record, suppliers):
        with pytest.raises(UnknownSupplierError):
            set_dispatch_supplier(record_id=record.id, index=0, supplier='სხვა მომწოდებელი')

    def test_index_out_of_range(self, record, suppliers):
        with pytest.raises(DispatchEntryNotFoundError):
            set_dispatch_supplier(record_id=record.id, index=2, supplier='ნიკორა')


# =============================================================================
# Shopping list
# =============================================================================

class TestShoppingListFormatting:

    def test_georgian_date(self):
        assert format_georgian_date(date(2026, 10, 19)) == 'ორშაბათი, 19 ოქტომბერი'

    @pytest.mark.parametrize('quantity,expected', [
        (Decimal('2.500'), '2.5'),
        (Decimal('3.000'), '3'),
        (Decimal('10'), '10'),
        (Decimal('0.125'), '0.125'),
    ])
    def test_quantity(self, quantity, expected):
        assert format_quantity(quantity) == expected


@pytest.mark.django_db
class TestBuildShoppingListText:

    def test_sums_and_groups_by_category(self, settings, midiebi_order, sakhinkle_order, beef, mussels, pork):
        settings.SHOPPING_LIST_HEADER = 'შეკვეთა ({date})'
        settings.SHOPPING_LIST_FOOTER = 'მადლობა'

        text = build_shopping_list_text(
            selections=[
                (midiebi_order.id, beef.id),
                (midiebi_order.id, mussels.id),
                (sakhinkle_order.id, beef.id),
                (sakhinkle_order.id, pork.id),
            ],
            day=date(2026, 10, 19),
        )

        assert text == (
            'შეკვეთა (ორშაბათი, 19 ოქტომბერი)\n'
            '\n'
            'ხორცი და ხორცპროდუქტები:\n'
            'საქონლის ხორცი - 5 კგ\n'
            'ღორის ხორცი - 1.5 კგ\n'
            '\n'
            'ზღვის პროდუქტები:\n'
            'მიდიები - 5 კგ\n'
            '\n'
            'მადლობა'
        )

    def test_blank_footer_is_omitted(self, settings, midiebi_order, mussels):
        settings.SHOPPING_LIST_HEADER = 'სია'
        settings.SHOPPING_LIST_FOOTER = ''

        text = build_shopping_list_text(selections=[(midiebi_order.id, mussels.id)], day=date(2026, 10, 19))

        assert text == 'სია\n\nზღვის პროდუქტები:\nმიდიები - 5 კგ'

    def test_does_not_modify_orders(self, midiebi_order, beef):
        build_shopping_list_text(selections=[(midiebi_order.id, beef.id)], day=date(2026, 10, 19))

        assert midiebi_order.items.count() == 2


# =============================================================================
# Transaction safety
# =============================================================================

@pytest.mark.django_db
class TestBatchRollback:
    """A failing step leaves active orders exactly as they were."""

    def test_complete_order_rolls_back(self, midiebi_order, beef, mussels):
        set_item_status(order_id=midiebi_order.id, product_id=beef.id, status=ItemStatus.UNAVAILABLE)
        set_item_status(order_id=midiebi_order.id, product_id=mussels.id, status=ItemStatus.PURCHASED)

        with patch('apps.orders.services.reconciliation.UnavailableItem.objects.bulk_create',
                   side_effect=DatabaseError('write failed')):
            with pytest.raises(DatabaseError):
                complete_order(order_id=midiebi_order.id)

        assert Order.objects.filter(id=midiebi_order.id).exists()
        assert OrderItem.objects.filter(order_id=midiebi_order.id).count() == 2
        assert CompletedOrder.objects.count() == 0
        assert UnavailableItem.objects.count() == 0

    def test_dispatch_rolls_back(self, midiebi_order, sakhinkle_order, beef, mussels):
        with patch('apps.orders.services.dispatch.DispatchRecord.objects.create',
                   side_effect=DatabaseError('write failed')):
            with pytest.raises(DatabaseError):
                dispatch_items(selections=[
                    (midiebi_order.id, beef.id),
                    (midiebi_order.id, mussels.id),
                    (sakhinkle_order.id, beef.id),
                ])

        assert Order.objects.filter(id=midiebi_order.id).exists()
        assert set(midiebi_order.items.values_list('product_id', flat=True)) == {beef.id, mussels.id}
        assert sakhinkle_order.items.filter(product_id=beef.id).exists()
        assert DispatchRecord.objects.count() == 0


# =============================================================================
# History
# =============================================================================

class TestGroupByDay:

    def test_newest_day_first(self, settings):
        settings.TIME_ZONE = 'UTC'

        class Record:
            def __init__(self, name, when):
                self.name = name
                self.date = when

        records = [
            Record('late', datetime(2026, 10, 19, 18, 0, tzinfo=dt_timezone.utc)),
            Record('early', datetime(2026, 10, 19, 8, 0, tzinfo=dt_timezone.utc)),
            Record('old', datetime(2026, 10, 17, 9, 0, tzinfo=dt_timezone.utc)),
        ]

        groups = group_by_day(records, 'date')

        assert [group['day'] for group in groups] == [date(2026, 10, 19), date(2026, 10, 17)]
        assert [r.name for r in groups[0]['records']] == ['late', 'early']
