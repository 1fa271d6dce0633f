"""
Analytics Module
=================

Read-only figures derived from orders: unit price history and averages,
the last price paid per product, products both restaurants currently
need, and the running total of the open shopping list.

Classes:
    PriceAnalytics: Static methods for price and shopping-list figures.

Example:
    Comparing an entered price with the last one paid::

        from apps.analytics.analytics import PriceAnalytics

        last = PriceAnalytics.last_prices().get(str(product_id))
        trend = PriceAnalytics.price_trend(Decimal('12.50'), last)
        # 'higher', 'lower', 'same', or None without a previous price

Note:
    Completed orders store their lines as JSON documents with decimal
    values kept as text, so every amount is parsed back into Decimal here.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from apps.catalog.models import Restaurant
from apps.orders.models import CompletedOrder, OrderItem, ItemStatus

CENT = Decimal('0.01')


def stored_amount(value):
    """Decimal for a stored amount, or None when missing or malformed."""
    if value is None or value == '':
        return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


def _positive(value):
    amount = stored_amount(value)
    return amount if amount is not None and amount > 0 else None


class PriceAnalytics:
    """
    Derived price views over completed and active orders.

    Methods:
        price_history: Every positive unit price per product with its average.
        average_price: Mean positive unit price of one product.
        last_prices: Most recent positive unit price per product.
        price_trend: Compare a price with the previous one.
        common_product_ids: Products in active orders of every restaurant.
        shopping_list_total: Cost of recorded actuals on pending lines.

    Note:
        All methods return plain dictionaries or lists, suitable for JSON
        serialization in API responses.
    """

    @staticmethod
    def price_history():
        """
        Unit price history for every product bought at a positive price.

        Completed orders are folded oldest first. Each price is dated by the
        order's completion time, falling back to its submission time.

        Returns:
            list: One dict per product, sorted by Georgian name::

                {
                    'product_id': str,
                    'product': dict,           # latest snapshot seen
                    'average_price': Decimal,  # mean of all prices
                    'purchase_count': int,
                    'history': [{'date', 'price', 'restaurant'}, ...]  # newest first
                }
        """
        products = {}
        for order in CompletedOrder.objects.order_by('completion_date'):
            when = order.completion_date or order.date
            for item in order.items:
                price = _positive(item.get('price_per_unit'))
                if price is None:
                    continue
                entry = products.setdefault(item['product_id'], {
                    'product_id': item['product_id'],
                    'product': {},
                    'prices': [],
                })
                entry['product'] = item.get('product') or entry['product']
                entry['prices'].append({
                    'date': when,
                    'price': price,
                    'restaurant': order.restaurant,
                })

        result = []
        for entry in products.values():
            prices = entry['prices']
            total = sum((p['price'] for p in prices), Decimal('0'))
            result.append({
                'product_id': entry['product_id'],
                'product': entry['product'],
                'average_price': total / len(prices),
                'purchase_count': len(prices),
                'history': list(reversed(prices)),
            })

        result.sort(key=lambda row: row['product'].get('name_ka', ''))
        return result

    @staticmethod
    def average_price(product_id):
        """Mean positive unit price of one product, or None if never priced."""
        product_id = str(product_id)
        for row in PriceAnalytics.price_history():
            if row['product_id'] == product_id:
                return row['average_price']
        return None

    @staticmethod
    def last_prices():
        """
        Most recent positive unit price per product.

        Returns:
            dict: product id (str) -> Decimal
        """
        prices = {}
        for order in CompletedOrder.objects.order_by('-completion_date'):
            for item in order.items:
                product_id = item['product_id']
                if product_id in prices:
                    continue
                price = _positive(item.get('price_per_unit'))
                if price is not None:
                    prices[product_id] = price
        return prices

    @staticmethod
    def price_trend(current, last):
        """
        Compare an entered unit price with the last one paid.

        Returns:
            'higher', 'lower' or 'same'; None unless both prices are positive
        """
        current = _positive(current)
        last = _positive(last)
        if current is None or last is None:
            return None
        if current > last:
            return 'higher'
        if current < last:
            return 'lower'
        return 'same'

    @staticmethod
    def common_product_ids():
        """
        Product ids present in the active orders of every restaurant.

        Returns:
            list: sorted product id strings
        """
        requested = {restaurant: set() for restaurant in Restaurant.values}
        for restaurant, product_id in OrderItem.objects.values_list('order__restaurant', 'product_id'):
            requested.setdefault(restaurant, set()).add(str(product_id))
        return sorted(set.intersection(*requested.values()))

    @staticmethod
    def shopping_list_total():
        """
        Cost of the pending lines that already have actuals recorded.

        Only lines where both actual quantity and unit price are positive
        count.
        """
        items = OrderItem.objects.filter(
            status=ItemStatus.PENDING,
            actual_quantity__gt=0,
            price_per_unit__gt=0,
        ).values_list('actual_quantity', 'price_per_unit')

        total = sum((quantity * price for quantity, price in items), Decimal('0'))
        return total.quantize(CENT, rounding=ROUND_HALF_UP)
