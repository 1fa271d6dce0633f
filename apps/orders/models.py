# ==========================================
# apps/orders/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid

from apps.catalog.models import Restaurant


class ItemStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PURCHASED = 'purchased', 'Purchased'
    UNAVAILABLE = 'unavailable', 'Unavailable'
    FORWARDED = 'forwarded', 'Forwarded to supplier'


def _decimal_text(value):
    return None if value is None else str(value)


class Order(models.Model):
    """Active purchase request submitted by a chef."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    restaurant = models.CharField(max_length=20, choices=Restaurant.choices, db_index=True)
    chef = models.CharField(max_length=100)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'active_orders'
        ordering = ['-date']

    def __str__(self):
        return f"{self.get_restaurant_display()} - {self.chef} ({self.date:%Y-%m-%d %H:%M})"


class OrderItem(models.Model):
    """
    One product line of an active order.

    ``product_id`` is the catalog id used to join across records, while
    ``product_snapshot`` keeps the product as it looked when ordered.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    product_id = models.UUIDField(db_index=True)
    product_snapshot = models.JSONField(default=dict)
    status = models.CharField(max_length=20, choices=ItemStatus.choices, default=ItemStatus.PENDING)
    quantity = models.DecimalField(max_digits=12, decimal_places=3, validators=[MinValueValidator(Decimal('0'))])
    unit = models.CharField(max_length=30)
    actual_quantity = models.DecimalField(max_digits=12, decimal_places=3, null=True, blank=True)
    price_per_unit = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'order_items'
        unique_together = [['order', 'product_id']]
        ordering = ['position', 'id']

    def __str__(self):
        return f"{self.product_snapshot.get('name_ka', self.product_id)} - {self.quantity} {self.unit}"

    @property
    def dispatch_quantity(self):
        """Quantity sent to a supplier: the recorded actual, else the request."""
        return self.actual_quantity if self.actual_quantity is not None else self.quantity

    def as_document(self):
        """Embedded form stored on completed orders. Decimals are kept as text."""
        return {
            'product_id': str(self.product_id),
            'product': self.product_snapshot,
            'status': self.status,
            'quantity': _decimal_text(self.quantity),
            'unit': self.unit,
            'actual_quantity': _decimal_text(self.actual_quantity),
            'price_per_unit': _decimal_text(self.price_per_unit),
        }


class CompletedOrder(models.Model):
    """Immutable archive of a reconciled order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    source_order_id = models.UUIDField(db_index=True)
    restaurant = models.CharField(max_length=20, choices=Restaurant.choices, db_index=True)
    chef = models.CharField(max_length=100)
    date = models.DateTimeField()
    completion_date = models.DateTimeField(default=timezone.now, db_index=True)
    items = models.JSONField(default=list)

    class Meta:
        db_table = 'completed_orders'
        ordering = ['-completion_date']

    def __str__(self):
        return f"{self.get_restaurant_display()} - {self.chef} (completed {self.completion_date:%Y-%m-%d})"


class UnavailableItem(models.Model):
    """Record of a requested product that could not be bought."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product_id = models.UUIDField(db_index=True)
    product_snapshot = models.JSONField(default=dict)
    order_id = models.UUIDField()
    restaurant = models.CharField(max_length=20, choices=Restaurant.choices)
    date = models.DateTimeField(db_index=True)

    class Meta:
        db_table = 'unavailable_items'
        ordering = ['-date']

    def __str__(self):
        return f"{self.product_snapshot.get('name_ka', self.product_id)} ({self.get_restaurant_display()})"


class DispatchRecord(models.Model):
    """
    Batch of order lines handed to suppliers.

    ``items`` holds one entry per dispatched line with the product snapshot,
    quantity, unit, originating restaurant and chef, and the supplier once
    assigned. Only the supplier of an entry changes after creation.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    items = models.JSONField(default=list)

    class Meta:
        db_table = 'ordered_history'
        ordering = ['-date']

    def __str__(self):
        return f"Dispatch {self.date:%Y-%m-%d %H:%M} ({len(self.items)} items)"
