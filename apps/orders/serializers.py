from rest_framework import serializers
from apps.catalog.models import Restaurant
from .models import Order, OrderItem, ItemStatus, CompletedOrder, UnavailableItem, DispatchRecord


# =============================================================================
# Output serializers
# =============================================================================

class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for one line of an active order."""

    product = serializers.JSONField(source='product_snapshot', read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            'product_id',
            'product',
            'status',
            'quantity',
            'unit',
            'actual_quantity',
            'price_per_unit',
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Active order with its lines."""

    items = OrderItemSerializer(many=True, read_only=True)
    restaurant_display = serializers.CharField(source='get_restaurant_display', read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'restaurant', 'restaurant_display', 'chef', 'date', 'items']
        read_only_fields = fields


class CompletedOrderSerializer(serializers.ModelSerializer):
    restaurant_display = serializers.CharField(source='get_restaurant_display', read_only=True)

    class Meta:
        model = CompletedOrder
        fields = [
            'id',
            'source_order_id',
            'restaurant',
            'restaurant_display',
            'chef',
            'date',
            'completion_date',
            'items',
        ]
        read_only_fields = fields


class UnavailableItemSerializer(serializers.ModelSerializer):
    product = serializers.JSONField(source='product_snapshot', read_only=True)

    class Meta:
        model = UnavailableItem
        fields = ['id', 'product_id', 'product', 'order_id', 'restaurant', 'date']
        read_only_fields = fields


class DispatchRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = DispatchRecord
        fields = ['id', 'date', 'items']
        read_only_fields = fields


class DayGroupSerializer(serializers.Serializer):
    """Records of one calendar day; ``records`` shape depends on the listing."""
    day = serializers.DateField()
    records = serializers.ListField(child=serializers.DictField())


class ShoppingListSerializer(serializers.Serializer):
    text = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()


# =============================================================================
# Input serializers
# =============================================================================

class OrderLineInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.DecimalField(
        max_digits=12, decimal_places=3, min_value=0, required=False
    )
    unit = serializers.CharField(max_length=30, required=False, allow_blank=True)


class OrderSubmitSerializer(serializers.Serializer):
    items = OrderLineInputSerializer(many=True)


class ItemStatusSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    status = serializers.ChoiceField(choices=ItemStatus.choices)


class ItemActualsSerializer(serializers.Serializer):
    """
    Raw actuals as typed by the administrator.

    Values stay text here; the service ignores anything that is not a
    finite number instead of rejecting the request.
    """
    product_id = serializers.UUIDField()
    actual_quantity = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price_per_unit = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class SelectionSerializer(serializers.Serializer):
    order_id = serializers.UUIDField()
    product_id = serializers.UUIDField()


class SelectionListSerializer(serializers.Serializer):
    items = SelectionSerializer(many=True)


class SupplierAssignmentSerializer(serializers.Serializer):
    index = serializers.IntegerField(min_value=0)
    supplier = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)


class HistoryQuerySerializer(serializers.Serializer):
    restaurant = serializers.ChoiceField(choices=Restaurant.choices, required=False)
    grouped = serializers.ChoiceField(choices=[('day', 'By day')], required=False)
