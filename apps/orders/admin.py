from django.contrib import admin
from apps.orders.models import Order, OrderItem, CompletedOrder, UnavailableItem, DispatchRecord


class OrderItemInline(admin.TabularInline):
    """Inline admin for order lines."""
    model = OrderItem
    extra = 0
    fields = ['product_id', 'status', 'quantity', 'unit', 'actual_quantity', 'price_per_unit']
    readonly_fields = ['product_id']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for active orders."""

    list_display = ['id', 'restaurant', 'chef', 'date', 'item_count']
    list_filter = ['restaurant', 'date']
    search_fields = ['chef']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [OrderItemInline]
    date_hierarchy = 'date'
    ordering = ['-date']

    def item_count(self, obj):
        return obj.items.count()
    item_count.short_description = 'Items'


@admin.register(CompletedOrder)
class CompletedOrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'restaurant', 'chef', 'date', 'completion_date']
    list_filter = ['restaurant', 'completion_date']
    search_fields = ['chef']
    readonly_fields = ['source_order_id', 'restaurant', 'chef', 'date', 'completion_date', 'items']
    date_hierarchy = 'completion_date'


@admin.register(UnavailableItem)
class UnavailableItemAdmin(admin.ModelAdmin):
    list_display = ['product_id', 'restaurant', 'date', 'order_id']
    list_filter = ['restaurant', 'date']
    readonly_fields = ['product_id', 'product_snapshot', 'order_id', 'restaurant', 'date']


@admin.register(DispatchRecord)
class DispatchRecordAdmin(admin.ModelAdmin):
    list_display = ['id', 'date']
    date_hierarchy = 'date'
    readonly_fields = ['date']
