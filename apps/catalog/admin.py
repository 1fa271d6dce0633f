from django.contrib import admin
from apps.catalog.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for catalog products."""

    list_display = ['name_ka', 'name_en', 'category_ka', 'default_unit', 'restaurants', 'updated_at']
    list_filter = ['default_unit', 'category_ka']
    search_fields = ['name_ka', 'name_en', 'name_ru', 'category_ka']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['name_ka']

    fieldsets = (
        ('Names', {
            'fields': ('name_ka', 'name_en', 'name_ru')
        }),
        ('Categories', {
            'fields': ('category_ka', 'category_en', 'category_ru')
        }),
        ('Ordering', {
            'fields': ('default_unit', 'restaurants')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
