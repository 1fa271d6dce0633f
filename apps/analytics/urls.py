from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Prices
    path('prices/', views.price_history, name='price-history'),
    path('last-prices/', views.last_prices, name='last-prices'),
    path('price-check/', views.price_check, name='price-check'),

    # Active orders
    path('common-items/', views.common_items, name='common-items'),
    path('shopping-total/', views.shopping_total, name='shopping-total'),

    # AI analyst
    path('ask/', views.ask, name='ask'),
]
