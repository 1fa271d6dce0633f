from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'', views.ProductViewSet, basename='product')

urlpatterns = [
    # GET    /api/products/              - List products (chef: eligible only)
    # POST   /api/products/              - Create product / chef ad-hoc item
    # GET    /api/products/categories/   - Products grouped by category
    # GET    /api/products/{id}/         - Product details (admin)
    # PUT    /api/products/{id}/         - Update product (admin)
    # PATCH  /api/products/{id}/         - Partial update (admin)
    # DELETE /api/products/{id}/         - Delete product (admin)
    path('', include(router.urls)),
]
