from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

router = DefaultRouter()
router.register(r'active', views.ActiveOrderViewSet, basename='active-order')
router.register(r'dispatches', views.DispatchRecordViewSet, basename='dispatch-record')

urlpatterns = [
    # GET    /api/orders/active/                 - Active orders (admin)
    # POST   /api/orders/active/                 - Submit order (chef)
    # GET    /api/orders/active/{id}/            - Active order (admin)
    # POST   /api/orders/active/{id}/status/     - Toggle item status (admin)
    # POST   /api/orders/active/{id}/actuals/    - Record actuals (admin)
    # POST   /api/orders/active/{id}/complete/   - Complete order (admin)
    # GET    /api/orders/dispatches/             - Dispatch history (admin)
    # POST   /api/orders/dispatches/{id}/supplier/ - Assign supplier (admin)
    path('dispatch/', views.dispatch_selected, name='dispatch'),
    path('dispatch/shopping-list/', views.shopping_list, name='shopping-list'),
    path('completed/', views.completed_orders, name='completed-orders'),
    path('unavailable/', views.unavailable_items, name='unavailable-items'),

    path('', include(router.urls)),
]
