from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Access code login
    path('code/', views.resolve_code, name='resolve-code'),
    path('login/', views.login, name='login'),

    # Current identity
    path('me/', views.current_identity, name='me'),
]
