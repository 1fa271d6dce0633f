"""
Request identity for kitchen staff.

There are no user rows: an access token carries the role, restaurant and
chef claims, and ``KitchenIdentity`` exposes them to views and permissions.
simplejwt builds it through ``SIMPLE_JWT['TOKEN_USER_CLASS']``.
"""

from django.utils.functional import cached_property
from rest_framework_simplejwt.models import TokenUser

ADMIN_ROLE = 'ADMIN'


class KitchenIdentity(TokenUser):
    """Stateless user rebuilt from access token claims."""

    @cached_property
    def role(self):
        return self.token.get('role', '')

    @cached_property
    def restaurant(self):
        return self.token.get('restaurant') or None

    @cached_property
    def chef(self):
        return self.token.get('chef') or ''

    @property
    def is_administrator(self):
        return self.role == ADMIN_ROLE

    @property
    def is_chef(self):
        return not self.is_administrator and bool(self.restaurant)

    def __str__(self):
        if self.is_administrator:
            return 'Administrator'
        return f"{self.chef} ({self.restaurant})"
