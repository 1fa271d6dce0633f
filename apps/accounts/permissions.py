"""
Role permissions for kitchen staff.

The request user is a ``KitchenIdentity`` built from token claims, so
these checks read claims only and never touch the database.

Usage:
    @api_view(['GET'])
    @permission_classes([IsAdministrator])
    def completed_orders(request):
        ...
"""

from rest_framework.permissions import BasePermission


def _is_member(user):
    return bool(user and user.is_authenticated and getattr(user, 'role', ''))


class IsKitchenMember(BasePermission):
    """Any signed-in administrator or chef."""

    message = 'Sign in with a kitchen access code.'

    def has_permission(self, request, view):
        return _is_member(request.user)


class IsAdministrator(BasePermission):
    """Only the administrator may reconcile, dispatch and read history."""

    message = 'Only the administrator can perform this action.'

    def has_permission(self, request, view):
        return _is_member(request.user) and request.user.is_administrator


class IsChef(BasePermission):
    """Only a chef signed in for a restaurant."""

    message = 'Only a restaurant chef can perform this action.'

    def has_permission(self, request, view):
        return _is_member(request.user) and request.user.is_chef
