"""
Role-based permission classes shared by every app.

Administrators are users with ``role == 'admin'``; Django's ``is_staff`` only
controls access to the Django admin site.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsAdminRole(BasePermission):
    """
    Permission: user must have the admin role.

    Usage:
        @permission_classes([IsAuthenticated, IsAdminRole])
        def generate_numbers(request):
            ...
    """

    message = 'Administrator access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsAdminOrReadOnly(BasePermission):
    """Authenticated users may read; only admins may write."""

    message = 'Administrator access required.'

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return user.is_admin


class IsSelfOrAdmin(BasePermission):
    """
    Permission: object is the requesting user, or requester is admin.

    Works for User instances and for any object with a ``user`` attribute.
    """

    message = 'You can only access your own data.'

    def has_object_permission(self, request, view, obj):
        if request.user.is_admin:
            return True
        owner = getattr(obj, 'user', obj)
        return owner == request.user
