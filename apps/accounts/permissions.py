from rest_framework.permissions import BasePermission

from apps.accounts.models import UserRole


class IsSystemAdmin(BasePermission):
    """Allows access only to authenticated users holding the SYSTEM_ADMIN role."""

    message = "System admin role required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'role', None) == UserRole.SYSTEM_ADMIN)
