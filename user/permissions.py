from rest_framework import permissions

from canteen_backend.error_codes import AuthErrors
from .models import User


class IsAdminRole(permissions.BasePermission):
    """
    Permission class to check if user has Admin role.
    """
    message = AuthErrors.ADMIN_PERMISSION_REQUIRED['message']

    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.role == User.ROLE_ADMIN
