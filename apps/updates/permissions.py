from rest_framework import permissions


class IsAdmin(permissions.BasePermission):
    """
    Permission: User must be a site admin (staff).
    """

    message = 'Admin access required'

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_staff)
