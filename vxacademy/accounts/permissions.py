"""
Role-based access control for VX Academy endpoints
"""
from rest_framework import permissions


CONTENT_MANAGER_ROLES = ('admin', 'content_creator')


def _has_role(request, roles):
    user = request.user
    return bool(user and user.is_authenticated and getattr(user, 'role', None) in roles)


class IsAdmin(permissions.BasePermission):
    """Only admins can access"""
    message = 'Unauthorized'

    def has_permission(self, request, view):
        return _has_role(request, ('admin',))


class IsContentManager(permissions.BasePermission):
    """Admins and content creators"""
    message = 'Unauthorized'

    def has_permission(self, request, view):
        return _has_role(request, CONTENT_MANAGER_ROLES)


class IsContentManagerOrReadOnly(permissions.BasePermission):
    """Anyone can read, admins and content creators can edit"""
    message = 'Unauthorized'

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return _has_role(request, CONTENT_MANAGER_ROLES)

