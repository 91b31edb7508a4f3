from rest_framework.permissions import BasePermission

from .utils.constants import UserRole


def _role(user):
    profile = getattr(user, 'profile', None)
    return profile.role if profile else None


class IsPassenger(BasePermission):
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated) and _role(request.user) == UserRole.PASSENGER


class IsDriver(BasePermission):
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated) and _role(request.user) == UserRole.DRIVER


class IsAdminRole(BasePermission):
    """Admin profiles and Django staff users"""
    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.is_staff or _role(user) == UserRole.ADMIN
