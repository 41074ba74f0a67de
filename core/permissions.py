"""
Role-based permission classes for kitchenops
"""
from rest_framework import permissions

from accounts.permissions import (
    get_claims, ADMIN, MANAGER, OPERATOR, NUTRITIONIST, CHEF,
)


class HasAnyRole(permissions.BasePermission):
    """
    Grants access when the user holds one of `allowed_roles`.
    Admins are always allowed.
    """
    allowed_roles = ()
    message = 'Forbidden: Insufficient permissions'

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return get_claims(request).has_any_role(self.allowed_roles)


class IsAdmin(HasAnyRole):
    allowed_roles = (ADMIN,)


class IsAdminOrManager(HasAnyRole):
    allowed_roles = (ADMIN, MANAGER)


class CanRecordMovement(HasAnyRole):
    """
    Manual stock movements: admin, manager, operator
    """
    allowed_roles = (ADMIN, MANAGER, OPERATOR)


class CanReceivePurchase(HasAnyRole):
    allowed_roles = (ADMIN, MANAGER, OPERATOR)


class CanPlanProduction(HasAnyRole):
    """
    Creating production plans: admin, manager, chef, nutritionist
    """
    allowed_roles = (ADMIN, MANAGER, CHEF, NUTRITIONIST)


class CanCompleteProduction(HasAnyRole):
    """
    Completing production plans: admin, manager, chef, operator
    """
    allowed_roles = (ADMIN, MANAGER, CHEF, OPERATOR)


class CanEditRecipes(HasAnyRole):
    allowed_roles = (ADMIN, MANAGER, NUTRITIONIST)


class WriteRolesMixin:
    """
    View mixin: safe methods only need `permission_classes`,
    writes must also pass every class in `write_permission_classes`.
    """
    write_permission_classes = ()

    def get_permissions(self):
        classes = list(self.permission_classes)
        if self.request.method not in permissions.SAFE_METHODS:
            classes += list(self.write_permission_classes)
        return [permission() for permission in classes]
