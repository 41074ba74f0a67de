"""
Per-request permission claims.

A user's role and the units they may act on are resolved once per request and
cached on the request, so permission classes and unit-scoped views share one
lookup.
"""
from dataclasses import dataclass, field

from .models import UserUnit, TeamUnit

ADMIN = 'admin'
MANAGER = 'manager'
OPERATOR = 'operator'
NUTRITIONIST = 'nutritionist'
CHEF = 'chef'

ALL_ROLES = frozenset({ADMIN, MANAGER, OPERATOR, NUTRITIONIST, CHEF})

_CLAIMS_ATTR = '_permission_claims'


@dataclass(frozen=True)
class PermissionClaims:
    user_id: object
    roles: frozenset
    unit_ids: frozenset = field(default_factory=frozenset)

    @property
    def is_admin(self):
        return ADMIN in self.roles

    def has_any_role(self, allowed):
        """Admins always pass role checks."""
        return self.is_admin or bool(self.roles & frozenset(allowed))

    def can_access_unit(self, unit_id):
        if self.is_admin:
            return True
        return str(unit_id) in self.unit_ids


def get_allowed_unit_ids(user):
    """Units granted directly plus units reached through team membership."""
    direct = UserUnit.objects.filter(user=user).values_list('unit_id', flat=True)
    via_teams = TeamUnit.objects.filter(team__memberships__user=user).values_list('unit_id', flat=True)
    return {str(unit_id) for unit_id in direct} | {str(unit_id) for unit_id in via_teams}


def resolve_claims(user):
    if user is None or not user.is_authenticated:
        return PermissionClaims(user_id=None, roles=frozenset())
    roles = frozenset({user.role}) if user.role else frozenset()
    unit_ids = frozenset() if ADMIN in roles else frozenset(get_allowed_unit_ids(user))
    return PermissionClaims(user_id=user.pk, roles=roles, unit_ids=unit_ids)


def get_claims(request):
    """Return the claims for request.user, resolving them on first use."""
    claims = getattr(request, _CLAIMS_ATTR, None)
    if claims is None or claims.user_id != getattr(request.user, 'pk', None):
        claims = resolve_claims(request.user)
        setattr(request, _CLAIMS_ATTR, claims)
    return claims
