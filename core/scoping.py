"""
Unit scoping for kitchenops views.
Non-admin users only see and touch rows belonging to their allowed units.
"""
import logging
import uuid

from rest_framework.exceptions import ValidationError

from accounts.permissions import get_claims
from .exceptions import UnitAccessDenied

logger = logging.getLogger(__name__)


def parse_uuid(value, field='unit_id'):
    """Validate an id coming from a query string or body"""
    try:
        return str(uuid.UUID(str(value)))
    except (TypeError, ValueError):
        raise ValidationError({field: 'Must be a valid UUID.'})


def requested_unit_id(request):
    """Read the unit filter from the query string (unit_id or unitId)"""
    value = request.query_params.get('unit_id') or request.query_params.get('unitId')
    return parse_uuid(value) if value else None


def ensure_unit_access(request, unit_id):
    if not get_claims(request).can_access_unit(unit_id):
        logger.warning(f"User {request.user.email} denied access to unit {unit_id}")
        raise UnitAccessDenied()


class UnitScopeMixin:
    """
    Mixin for list/detail views whose model carries a unit.
    Filters querysets by the requested unit or by the user's allowed units.
    """

    unit_field = 'unit_id'

    def get_queryset(self):
        queryset = super().get_queryset()
        unit_id = requested_unit_id(self.request)

        if unit_id:
            ensure_unit_access(self.request, unit_id)
            return queryset.filter(**{self.unit_field: unit_id})

        claims = get_claims(self.request)
        if claims.is_admin:
            return queryset
        return queryset.filter(**{f'{self.unit_field}__in': list(claims.unit_ids)})
