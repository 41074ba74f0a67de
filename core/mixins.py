"""
Shared view mixins for kitchenops
"""
import logging

from django.db.models import ProtectedError

from .exceptions import BusinessRuleViolation

logger = logging.getLogger(__name__)


class ProtectedDestroyMixin:
    """Turn FK protection errors on delete into a readable 400."""
    protected_message = 'Record is still referenced and cannot be deleted'

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            logger.warning(f"Blocked delete of {instance.__class__.__name__} {instance.pk}: still referenced")
            raise BusinessRuleViolation(self.protected_message)
