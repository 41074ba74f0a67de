"""
Request audit logging for kitchenops
"""
from django.utils.deprecation import MiddlewareMixin
import logging

logger = logging.getLogger(__name__)

MUTATING_METHODS = ('POST', 'PUT', 'PATCH', 'DELETE')


class AuditLoggingMiddleware(MiddlewareMixin):
    """
    Logs every mutating API call with the acting user and the response status
    """

    def process_response(self, request, response):
        if request.method in MUTATING_METHODS and request.path.startswith('/api/'):
            user = getattr(request, 'user', None)
            actor = getattr(user, 'email', None) or 'anonymous'
            logger.info(
                f"API Action: {request.method} {request.path} | "
                f"User: {actor} | "
                f"Status: {response.status_code}"
            )
        return response
