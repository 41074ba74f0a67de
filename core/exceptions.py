"""
Custom exceptions and the API error handler for kitchenops
"""
import logging

from django.core.exceptions import ObjectDoesNotExist
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class BusinessRuleViolation(APIException):
    status_code = 400
    default_detail = 'Operation not allowed.'
    default_code = 'business_rule_violation'


class InsufficientStock(BusinessRuleViolation):
    default_detail = 'Insufficient stock.'
    default_code = 'insufficient_stock'

    def __init__(self, current, requested, product=None):
        self.current = current
        self.requested = requested
        self.product = product
        if product is not None:
            detail = f'Insufficient stock for {product}. Current: {current}, Requested: {requested}'
        else:
            detail = f'Insufficient stock. Current: {current}, Requested: {requested}'
        super().__init__(detail)


class PlanAlreadyCompleted(BusinessRuleViolation):
    default_detail = 'Plan already completed'
    default_code = 'plan_already_completed'


class OrderAlreadyReceived(BusinessRuleViolation):
    default_detail = 'Order already received'
    default_code = 'order_already_received'


class ResourceNotFound(APIException):
    status_code = 404
    default_detail = 'Resource not found.'
    default_code = 'not_found'


class UnitAccessDenied(APIException):
    status_code = 403
    default_detail = 'Forbidden: Access to this unit is denied'
    default_code = 'unit_access_denied'


def _first_message(detail):
    """Pull a single readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _first_message(value)
            if key == 'non_field_errors':
                return message
            return f'{key}: {message}'
        return 'Invalid input.'
    if isinstance(detail, (list, tuple)):
        # Nested list serializers report valid items as empty dicts
        errors = [item for item in detail if item]
        return _first_message(errors[0]) if errors else 'Invalid input.'
    return str(detail)


def api_exception_handler(exc, context):
    """
    Render every API error as {"error": "<message>"}.

    Validation errors also carry the full field map under "details".
    Anything DRF does not know about is logged and returned as a generic 500.
    """
    if isinstance(exc, ObjectDoesNotExist):
        exc = ResourceNotFound()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}"
        )
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {'error': _first_message(exc.detail), 'details': exc.detail}
    elif isinstance(exc, Http404):
        response.data = {'error': 'Not found'}
    else:
        detail = getattr(exc, 'detail', None)
        response.data = {'error': _first_message(detail) if detail is not None else str(exc)}

    return response
