"""
Production plan completion: consume recipe ingredients from the unit's stock
"""
import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from core.exceptions import InsufficientStock, PlanAlreadyCompleted, ResourceNotFound, BusinessRuleViolation
from inventory.models import InventoryTransaction
from inventory.services import lock_stock, format_quantity
from .models import ProductionPlan

logger = logging.getLogger(__name__)


class ProductionService:

    @staticmethod
    @transaction.atomic
    def complete_plan(plan_id, user=None):
        """
        Deduct gross_qty x plan quantity of every ingredient from the plan's
        unit, log one OUT row per ingredient and mark the plan completed.

        A single short ingredient aborts the whole completion; nothing is deducted.
        """
        plan = (
            ProductionPlan.objects.select_for_update()
            .select_related('unit', 'recipe')
            .filter(pk=plan_id)
            .first()
        )
        if plan is None:
            raise ResourceNotFound('Plan not found')
        if plan.is_completed:
            logger.warning(f"Production plan {plan.id} already completed")
            raise PlanAlreadyCompleted()

        ingredients = list(plan.recipe.ingredients.select_related('product'))
        for ingredient in ingredients:
            required = ingredient.gross_qty * plan.quantity
            stock = lock_stock(ingredient.product, plan.unit)
            available = stock.quantity if stock is not None else Decimal('0')

            if stock is None or required > available:
                logger.warning(
                    f"Plan {plan.id}: {ingredient.product.sku} short at {plan.unit.name} "
                    f"(required {required}, available {available})"
                )
                raise InsufficientStock(
                    format_quantity(available), format_quantity(required), product=ingredient.product.name,
                )

            stock.quantity = stock.quantity - required
            stock.save(update_fields=['quantity', 'updated_at'])

            InventoryTransaction.objects.create(
                product=ingredient.product,
                unit=plan.unit,
                type=InventoryTransaction.TYPE_OUT,
                quantity=required,
                reason='Production',
                reference_id=str(plan.id),
                created_by=user,
            )

        plan.status = ProductionPlan.STATUS_COMPLETED
        plan.completed_at = timezone.now()
        plan.save(update_fields=['status', 'completed_at', 'updated_at'])

        logger.info(
            f"Production plan {plan.id} completed: {plan.quantity} x {plan.recipe.name}, "
            f"{len(ingredients)} ingredients consumed at {plan.unit.name}"
        )
        return plan

    @staticmethod
    @transaction.atomic
    def delete_plan(plan_id):
        plan = ProductionPlan.objects.select_for_update().filter(pk=plan_id).first()
        if plan is None:
            raise ResourceNotFound('Plan not found')
        if plan.is_completed:
            raise BusinessRuleViolation('Completed plans cannot be deleted')
        plan.delete()
        logger.info(f"Production plan {plan_id} deleted")
