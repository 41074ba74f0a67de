"""
Stock ledger services
- Manual stock movements (IN / OUT / ADJUST)
- Purchase order receipt
- Weighted average cost maintenance

Every public function runs inside a single database transaction and locks the
stock rows it touches, so a rejected movement leaves stock and the log unchanged.
"""
import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from core.exceptions import InsufficientStock, OrderAlreadyReceived, ResourceNotFound
from .models import Stock, InventoryTransaction, PurchaseOrder

logger = logging.getLogger(__name__)

COST_PLACES = Decimal('0.0001')


def format_quantity(value):
    """Render a decimal without trailing zeros (10.0000 -> 10)."""
    value = Decimal(value)
    if value == value.to_integral_value():
        return str(value.quantize(Decimal('1')))
    return format(value.normalize(), 'f')


def signed_delta(movement_type, quantity):
    """OUT subtracts; IN and ADJUST add."""
    if movement_type == InventoryTransaction.TYPE_OUT:
        return -quantity
    return quantity


def weighted_average_cost(old_qty, old_avg, in_qty, in_cost):
    """
    new_avg = (old_qty*old_avg + in_qty*in_cost) / (old_qty + in_qty)
    """
    new_qty = old_qty + in_qty
    if new_qty <= 0:
        return Decimal('0')
    return ((old_qty * old_avg + in_qty * in_cost) / new_qty).quantize(COST_PLACES)


def lock_stock(product, unit):
    """Fetch the stock row for (product, unit) with a row lock, or None."""
    return Stock.objects.select_for_update().filter(product=product, unit=unit).first()


class StockLedgerService:
    """Service for stock mutations with an audit trail"""

    @staticmethod
    @transaction.atomic
    def record_movement(product, unit, movement_type, quantity, cost=None, reason=None,
                        reference_id=None, user=None):
        """
        Record one manual movement and apply it to the stock row.

        The log row is written first; if the movement is rejected the whole
        transaction rolls back and neither the log nor the stock changes.
        Returns (transaction, stock).
        """
        quantity = Decimal(quantity)
        cost = Decimal(cost) if cost else Decimal('0')

        entry = InventoryTransaction.objects.create(
            product=product,
            unit=unit,
            type=movement_type,
            quantity=quantity,
            cost=cost,
            reason=reason,
            reference_id=reference_id,
            created_by=user,
        )

        delta = signed_delta(movement_type, quantity)
        stock = lock_stock(product, unit)

        if stock is None:
            if movement_type == InventoryTransaction.TYPE_OUT:
                logger.warning(
                    f"Rejected OUT of {quantity} {product.sku} at {unit.name}: no stock row"
                )
                raise InsufficientStock(0, format_quantity(quantity))
            stock = Stock.objects.create(
                product=product,
                unit=unit,
                quantity=delta,
                avg_cost=cost.quantize(COST_PLACES) if movement_type == InventoryTransaction.TYPE_IN else Decimal('0'),
            )
        else:
            current = stock.quantity
            new_quantity = current + delta
            if new_quantity < 0 and movement_type == InventoryTransaction.TYPE_OUT:
                logger.warning(
                    f"Rejected OUT of {quantity} {product.sku} at {unit.name}: only {current} on hand"
                )
                raise InsufficientStock(format_quantity(current), format_quantity(quantity))

            if movement_type == InventoryTransaction.TYPE_IN and cost > 0:
                stock.avg_cost = weighted_average_cost(current, stock.avg_cost, quantity, cost)
            stock.quantity = new_quantity
            stock.save(update_fields=['quantity', 'avg_cost', 'updated_at'])

        logger.info(
            f"Stock movement {movement_type} {quantity} {product.sku} at {unit.name} "
            f"-> {stock.quantity}"
        )
        return entry, stock

    @staticmethod
    @transaction.atomic
    def receive_purchase_order(order_id, user=None):
        """
        Add every order item to the order unit's stock, log one IN row per item
        and mark the order received. Fails if the order is missing or already received.
        """
        order = PurchaseOrder.objects.select_for_update().filter(pk=order_id).first()
        if order is None:
            raise ResourceNotFound('Order not found')
        if order.status == 'received':
            logger.warning(f"Purchase order {order.id} already received")
            raise OrderAlreadyReceived()

        items = list(order.items.select_related('product'))
        for item in items:
            stock = lock_stock(item.product, order.unit)
            if stock is None:
                stock = Stock.objects.create(
                    product=item.product,
                    unit=order.unit,
                    quantity=item.quantity,
                    avg_cost=item.cost.quantize(COST_PLACES),
                )
            else:
                if item.cost > 0:
                    stock.avg_cost = weighted_average_cost(stock.quantity, stock.avg_cost, item.quantity, item.cost)
                stock.quantity = stock.quantity + item.quantity
                stock.save(update_fields=['quantity', 'avg_cost', 'updated_at'])

            InventoryTransaction.objects.create(
                product=item.product,
                unit=order.unit,
                type=InventoryTransaction.TYPE_IN,
                quantity=item.quantity,
                cost=item.cost,
                reason='Purchase Order',
                reference_id=str(order.id),
                created_by=user,
            )

        order.status = 'received'
        order.received_at = timezone.now()
        order.save(update_fields=['status', 'received_at', 'updated_at'])

        logger.info(f"Purchase order {order.id} received: {len(items)} items into {order.unit.name}")
        return order
