from django.db import models
from django.conf import settings
import uuid


class Stock(models.Model):
    """On-hand quantity of one product at one unit. Created on first movement, never deleted."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey('catalog.Product', on_delete=models.PROTECT, related_name='stocks')
    unit = models.ForeignKey('accounts.Unit', on_delete=models.PROTECT, related_name='stocks')
    quantity = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    min_stock = models.DecimalField(max_digits=14, decimal_places=4, default=0)  # reorder threshold
    avg_cost = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stocks'
        unique_together = ['product', 'unit']
        ordering = ['product__name']

    def __str__(self):
        return f"{self.product.name} @ {self.unit.name}: {self.quantity}"

    @property
    def is_low(self):
        return self.quantity < self.min_stock


class InventoryTransaction(models.Model):
    """Append-only log of every stock movement"""

    TYPE_IN = 'IN'
    TYPE_OUT = 'OUT'
    TYPE_ADJUST = 'ADJUST'
    TYPE_CHOICES = (
        (TYPE_IN, 'In'),
        (TYPE_OUT, 'Out'),
        (TYPE_ADJUST, 'Adjust'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey('catalog.Product', on_delete=models.PROTECT, related_name='inventory_transactions')
    unit = models.ForeignKey('accounts.Unit', on_delete=models.PROTECT, related_name='inventory_transactions')
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    quantity = models.DecimalField(max_digits=14, decimal_places=4)
    cost = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    reason = models.CharField(max_length=255, blank=True, null=True)
    reference_id = models.CharField(max_length=100, blank=True, null=True)  # plan id, order id, etc.
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='inventory_transactions',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'inventory_transactions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['product', 'unit', 'created_at'], name='inv_txn_prod_unit_created_idx'),
            models.Index(fields=['reference_id'], name='inv_txn_reference_idx'),
        ]

    def __str__(self):
        return f"{self.type} {self.quantity} {self.product.unit} of {self.product.name}"


class PurchaseOrder(models.Model):
    STATUS_CHOICES = (
        ('draft', 'Draft'),
        ('ordered', 'Ordered'),
        ('received', 'Received'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    unit = models.ForeignKey('accounts.Unit', on_delete=models.PROTECT, related_name='purchase_orders')
    supplier = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='draft')
    total_value = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    received_at = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='purchase_orders',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'purchase_orders'
        ordering = ['-created_at']

    def __str__(self):
        return f"PO {self.id} - {self.supplier or 'no supplier'} ({self.status})"


class PurchaseItem(models.Model):
    """`cost` is the unit cost of the product on this order."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(PurchaseOrder, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey('catalog.Product', on_delete=models.PROTECT, related_name='purchase_items')
    quantity = models.DecimalField(max_digits=14, decimal_places=4)
    cost = models.DecimalField(max_digits=14, decimal_places=4, default=0)

    class Meta:
        db_table = 'purchase_items'

    def __str__(self):
        return f"{self.quantity} x {self.product.name} @ {self.cost}"

    @property
    def line_total(self):
        return self.quantity * self.cost
