from django.db import models
from django.conf import settings
import uuid


class ProductionPlan(models.Model):
    """Batches of a recipe scheduled at a unit. Completion is one-way."""
    STATUS_PLANNED = 'planned'
    STATUS_IN_PROGRESS = 'in_progress'
    STATUS_COMPLETED = 'completed'
    STATUS_CHOICES = (
        (STATUS_PLANNED, 'Planned'),
        (STATUS_IN_PROGRESS, 'In progress'),
        (STATUS_COMPLETED, 'Completed'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    unit = models.ForeignKey('accounts.Unit', on_delete=models.PROTECT, related_name='production_plans')
    recipe = models.ForeignKey('catalog.Recipe', on_delete=models.PROTECT, related_name='production_plans')
    date = models.DateField()
    quantity = models.DecimalField(max_digits=12, decimal_places=3)  # number of recipe batches
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PLANNED)
    completed_at = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='production_plans',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'production_plans'
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.recipe.name} x{self.quantity} @ {self.unit.name} on {self.date}"

    @property
    def is_completed(self):
        return self.status == self.STATUS_COMPLETED
