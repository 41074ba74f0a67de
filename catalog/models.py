from decimal import Decimal
from django.db import models
import uuid

STATUS_CHOICES = (
    ('active', 'Active'),
    ('inactive', 'Inactive'),
)


class Product(models.Model):
    """Purchasable ingredient. `price` is per `unit` of measure."""
    PURCHASE_TYPE_CHOICES = (
        ('central', 'Central'),
        ('local', 'Local'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sku = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=255)
    unit = models.CharField(max_length=20)  # e.g. 'kg', 'L', 'un'
    category = models.CharField(max_length=100, blank=True, null=True)
    purchase_type = models.CharField(max_length=10, choices=PURCHASE_TYPE_CHOICES, default='central')
    price = models.DecimalField(max_digits=12, decimal_places=4)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.unit})"


class Recipe(models.Model):
    """Technical sheet: ingredients needed for one batch of `yield_quantity` servings."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100, blank=True, null=True)
    yield_quantity = models.DecimalField(max_digits=12, decimal_places=3, default=1)
    yield_unit = models.CharField(max_length=20, default='portion')
    prep_time = models.PositiveIntegerField(default=0)  # minutes
    instructions = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipes'
        ordering = ['name']

    def __str__(self):
        return self.name

    def total_cost(self):
        return sum(
            (item.product.price * item.gross_qty for item in self.ingredients.all()),
            Decimal('0'),
        )

    def cost_per_serving(self):
        if not self.yield_quantity:
            return Decimal('0')
        return (self.total_cost() / self.yield_quantity).quantize(Decimal('0.0001'))


class RecipeIngredient(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    recipe = models.ForeignKey(Recipe, on_delete=models.CASCADE, related_name='ingredients')
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name='recipe_usages')
    gross_qty = models.DecimalField(max_digits=12, decimal_places=4)
    net_qty = models.DecimalField(max_digits=12, decimal_places=4)
    unit = models.CharField(max_length=20)
    correction_factor = models.DecimalField(max_digits=8, decimal_places=4, default=1)

    class Meta:
        db_table = 'recipe_ingredients'

    def __str__(self):
        return f"{self.gross_qty} {self.unit} of {self.product.name}"


class MealOffer(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'meal_offers'
        ordering = ['name']

    def __str__(self):
        return self.name
