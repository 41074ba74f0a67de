from django.db import migrations, models
import django.db.models.deletion
import uuid


STATUS_CHOICES = [("active", "Active"), ("inactive", "Inactive")]


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("sku", models.CharField(max_length=50, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("unit", models.CharField(max_length=20)),
                ("category", models.CharField(max_length=100, blank=True, null=True)),
                (
                    "purchase_type",
                    models.CharField(
                        max_length=10,
                        choices=[("central", "Central"), ("local", "Local")],
                        default="central",
                    ),
                ),
                ("price", models.DecimalField(max_digits=12, decimal_places=4)),
                ("status", models.CharField(max_length=10, choices=STATUS_CHOICES, default="active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Recipe",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("category", models.CharField(max_length=100, blank=True, null=True)),
                ("yield_quantity", models.DecimalField(max_digits=12, decimal_places=3, default=1)),
                ("yield_unit", models.CharField(max_length=20, default="portion")),
                ("prep_time", models.PositiveIntegerField(default=0)),
                ("instructions", models.TextField(blank=True, null=True)),
                ("status", models.CharField(max_length=10, choices=STATUS_CHOICES, default="active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "recipes",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="RecipeIngredient",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("gross_qty", models.DecimalField(max_digits=12, decimal_places=4)),
                ("net_qty", models.DecimalField(max_digits=12, decimal_places=4)),
                ("unit", models.CharField(max_length=20)),
                ("correction_factor", models.DecimalField(max_digits=8, decimal_places=4, default=1)),
                (
                    "recipe",
                    models.ForeignKey(
                        to="catalog.recipe",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ingredients",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        to="catalog.product",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="recipe_usages",
                    ),
                ),
            ],
            options={
                "db_table": "recipe_ingredients",
            },
        ),
        migrations.CreateModel(
            name="MealOffer",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("status", models.CharField(max_length=10, choices=STATUS_CHOICES, default="active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "meal_offers",
                "ordering": ["name"],
            },
        ),
    ]
