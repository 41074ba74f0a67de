from django.db import migrations, models
from django.conf import settings
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
        ("catalog", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Stock",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("quantity", models.DecimalField(max_digits=14, decimal_places=4, default=0)),
                ("min_stock", models.DecimalField(max_digits=14, decimal_places=4, default=0)),
                ("avg_cost", models.DecimalField(max_digits=14, decimal_places=4, default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        to="catalog.product",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="stocks",
                    ),
                ),
                (
                    "unit",
                    models.ForeignKey(
                        to="accounts.unit",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="stocks",
                    ),
                ),
            ],
            options={
                "db_table": "stocks",
                "ordering": ["product__name"],
                "unique_together": {("product", "unit")},
            },
        ),
        migrations.CreateModel(
            name="InventoryTransaction",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                (
                    "type",
                    models.CharField(
                        max_length=10,
                        choices=[("IN", "In"), ("OUT", "Out"), ("ADJUST", "Adjust")],
                    ),
                ),
                ("quantity", models.DecimalField(max_digits=14, decimal_places=4)),
                ("cost", models.DecimalField(max_digits=14, decimal_places=4, default=0)),
                ("reason", models.CharField(max_length=255, blank=True, null=True)),
                ("reference_id", models.CharField(max_length=100, blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        to="catalog.product",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="inventory_transactions",
                    ),
                ),
                (
                    "unit",
                    models.ForeignKey(
                        to="accounts.unit",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="inventory_transactions",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        to=settings.AUTH_USER_MODEL,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inventory_transactions",
                        null=True,
                        blank=True,
                    ),
                ),
            ],
            options={
                "db_table": "inventory_transactions",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["product", "unit", "created_at"], name="inv_txn_prod_unit_created_idx"),
                    models.Index(fields=["reference_id"], name="inv_txn_reference_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PurchaseOrder",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("supplier", models.CharField(max_length=255, blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        max_length=10,
                        choices=[("draft", "Draft"), ("ordered", "Ordered"), ("received", "Received")],
                        default="draft",
                    ),
                ),
                ("total_value", models.DecimalField(max_digits=14, decimal_places=4, default=0)),
                ("received_at", models.DateTimeField(null=True, blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "unit",
                    models.ForeignKey(
                        to="accounts.unit",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="purchase_orders",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        to=settings.AUTH_USER_MODEL,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="purchase_orders",
                        null=True,
                        blank=True,
                    ),
                ),
            ],
            options={
                "db_table": "purchase_orders",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="PurchaseItem",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("quantity", models.DecimalField(max_digits=14, decimal_places=4)),
                ("cost", models.DecimalField(max_digits=14, decimal_places=4, default=0)),
                (
                    "order",
                    models.ForeignKey(
                        to="inventory.purchaseorder",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        to="catalog.product",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="purchase_items",
                    ),
                ),
            ],
            options={
                "db_table": "purchase_items",
            },
        ),
    ]
