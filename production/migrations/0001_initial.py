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
            name="ProductionPlan",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("date", models.DateField()),
                ("quantity", models.DecimalField(max_digits=12, decimal_places=3)),
                (
                    "status",
                    models.CharField(
                        max_length=20,
                        choices=[
                            ("planned", "Planned"),
                            ("in_progress", "In progress"),
                            ("completed", "Completed"),
                        ],
                        default="planned",
                    ),
                ),
                ("completed_at", models.DateTimeField(null=True, blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "unit",
                    models.ForeignKey(
                        to="accounts.unit",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="production_plans",
                    ),
                ),
                (
                    "recipe",
                    models.ForeignKey(
                        to="catalog.recipe",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="production_plans",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        to=settings.AUTH_USER_MODEL,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="production_plans",
                        null=True,
                        blank=True,
                    ),
                ),
            ],
            options={
                "db_table": "production_plans",
                "ordering": ["-date", "-created_at"],
            },
        ),
    ]
