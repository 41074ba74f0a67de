from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


STATUS_CHOICES = [("active", "Active"), ("inactive", "Inactive")]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CustomUser",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.",
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255, blank=True, default="")),
                (
                    "role",
                    models.CharField(
                        max_length=20,
                        choices=[
                            ("admin", "Admin"),
                            ("manager", "Manager"),
                            ("operator", "Operator"),
                            ("nutritionist", "Nutritionist"),
                            ("chef", "Chef"),
                        ],
                        default="operator",
                    ),
                ),
                ("status", models.CharField(max_length=10, choices=STATUS_CHOICES, default="active")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("email", models.EmailField(max_length=254, unique=True)),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "db_table": "users",
                "ordering": ["email"],
            },
        ),
        migrations.CreateModel(
            name="Unit",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("type", models.CharField(max_length=10, choices=[("hub", "Hub"), ("spoke", "Spoke")])),
                ("status", models.CharField(max_length=10, choices=STATUS_CHOICES, default="active")),
                ("address", models.CharField(max_length=255, blank=True, null=True)),
                ("full_address", models.TextField(blank=True, null=True)),
                ("phone", models.CharField(max_length=30, blank=True, null=True)),
                ("manager", models.CharField(max_length=255, blank=True, null=True)),
                ("contract_number", models.CharField(max_length=100, blank=True, null=True)),
                ("contract_manager", models.CharField(max_length=255, blank=True, null=True)),
                ("latitude", models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)),
                ("longitude", models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "meal_offers",
                    models.ManyToManyField(to="catalog.mealoffer", related_name="units", blank=True),
                ),
            ],
            options={
                "db_table": "units",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="UserUnit",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        to="accounts.customuser",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="unit_grants",
                    ),
                ),
                (
                    "unit",
                    models.ForeignKey(
                        to="accounts.unit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="user_grants",
                    ),
                ),
            ],
            options={
                "db_table": "user_units",
                "unique_together": {("user", "unit")},
            },
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "teams",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="TeamMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "team",
                    models.ForeignKey(
                        to="accounts.team",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="memberships",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        to="accounts.customuser",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="team_memberships",
                    ),
                ),
            ],
            options={
                "db_table": "team_members",
                "unique_together": {("team", "user")},
            },
        ),
        migrations.CreateModel(
            name="TeamUnit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "team",
                    models.ForeignKey(
                        to="accounts.team",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="unit_links",
                    ),
                ),
                (
                    "unit",
                    models.ForeignKey(
                        to="accounts.unit",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="team_links",
                    ),
                ),
            ],
            options={
                "db_table": "team_units",
                "unique_together": {("team", "unit")},
            },
        ),
        migrations.AddField(
            model_name="team",
            name="members",
            field=models.ManyToManyField(
                through="accounts.TeamMember",
                to="accounts.customuser",
                related_name="teams",
                blank=True,
            ),
        ),
        migrations.AddField(
            model_name="team",
            name="units",
            field=models.ManyToManyField(
                through="accounts.TeamUnit",
                to="accounts.unit",
                related_name="teams",
                blank=True,
            ),
        ),
    ]
