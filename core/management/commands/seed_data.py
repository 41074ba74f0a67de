from decimal import Decimal
from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.db import transaction

from accounts.models import Unit, UserUnit, Team, TeamMember, TeamUnit
from catalog.models import Product, Recipe, RecipeIngredient, MealOffer

User = get_user_model()

DEMO_PASSWORD = 'kitchen123'


class Command(BaseCommand):
    help = 'Seeds the database with a hub, two spokes, one user per role, a few products and a recipe'

    def handle(self, *args, **kwargs):
        self.stdout.write('Starting seeding process...')

        with transaction.atomic():
            # 1. Units
            hub, _ = Unit.objects.get_or_create(name='Central Kitchen', defaults={'type': 'hub', 'manager': 'Ana'})
            north, _ = Unit.objects.get_or_create(name='North Cafeteria', defaults={'type': 'spoke'})
            south, _ = Unit.objects.get_or_create(name='South Cafeteria', defaults={'type': 'spoke'})

            lunch, _ = MealOffer.objects.get_or_create(name='Lunch', defaults={'description': 'Main weekday meal'})
            for unit in (north, south):
                unit.meal_offers.add(lunch)

            # 2. One user per role
            users = {}
            for role in ('admin', 'manager', 'operator', 'nutritionist', 'chef'):
                email = f'{role}@kitchenops.local'
                user = User.objects.filter(email=email).first()
                if user is None:
                    user = User.objects.create_user(
                        email=email, password=DEMO_PASSWORD, name=role.title(), role=role,
                    )
                    self.stdout.write(f'Created {role} user: {email} / {DEMO_PASSWORD}')
                users[role] = user

            # 3. Hub team, plus a direct grant for the spoke operator
            team, _ = Team.objects.get_or_create(name='Hub crew', defaults={'description': 'Central kitchen staff'})
            TeamUnit.objects.get_or_create(team=team, unit=hub)
            for role in ('manager', 'chef', 'nutritionist'):
                TeamMember.objects.get_or_create(team=team, user=users[role])
            UserUnit.objects.get_or_create(user=users['operator'], unit=north)

            # 4. Catalog
            products = {}
            for sku, name, unit, category, price in (
                ('RICE-01', 'Rice', 'kg', 'Grains', Decimal('5.20')),
                ('BEAN-01', 'Black beans', 'kg', 'Grains', Decimal('8.90')),
                ('ONIO-01', 'Onion', 'kg', 'Produce', Decimal('4.10')),
                ('OIL-01', 'Soybean oil', 'L', 'Oils', Decimal('7.50')),
            ):
                products[sku], _ = Product.objects.get_or_create(
                    sku=sku,
                    defaults={'name': name, 'unit': unit, 'category': category, 'price': price},
                )

            recipe, created = Recipe.objects.get_or_create(
                name='Rice and beans',
                defaults={'category': 'Main', 'yield_quantity': Decimal('10'), 'yield_unit': 'portion', 'prep_time': 60},
            )
            if created:
                for sku, gross, net in (
                    ('RICE-01', '1.000', '1.000'),
                    ('BEAN-01', '0.800', '0.800'),
                    ('ONIO-01', '0.200', '0.160'),
                    ('OIL-01', '0.050', '0.050'),
                ):
                    RecipeIngredient.objects.create(
                        recipe=recipe,
                        product=products[sku],
                        gross_qty=Decimal(gross),
                        net_qty=Decimal(net),
                        unit=products[sku].unit,
                        correction_factor=(Decimal(gross) / Decimal(net)).quantize(Decimal('0.0001')),
                    )

        self.stdout.write(self.style.SUCCESS('Seeding completed successfully'))
