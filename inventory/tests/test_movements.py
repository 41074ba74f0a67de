from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APITestCase
from rest_framework import status

from accounts.models import CustomUser, Unit, UserUnit
from catalog.models import Product
from core.exceptions import InsufficientStock
from inventory.models import Stock, InventoryTransaction
from inventory.services import StockLedgerService, format_quantity, weighted_average_cost


class LedgerHelpersTest(TestCase):
    def test_format_quantity_drops_trailing_zeros(self):
        self.assertEqual(format_quantity(Decimal('10.0000')), '10')
        self.assertEqual(format_quantity(Decimal('0.5000')), '0.5')
        self.assertEqual(format_quantity(Decimal('100')), '100')

    def test_weighted_average_cost(self):
        # 10 @ 5 plus 10 @ 7
        self.assertEqual(weighted_average_cost(Decimal('10'), Decimal('5'), Decimal('10'), Decimal('7')), Decimal('6'))

    def test_weighted_average_cost_from_empty_stock(self):
        self.assertEqual(weighted_average_cost(Decimal('0'), Decimal('0'), Decimal('4'), Decimal('2.5')), Decimal('2.5'))


class StockLedgerServiceTest(TestCase):
    def setUp(self):
        self.unit = Unit.objects.create(name='North', type='spoke')
        self.product = Product.objects.create(sku='FLR-001', name='Flour', unit='kg', price=Decimal('3'))

    def test_in_creates_stock_row(self):
        entry, stock = StockLedgerService.record_movement(self.product, self.unit, 'IN', Decimal('5'), cost=Decimal('3'))
        self.assertEqual(stock.quantity, Decimal('5'))
        self.assertEqual(stock.avg_cost, Decimal('3'))
        self.assertEqual(entry.type, 'IN')

    def test_out_without_stock_row(self):
        with self.assertRaises(InsufficientStock) as ctx:
            StockLedgerService.record_movement(self.product, self.unit, 'OUT', Decimal('5'))
        self.assertEqual(str(ctx.exception.detail), 'Insufficient stock. Current: 0, Requested: 5')
        self.assertFalse(Stock.objects.exists())
        self.assertFalse(InventoryTransaction.objects.exists())

    def test_adjust_adds_to_stock(self):
        Stock.objects.create(product=self.product, unit=self.unit, quantity=Decimal('10'))
        _, stock = StockLedgerService.record_movement(self.product, self.unit, 'ADJUST', Decimal('2.5'))
        self.assertEqual(stock.quantity, Decimal('12.5'))


class MovementEndpointTest(APITestCase):
    def setUp(self):
        self.north = Unit.objects.create(name='North', type='spoke')
        self.south = Unit.objects.create(name='South', type='spoke')
        self.product = Product.objects.create(sku='FLR-001', name='Flour', unit='kg', price=Decimal('3'))
        self.operator = CustomUser.objects.create_user(email='op@test.com', password='OpPass123!', role='operator')
        self.chef = CustomUser.objects.create_user(email='chef@test.com', password='ChefPass123!', role='chef')
        UserUnit.objects.create(user=self.operator, unit=self.north)
        UserUnit.objects.create(user=self.chef, unit=self.north)
        self.url = '/api/inventory/movement'
        self.client.force_authenticate(user=self.operator)

    def _move(self, movement_type, quantity, unit=None, **extra):
        payload = {
            'product_id': str(self.product.id),
            'unit_id': str((unit or self.north).id),
            'type': movement_type,
            'quantity': quantity,
        }
        payload.update(extra)
        return self.client.post(self.url, payload, format='json')

    def test_in_increments_existing_stock(self):
        Stock.objects.create(product=self.product, unit=self.north, quantity=Decimal('10'))
        response = self._move('IN', '5')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Decimal(str(response.data['stock']['quantity'])), Decimal('15'))
        self.assertEqual(response.data['transaction']['type'], 'IN')
        self.assertEqual(response.data['transaction']['created_by'], self.operator.id)

    def test_in_creates_missing_stock_row(self):
        response = self._move('IN', '7.5', cost='2')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        stock = Stock.objects.get(product=self.product, unit=self.north)
        self.assertEqual(stock.quantity, Decimal('7.5'))
        self.assertEqual(stock.avg_cost, Decimal('2'))

    def test_camel_case_ids_accepted(self):
        response = self.client.post(self.url, {
            'productId': str(self.product.id),
            'unitId': str(self.north.id),
            'type': 'IN',
            'quantity': '1',
            'referenceId': 'DELIVERY-7',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['transaction']['reference_id'], 'DELIVERY-7')

    def test_out_without_stock_row_is_rejected(self):
        response = self._move('OUT', '5')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Insufficient stock. Current: 0, Requested: 5')
        self.assertFalse(Stock.objects.exists())

    def test_out_beyond_stock_leaves_stock_and_log_unchanged(self):
        Stock.objects.create(product=self.product, unit=self.north, quantity=Decimal('10'))
        response = self._move('OUT', '15')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Insufficient stock. Current: 10, Requested: 15')

        stock = Stock.objects.get(product=self.product, unit=self.north)
        self.assertEqual(stock.quantity, Decimal('10'))
        self.assertFalse(InventoryTransaction.objects.exists())

    def test_out_down_to_zero_is_allowed(self):
        Stock.objects.create(product=self.product, unit=self.north, quantity=Decimal('10'))
        response = self._move('OUT', '10')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Stock.objects.get(product=self.product, unit=self.north).quantity, Decimal('0'))

    def test_non_positive_quantity_rejected_before_any_write(self):
        for quantity in ('0', '-3'):
            response = self._move('IN', quantity)
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.data['error'], 'quantity: Quantity must be positive')
        self.assertFalse(InventoryTransaction.objects.exists())
        self.assertFalse(Stock.objects.exists())

    def test_in_with_cost_updates_weighted_average(self):
        Stock.objects.create(product=self.product, unit=self.north, quantity=Decimal('10'), avg_cost=Decimal('5'))
        self._move('IN', '10', cost='7')
        stock = Stock.objects.get(product=self.product, unit=self.north)
        self.assertEqual(stock.avg_cost, Decimal('6'))

    def test_in_without_cost_keeps_average(self):
        Stock.objects.create(product=self.product, unit=self.north, quantity=Decimal('10'), avg_cost=Decimal('5'))
        self._move('IN', '10')
        self.assertEqual(Stock.objects.get(product=self.product, unit=self.north).avg_cost, Decimal('5'))

    def test_movement_on_foreign_unit_forbidden(self):
        response = self._move('IN', '5', unit=self.south)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Forbidden: Access to this unit is denied')
        self.assertFalse(InventoryTransaction.objects.exists())

    def test_chef_cannot_record_movements(self):
        self.client.force_authenticate(user=self.chef)
        response = self._move('IN', '5')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_product_rejected(self):
        response = self.client.post(self.url, {
            'product_id': '00000000-0000-0000-0000-000000000000',
            'unit_id': str(self.north.id),
            'type': 'IN',
            'quantity': '1',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('product_id', response.data['details'])


class StockQueriesTest(APITestCase):
    def setUp(self):
        self.north = Unit.objects.create(name='North', type='spoke')
        self.south = Unit.objects.create(name='South', type='spoke')
        self.flour = Product.objects.create(sku='FLR-001', name='Flour', unit='kg', price=Decimal('3'))
        self.salt = Product.objects.create(sku='SLT-001', name='Salt', unit='kg', price=Decimal('1'))
        self.flour_north = Stock.objects.create(product=self.flour, unit=self.north, quantity=Decimal('2'), min_stock=Decimal('5'))
        Stock.objects.create(product=self.salt, unit=self.north, quantity=Decimal('8'), min_stock=Decimal('1'))
        Stock.objects.create(product=self.flour, unit=self.south, quantity=Decimal('1'), min_stock=Decimal('4'))

        self.manager = CustomUser.objects.create_user(email='manager@test.com', password='ManagerPass123!', role='manager')
        self.operator = CustomUser.objects.create_user(email='op@test.com', password='OpPass123!', role='operator')
        UserUnit.objects.create(user=self.manager, unit=self.north)
        UserUnit.objects.create(user=self.operator, unit=self.north)

    def test_stock_list_scoped_to_allowed_units(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.get('/api/inventory/stocks')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertTrue(all(row['unit'] == self.north.id for row in response.data))

    def test_low_stock_filter(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.get('/api/inventory/stocks', {'unit_id': str(self.north.id), 'low_stock': 'true'})
        self.assertEqual([row['product_sku'] for row in response.data], ['FLR-001'])
        self.assertTrue(response.data[0]['is_low'])

    def test_stock_list_for_foreign_unit_forbidden(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.get('/api/inventory/stocks', {'unitId': str(self.south.id)})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_manager_sets_min_stock(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.patch(f'/api/inventory/stocks/{self.flour_north.id}', {'min_stock': '1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.flour_north.refresh_from_db()
        self.assertEqual(self.flour_north.min_stock, Decimal('1'))

    def test_quantity_is_not_patchable(self):
        self.client.force_authenticate(user=self.manager)
        self.client.patch(f'/api/inventory/stocks/{self.flour_north.id}', {'quantity': '999'}, format='json')
        self.flour_north.refresh_from_db()
        self.assertEqual(self.flour_north.quantity, Decimal('2'))

    def test_operator_cannot_set_min_stock(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.patch(f'/api/inventory/stocks/{self.flour_north.id}', {'min_stock': '1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_transactions_scoped_and_filtered(self):
        StockLedgerService.record_movement(self.flour, self.north, 'IN', Decimal('1'), reference_id='A')
        StockLedgerService.record_movement(self.salt, self.north, 'IN', Decimal('1'), reference_id='B')
        StockLedgerService.record_movement(self.flour, self.south, 'IN', Decimal('1'), reference_id='C')

        self.client.force_authenticate(user=self.operator)
        response = self.client.get('/api/inventory/transactions')
        self.assertEqual(sorted(row['reference_id'] for row in response.data), ['A', 'B'])

        response = self.client.get('/api/inventory/transactions', {'product_id': str(self.flour.id)})
        self.assertEqual([row['reference_id'] for row in response.data], ['A'])
