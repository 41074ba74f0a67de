from decimal import Decimal
from django.db import transaction
from rest_framework import serializers
from accounts.models import Unit
from catalog.models import Product
from .models import Stock, InventoryTransaction, PurchaseOrder, PurchaseItem


class StockSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_sku = serializers.CharField(source='product.sku', read_only=True)
    product_unit = serializers.CharField(source='product.unit', read_only=True)
    unit_name = serializers.CharField(source='unit.name', read_only=True)
    is_low = serializers.BooleanField(read_only=True)

    class Meta:
        model = Stock
        fields = [
            'id', 'product', 'product_name', 'product_sku', 'product_unit',
            'unit', 'unit_name', 'quantity', 'min_stock', 'avg_cost', 'is_low', 'updated_at',
        ]
        read_only_fields = ['id', 'product', 'unit', 'quantity', 'avg_cost', 'updated_at']

    def validate_min_stock(self, value):
        """Validate reorder threshold is non-negative"""
        if value < 0:
            raise serializers.ValidationError("Minimum stock cannot be negative.")
        return value


class InventoryTransactionSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    unit_name = serializers.CharField(source='unit.name', read_only=True)

    class Meta:
        model = InventoryTransaction
        fields = '__all__'


class MovementSerializer(serializers.Serializer):
    """Input for a manual stock movement. Accepts snake_case or camelCase ids."""
    product_id = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all(), source='product')
    unit_id = serializers.PrimaryKeyRelatedField(queryset=Unit.objects.all(), source='unit')
    type = serializers.ChoiceField(choices=InventoryTransaction.TYPE_CHOICES)
    quantity = serializers.DecimalField(max_digits=14, decimal_places=4)
    cost = serializers.DecimalField(max_digits=14, decimal_places=4, required=False, allow_null=True)
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    reference_id = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)

    CAMEL_CASE_KEYS = {'productId': 'product_id', 'unitId': 'unit_id', 'referenceId': 'reference_id'}

    def to_internal_value(self, data):
        if hasattr(data, 'items'):
            data = {self.CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}
        return super().to_internal_value(data)

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be positive")
        return value

    def validate_cost(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Cost cannot be negative.")
        return value


class PurchaseItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    line_total = serializers.DecimalField(max_digits=18, decimal_places=4, read_only=True)

    class Meta:
        model = PurchaseItem
        fields = ['id', 'product', 'product_name', 'quantity', 'cost', 'line_total']

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be greater than zero.")
        return value

    def validate_cost(self, value):
        if value < 0:
            raise serializers.ValidationError("Cost cannot be negative.")
        return value


class PurchaseOrderSerializer(serializers.ModelSerializer):
    items = PurchaseItemSerializer(many=True)
    unit_name = serializers.CharField(source='unit.name', read_only=True)

    class Meta:
        model = PurchaseOrder
        fields = [
            'id', 'unit', 'unit_name', 'supplier', 'status', 'total_value',
            'items', 'received_at', 'created_by', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'total_value', 'received_at', 'created_by', 'created_at', 'updated_at']

    def validate_status(self, value):
        if value == 'received':
            raise serializers.ValidationError("Orders become received only through the receive action.")
        return value

    def validate_items(self, value):
        if not value:
            raise serializers.ValidationError("An order needs at least one item.")
        return value

    @transaction.atomic
    def create(self, validated_data):
        items = validated_data.pop('items')
        validated_data['total_value'] = sum(
            (item['quantity'] * item.get('cost', Decimal('0')) for item in items), Decimal('0')
        )
        order = PurchaseOrder.objects.create(**validated_data)
        PurchaseItem.objects.bulk_create(PurchaseItem(order=order, **item) for item in items)
        return order
