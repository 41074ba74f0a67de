from decimal import Decimal
from django.db import transaction
from rest_framework import serializers
from .models import Product, Recipe, RecipeIngredient, MealOffer


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')

    def validate_sku(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("SKU is required.")
        return value

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than zero.")
        return value


class RecipeIngredientSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_unit = serializers.CharField(source='product.unit', read_only=True)
    product_price = serializers.DecimalField(source='product.price', max_digits=12, decimal_places=4, read_only=True)
    correction_factor = serializers.DecimalField(max_digits=8, decimal_places=4, required=False)

    class Meta:
        model = RecipeIngredient
        fields = (
            'id', 'product', 'product_name', 'product_unit', 'product_price',
            'gross_qty', 'net_qty', 'unit', 'correction_factor',
        )

    def validate_gross_qty(self, value):
        if value <= 0:
            raise serializers.ValidationError("Gross quantity must be greater than zero.")
        return value

    def validate_net_qty(self, value):
        if value <= 0:
            raise serializers.ValidationError("Net quantity must be greater than zero.")
        return value

    def validate_correction_factor(self, value):
        if value < 0:
            raise serializers.ValidationError("Correction factor cannot be negative.")
        return value

    def validate(self, attrs):
        gross_qty = attrs.get('gross_qty')
        if attrs.get('correction_factor') is None and gross_qty and attrs.get('net_qty'):
            attrs['correction_factor'] = (gross_qty / attrs['net_qty']).quantize(Decimal('0.0001'))
        return attrs


class RecipeSerializer(serializers.ModelSerializer):
    ingredients = RecipeIngredientSerializer(many=True)
    cost_per_serving = serializers.SerializerMethodField()

    INGREDIENT_REQUIRED_FIELDS = ('product', 'gross_qty', 'net_qty', 'unit')

    class Meta:
        model = Recipe
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')

    def get_cost_per_serving(self, obj):
        return obj.cost_per_serving()

    def validate_yield_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Yield must be greater than zero.")
        return value

    def validate_ingredients(self, value):
        if not value:
            raise serializers.ValidationError("A recipe needs at least one ingredient.")

        # Nested items are not required field by field on PATCH; rows are replaced whole
        for index, item in enumerate(value):
            missing = [name for name in self.INGREDIENT_REQUIRED_FIELDS if item.get(name) in (None, '')]
            if missing:
                raise serializers.ValidationError(
                    f"Ingredient {index + 1} is missing: {', '.join(missing)}."
                )
        return value

    @transaction.atomic
    def create(self, validated_data):
        ingredients = validated_data.pop('ingredients')
        recipe = Recipe.objects.create(**validated_data)
        self._write_ingredients(recipe, ingredients)
        return recipe

    @transaction.atomic
    def update(self, instance, validated_data):
        ingredients = validated_data.pop('ingredients', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()

        # Ingredient rows are replaced wholesale
        if ingredients is not None:
            instance.ingredients.all().delete()
            self._write_ingredients(instance, ingredients)
        return instance

    def _write_ingredients(self, recipe, ingredients):
        RecipeIngredient.objects.bulk_create(
            RecipeIngredient(recipe=recipe, **item) for item in ingredients
        )


class MealOfferSerializer(serializers.ModelSerializer):
    class Meta:
        model = MealOffer
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')
