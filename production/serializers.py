from rest_framework import serializers
from .models import ProductionPlan


class ProductionPlanSerializer(serializers.ModelSerializer):
    recipe_name = serializers.CharField(source='recipe.name', read_only=True)
    unit_name = serializers.CharField(source='unit.name', read_only=True)

    class Meta:
        model = ProductionPlan
        fields = [
            'id', 'unit', 'unit_name', 'recipe', 'recipe_name', 'date', 'quantity',
            'status', 'completed_at', 'created_by', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'completed_at', 'created_by', 'created_at', 'updated_at']

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be greater than zero.")
        return value

    def validate_status(self, value):
        if value == ProductionPlan.STATUS_COMPLETED:
            raise serializers.ValidationError("Plans are completed only through the complete action.")
        return value

    def validate(self, attrs):
        if self.instance is not None and self.instance.is_completed:
            raise serializers.ValidationError("Completed plans cannot be changed.")
        return attrs
