from django.contrib import admin

from .models import ProductionPlan


@admin.register(ProductionPlan)
class ProductionPlanAdmin(admin.ModelAdmin):
    list_display = ['date', 'recipe', 'unit', 'quantity', 'status', 'completed_at']
    list_filter = ['status', 'unit', 'date']
    readonly_fields = ['status', 'completed_at']
