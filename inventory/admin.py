from django.contrib import admin

from .models import Stock, InventoryTransaction, PurchaseOrder, PurchaseItem


@admin.register(Stock)
class StockAdmin(admin.ModelAdmin):
    list_display = ['product', 'unit', 'quantity', 'min_stock', 'avg_cost', 'updated_at']
    list_filter = ['unit']
    search_fields = ['product__name', 'product__sku']
    readonly_fields = ['quantity', 'avg_cost']


@admin.register(InventoryTransaction)
class InventoryTransactionAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'type', 'product', 'unit', 'quantity', 'cost', 'reason', 'reference_id']
    list_filter = ['type', 'unit']
    search_fields = ['product__name', 'reference_id']

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class PurchaseItemInline(admin.TabularInline):
    model = PurchaseItem
    extra = 0


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'unit', 'supplier', 'status', 'total_value', 'created_at']
    list_filter = ['status', 'unit']
    inlines = [PurchaseItemInline]
