from django.contrib import admin

from .models import Product, Recipe, RecipeIngredient, MealOffer


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['sku', 'name', 'unit', 'category', 'purchase_type', 'price', 'status']
    list_filter = ['purchase_type', 'status', 'category']
    search_fields = ['sku', 'name']


class RecipeIngredientInline(admin.TabularInline):
    model = RecipeIngredient
    extra = 0


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'yield_quantity', 'yield_unit', 'status']
    list_filter = ['status', 'category']
    search_fields = ['name']
    inlines = [RecipeIngredientInline]


@admin.register(MealOffer)
class MealOfferAdmin(admin.ModelAdmin):
    list_display = ['name', 'status']
