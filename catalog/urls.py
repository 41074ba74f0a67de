from django.urls import path
from .views import (
    ProductListCreateAPIView,
    ProductRetrieveUpdateDestroyAPIView,
    RecipeListCreateAPIView,
    RecipeRetrieveUpdateDestroyAPIView,
    MealOfferListCreateAPIView,
    MealOfferRetrieveUpdateDestroyAPIView,
)

urlpatterns = [
    # Products (ingredients)
    path('products', ProductListCreateAPIView.as_view(), name='product-list-create'),
    path('products/<uuid:pk>', ProductRetrieveUpdateDestroyAPIView.as_view(), name='product-detail'),

    # Recipes (technical sheets)
    path('recipes', RecipeListCreateAPIView.as_view(), name='recipe-list-create'),
    path('recipes/<uuid:pk>', RecipeRetrieveUpdateDestroyAPIView.as_view(), name='recipe-detail'),

    # Meal offers
    path('meal-offers', MealOfferListCreateAPIView.as_view(), name='meal-offer-list-create'),
    path('meal-offers/<uuid:pk>', MealOfferRetrieveUpdateDestroyAPIView.as_view(), name='meal-offer-detail'),
]
