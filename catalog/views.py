import logging

from django_filters import FilterSet
from rest_framework import generics, permissions

from core.mixins import ProtectedDestroyMixin
from core.permissions import WriteRolesMixin, IsAdminOrManager, CanEditRecipes
from .models import Product, Recipe, MealOffer
from .serializers import ProductSerializer, RecipeSerializer, MealOfferSerializer

logger = logging.getLogger(__name__)


class ProductFilter(FilterSet):
    class Meta:
        model = Product
        fields = {
            'category': ['exact'],
            'status': ['exact'],
            'purchase_type': ['exact'],
            'name': ['icontains'],
            'sku': ['exact'],
        }


class ProductListCreateAPIView(WriteRolesMixin, generics.ListCreateAPIView):
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdminOrManager]
    filterset_class = ProductFilter


class ProductRetrieveUpdateDestroyAPIView(WriteRolesMixin, ProtectedDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdminOrManager]
    protected_message = 'Product is used by recipes, stock or orders and cannot be deleted'


class RecipeListCreateAPIView(WriteRolesMixin, generics.ListCreateAPIView):
    queryset = Recipe.objects.prefetch_related('ingredients__product')
    serializer_class = RecipeSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [CanEditRecipes]
    filterset_fields = ['category', 'status']

    def perform_create(self, serializer):
        recipe = serializer.save()
        logger.info(f"Recipe {recipe.name} created with {recipe.ingredients.count()} ingredients")


class RecipeRetrieveUpdateDestroyAPIView(WriteRolesMixin, ProtectedDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = Recipe.objects.prefetch_related('ingredients__product')
    serializer_class = RecipeSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [CanEditRecipes]
    protected_message = 'Recipe is referenced by production plans and cannot be deleted'


class MealOfferListCreateAPIView(WriteRolesMixin, generics.ListCreateAPIView):
    queryset = MealOffer.objects.all()
    serializer_class = MealOfferSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdminOrManager]
    filterset_fields = ['status']


class MealOfferRetrieveUpdateDestroyAPIView(WriteRolesMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = MealOffer.objects.all()
    serializer_class = MealOfferSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdminOrManager]
