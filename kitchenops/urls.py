"""
URL configuration for the kitchenops project.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('accounts.urls')),        # Auth, units, users, teams
    path('api/', include('catalog.urls')),         # Products, recipes, meal offers
    path('api/inventory/', include('inventory.urls')),
    path('api/', include('inventory.purchase_urls')),  # Purchase orders
    path('api/', include('production.urls')),         # Production plans
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
