from django.urls import path
from .views import (
    ProductionPlanListCreateAPIView,
    ProductionPlanDetailAPIView,
    ProductionPlanCompleteView,
)

# Mounted at /api/
urlpatterns = [
    path('production', ProductionPlanListCreateAPIView.as_view(), name='production-plan-list-create'),
    path('production/<uuid:pk>', ProductionPlanDetailAPIView.as_view(), name='production-plan-detail'),
    path('production/<uuid:pk>/complete', ProductionPlanCompleteView.as_view(), name='production-plan-complete'),
]
