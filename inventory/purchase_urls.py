from django.urls import path
from .views import (
    PurchaseOrderListCreateAPIView,
    PurchaseOrderRetrieveAPIView,
    PurchaseOrderReceiveView,
)

# Mounted at /api/
urlpatterns = [
    path('purchases', PurchaseOrderListCreateAPIView.as_view(), name='purchase-order-list-create'),
    path('purchases/<uuid:pk>', PurchaseOrderRetrieveAPIView.as_view(), name='purchase-order-detail'),
    path('purchases/<uuid:pk>/receive', PurchaseOrderReceiveView.as_view(), name='purchase-order-receive'),
]
