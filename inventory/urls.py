from django.urls import path
from .views import (
    MovementView,
    StockListAPIView,
    StockRetrieveUpdateAPIView,
    TransactionListAPIView,
)

urlpatterns = [
    # Manual movements
    path('movement', MovementView.as_view(), name='inventory-movement'),

    # Stock levels (filter with unit_id, product_id, low_stock)
    path('stocks', StockListAPIView.as_view(), name='stock-list'),
    path('stocks/<uuid:pk>', StockRetrieveUpdateAPIView.as_view(), name='stock-detail'),

    # Transaction log
    path('transactions', TransactionListAPIView.as_view(), name='transaction-list'),
]
