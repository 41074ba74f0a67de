import logging

from django_filters import FilterSet, BooleanFilter, CharFilter, UUIDFilter
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView
from django.db.models import F

from core.permissions import (
    WriteRolesMixin, IsAdminOrManager, CanRecordMovement, CanReceivePurchase,
)
from core.scoping import UnitScopeMixin, ensure_unit_access
from .models import Stock, InventoryTransaction, PurchaseOrder
from .serializers import (
    StockSerializer,
    InventoryTransactionSerializer,
    MovementSerializer,
    PurchaseOrderSerializer,
)
from .services import StockLedgerService

logger = logging.getLogger(__name__)


class StockFilter(FilterSet):
    product_id = UUIDFilter(field_name='product_id')
    low_stock = BooleanFilter(method='filter_low_stock')

    class Meta:
        model = Stock
        fields = ['product_id', 'low_stock']

    def filter_low_stock(self, queryset, name, value):
        if value:
            return queryset.filter(quantity__lt=F('min_stock'))
        return queryset


class TransactionFilter(FilterSet):
    product_id = UUIDFilter(field_name='product_id')
    reference_id = CharFilter(field_name='reference_id')

    class Meta:
        model = InventoryTransaction
        fields = ['product_id', 'type', 'reference_id']


class MovementView(APIView):
    """POST a manual IN / OUT / ADJUST movement."""
    permission_classes = [permissions.IsAuthenticated, CanRecordMovement]

    def post(self, request):
        serializer = MovementSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        ensure_unit_access(request, data['unit'].pk)

        entry, stock = StockLedgerService.record_movement(
            product=data['product'],
            unit=data['unit'],
            movement_type=data['type'],
            quantity=data['quantity'],
            cost=data.get('cost'),
            reason=data.get('reason'),
            reference_id=data.get('reference_id'),
            user=request.user,
        )
        return Response(
            {
                'transaction': InventoryTransactionSerializer(entry).data,
                'stock': StockSerializer(stock).data,
            },
            status=status.HTTP_201_CREATED,
        )


class StockListAPIView(UnitScopeMixin, generics.ListAPIView):
    queryset = Stock.objects.select_related('product', 'unit')
    serializer_class = StockSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = StockFilter


class StockRetrieveUpdateAPIView(WriteRolesMixin, UnitScopeMixin, generics.RetrieveUpdateAPIView):
    """Read a stock row or change its reorder threshold."""
    queryset = Stock.objects.select_related('product', 'unit')
    serializer_class = StockSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdminOrManager]
    http_method_names = ['get', 'patch', 'options', 'head']

    def perform_update(self, serializer):
        stock = serializer.save()
        logger.info(f"Min stock of {stock.product.sku} at {stock.unit.name} set to {stock.min_stock}")


class TransactionListAPIView(UnitScopeMixin, generics.ListAPIView):
    queryset = InventoryTransaction.objects.select_related('product', 'unit')
    serializer_class = InventoryTransactionSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = TransactionFilter


# ---------------------------
# Purchase orders
# ---------------------------

class PurchaseOrderListCreateAPIView(WriteRolesMixin, UnitScopeMixin, generics.ListCreateAPIView):
    queryset = PurchaseOrder.objects.select_related('unit').prefetch_related('items__product')
    serializer_class = PurchaseOrderSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdminOrManager]
    filterset_fields = ['status']

    def perform_create(self, serializer):
        ensure_unit_access(self.request, serializer.validated_data['unit'].pk)
        order = serializer.save(created_by=self.request.user)
        logger.info(f"Purchase order {order.id} created for {order.unit.name}: total {order.total_value}")


class PurchaseOrderRetrieveAPIView(UnitScopeMixin, generics.RetrieveAPIView):
    queryset = PurchaseOrder.objects.select_related('unit').prefetch_related('items__product')
    serializer_class = PurchaseOrderSerializer
    permission_classes = [permissions.IsAuthenticated]


class PurchaseOrderReceiveView(APIView):
    permission_classes = [permissions.IsAuthenticated, CanReceivePurchase]

    def post(self, request, pk):
        unit_id = PurchaseOrder.objects.filter(pk=pk).values_list('unit_id', flat=True).first()
        if unit_id is not None:
            ensure_unit_access(request, unit_id)

        order = StockLedgerService.receive_purchase_order(pk, user=request.user)
        return Response({
            'message': 'Order received successfully',
            'order': PurchaseOrderSerializer(order).data,
        })
