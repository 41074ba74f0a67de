import logging

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import WriteRolesMixin, IsAdminOrManager, CanPlanProduction, CanCompleteProduction
from core.scoping import UnitScopeMixin, ensure_unit_access
from .models import ProductionPlan
from .serializers import ProductionPlanSerializer
from .services import ProductionService

logger = logging.getLogger(__name__)


class ProductionPlanListCreateAPIView(WriteRolesMixin, UnitScopeMixin, generics.ListCreateAPIView):
    queryset = ProductionPlan.objects.select_related('unit', 'recipe')
    serializer_class = ProductionPlanSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [CanPlanProduction]
    filterset_fields = ['status', 'date', 'recipe']

    def perform_create(self, serializer):
        ensure_unit_access(self.request, serializer.validated_data['unit'].pk)
        plan = serializer.save(created_by=self.request.user, status=ProductionPlan.STATUS_PLANNED)
        logger.info(f"Production plan {plan.id} created: {plan.quantity} x {plan.recipe.name} at {plan.unit.name}")


class ProductionPlanDetailAPIView(UnitScopeMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    GET: any authenticated user with access to the plan's unit
    PATCH: planners, only while the plan is not completed
    DELETE: admin or manager, only while the plan is not completed
    """
    queryset = ProductionPlan.objects.select_related('unit', 'recipe')
    serializer_class = ProductionPlanSerializer
    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ['get', 'patch', 'delete', 'options', 'head']

    def get_permissions(self):
        classes = list(self.permission_classes)
        if self.request.method == 'PATCH':
            classes.append(CanPlanProduction)
        elif self.request.method == 'DELETE':
            classes.append(IsAdminOrManager)
        return [permission() for permission in classes]

    def perform_update(self, serializer):
        unit = serializer.validated_data.get('unit')
        if unit is not None:
            ensure_unit_access(self.request, unit.pk)
        serializer.save()

    def destroy(self, request, *args, **kwargs):
        plan = self.get_object()
        ProductionService.delete_plan(plan.pk)
        return Response({'message': 'Plan deleted'}, status=status.HTTP_200_OK)


class ProductionPlanCompleteView(APIView):
    permission_classes = [permissions.IsAuthenticated, CanCompleteProduction]

    def post(self, request, pk):
        unit_id = ProductionPlan.objects.filter(pk=pk).values_list('unit_id', flat=True).first()
        if unit_id is not None:
            ensure_unit_access(request, unit_id)

        plan = ProductionService.complete_plan(pk, user=request.user)
        return Response({
            'message': 'Production completed successfully',
            'plan': ProductionPlanSerializer(plan).data,
        })
