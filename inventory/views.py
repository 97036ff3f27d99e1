import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import UserRateThrottle

from auditing.models import ActivityLog
from auditing.services import log_activity
from canteen_backend.error_utils import success_response
from user.permissions import IsAdminRole
from .models import Ingredient
from .serializers import IngredientSerializer, StockAdjustmentSerializer
from .services import adjust_stock, low_stock_items, supplier_report, restore_default_ingredients

logger = logging.getLogger(__name__)

MASTER_FIELDS = ('name', 'unit', 'unit_price', 'min_stock_threshold', 'supplier_name', 'supplier_contact')


class IngredientViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the ingredient master list and its stock operations.
    Any authenticated user can read; only admins can write.
    """
    serializer_class = IngredientSerializer
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]
    queryset = Ingredient.objects.all().order_by('name')

    def get_permissions(self):
        """Only admins can perform write operations."""
        if self.action in ['create', 'update', 'partial_update', 'destroy', 'adjust_stock', 'restore_defaults']:
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated()]

    def perform_create(self, serializer):
        ingredient = serializer.save()
        log_activity(
            self.request.user,
            ActivityLog.ACTION_UPDATE_MASTER,
            f"Added new ingredient: {ingredient.name}",
            metadata={'ingredient_id': ingredient.pk, 'operation': 'create'},
        )

    def perform_update(self, serializer):
        before = {field: getattr(serializer.instance, field) for field in MASTER_FIELDS}
        ingredient = serializer.save()
        changed = [field for field in MASTER_FIELDS if getattr(ingredient, field) != before[field]]
        log_activity(
            self.request.user,
            ActivityLog.ACTION_UPDATE_MASTER,
            f"Updated {ingredient.name}: {', '.join(changed) or 'no changes'}",
            metadata={'ingredient_id': ingredient.pk, 'operation': 'update', 'changed_fields': changed},
        )

    def perform_destroy(self, instance):
        name, pk = instance.name, instance.pk
        instance.delete()
        logger.info(f"Ingredient {name} deleted by {self.request.user.username}")
        log_activity(
            self.request.user,
            ActivityLog.ACTION_UPDATE_MASTER,
            f"Deleted ingredient: {name}",
            metadata={'ingredient_id': pk, 'operation': 'delete'},
        )

    @action(detail=True, methods=['post'], url_path='adjust-stock')
    def adjust_stock(self, request, pk=None):
        """Add received stock or write off stock for one ingredient."""
        ingredient = self.get_object()
        serializer = StockAdjustmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        ingredient = adjust_stock(
            ingredient.pk,
            data['quantity'],
            data['type'],
            user=request.user,
            supplier=data['supplier'],
            reason=data['reason'],
        )
        return Response(IngredientSerializer(ingredient).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path='low-stock')
    def low_stock(self, request):
        return Response(low_stock_items())

    @action(detail=False, methods=['get'], url_path='suppliers')
    def suppliers(self, request):
        """Supplier overview; ?search= filters by supplier name."""
        return Response(supplier_report(request.query_params.get('search')))

    @action(detail=False, methods=['post'], url_path='restore-defaults')
    def restore_defaults(self, request):
        restored = restore_default_ingredients(user=request.user)
        if restored:
            message = f"Restored {restored} missing default ingredient(s)."
        else:
            message = "All default ingredients are already present."
        return success_response({'restored': restored}, message=message)
