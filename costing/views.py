from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import UserRateThrottle

from user.permissions import IsAdminRole
from .exports import cost_sheet_csv, draft_cost_sheet_csv
from .models import Office, DailyEntry
from .serializers import OfficeSerializer, DailyEntrySerializer, DraftEntrySerializer, PreviewSerializer
from .services import create_entry, delete_entry, filter_entries, parse_date_filter, preview_entry


class OfficeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only list of offices.
    """
    serializer_class = OfficeSerializer
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]
    queryset = Office.objects.all().order_by('code')


class DailyEntryViewSet(mixins.ListModelMixin,
                        mixins.RetrieveModelMixin,
                        mixins.CreateModelMixin,
                        mixins.DestroyModelMixin,
                        viewsets.GenericViewSet):
    """
    ViewSet for cost sheets. Sheets are recorded and deleted, never edited.
    List filters: start_date, end_date (YYYY-MM-DD), office (id).
    """
    serializer_class = DailyEntrySerializer
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get_queryset(self):
        queryset = DailyEntry.objects.select_related('office', 'created_by').prefetch_related('items__ingredient')
        if self.action == 'list':
            params = self.request.query_params
            queryset = filter_entries(
                queryset,
                start_date=parse_date_filter(params.get('start_date'), 'start_date'),
                end_date=parse_date_filter(params.get('end_date'), 'end_date'),
                office=params.get('office'),
            )
        return queryset.order_by('-date', '-created_at')

    def get_permissions(self):
        """Only admins can record or delete cost sheets."""
        if self.action in ['create', 'destroy']:
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated()]

    def create(self, request, *args, **kwargs):
        serializer = DraftEntrySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        entry = create_entry(serializer.validated_data, user=request.user)
        return Response(DailyEntrySerializer(entry).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        entry = self.get_object()
        delete_entry(entry, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['post'])
    def preview(self, request):
        """Live totals for the cost sheet form; nothing is saved."""
        serializer = DraftEntrySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return Response(PreviewSerializer(preview_entry(serializer.validated_data)).data)

    @action(detail=True, methods=['get'])
    def export(self, request, pk=None):
        return cost_sheet_csv(self.get_object())

    @action(detail=False, methods=['post'], url_path='export-draft')
    def export_draft(self, request):
        serializer = DraftEntrySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return draft_cost_sheet_csv(preview_entry(serializer.validated_data))
