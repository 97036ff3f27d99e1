from django.conf import settings
from django.utils.translation import gettext as _
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework.throttling import UserRateThrottle

from canteen_backend.error_utils import validation_error_response
from .models import ActivityLog
from .serializers import ActivityLogSerializer
from .services import recent_activity


class ActivityLogListView(APIView):
    """
    Newest-first activity log.
    Query params: limit (default ACTIVITY_LOG_LIMIT), action.
    """
    permission_classes = [IsAuthenticated]
    throttle_classes = [UserRateThrottle]

    def get(self, request):
        limit = request.query_params.get('limit', settings.ACTIVITY_LOG_LIMIT)
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            return validation_error_response(_('Limit must be a whole number.'), field='limit')
        if limit < 1:
            return validation_error_response(_('Limit must be at least 1.'), field='limit')

        action = request.query_params.get('action')
        if action and action not in dict(ActivityLog.ACTION_TYPES):
            return validation_error_response(_('Unknown activity type.'), field='action')

        logs = recent_activity(limit=limit, action=action)
        return Response(ActivityLogSerializer(logs, many=True).data)
