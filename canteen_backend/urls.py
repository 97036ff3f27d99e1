"""
URL configuration for canteen_backend project.
"""
from django.contrib import admin
from django.db import connection
from django.db.utils import DatabaseError
from django.urls import path, include
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from dj_rest_auth.views import UserDetailsView
from rest_framework_simplejwt.views import TokenRefreshView
from user.views import CanteenLoginView, CanteenLogoutView
import logging

logger = logging.getLogger(__name__)


# Root API endpoint
def api_root(request):
    return JsonResponse({
        'message': 'Canteen API is running successfully',
        'version': '1.0.0',
        'status': 'online',
        'endpoints': {
            'authentication': {
                'login': '/api/auth/login/',
                'logout': '/api/auth/logout/',
                'user_details': '/api/auth/user/',
                'token_refresh': '/api/auth/token/refresh/',
            },
            'resources': {
                'dashboard': '/api/dashboard/',
                'inventory': '/api/inventory/',
                'costing': '/api/costing/',
                'reports': '/api/reports/',
                'activity_logs': '/api/auditing/logs/',
            },
            'admin': '/admin/',
        },
    })


@csrf_exempt  # Allow monitoring tools to ping without CSRF token
@require_http_methods(["GET", "HEAD"])
def health_check(request):
    """
    Lightweight health check endpoint.
    Reports whether the database is reachable so the dashboard can show its connection indicator.
    """
    connected = True
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.error(f"Health check could not reach the database: {e}")
        connected = False

    return JsonResponse({
        'status': 'healthy' if connected else 'degraded',
        'service': 'canteen-backend',
        'database': 'connected' if connected else 'disconnected',
        'timestamp': timezone.now().isoformat()
    }, status=200 if connected else 503)


urlpatterns = [
    path('', api_root, name='api_root'),
    path('health/', health_check, name='health_check'),

    path('admin/', admin.site.urls),

    # --- Authentication URLs ---
    path('api/auth/login/', CanteenLoginView.as_view(), name='rest_login'),
    path('api/auth/logout/', CanteenLogoutView.as_view(), name='rest_logout'),
    path('api/auth/user/', UserDetailsView.as_view(), name='rest_user_details'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # --- App-specific URLs ---
    path('api/dashboard/', include('dashboard.urls')),
    path('api/inventory/', include('inventory.urls')),
    path('api/costing/', include('costing.urls')),
    path('api/reports/', include('reports.urls')),
    path('api/auditing/', include('auditing.urls')),
]
