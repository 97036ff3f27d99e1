from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import OfficeViewSet, DailyEntryViewSet

router = DefaultRouter()
router.register(r'offices', OfficeViewSet, basename='office')
router.register(r'entries', DailyEntryViewSet, basename='entry')

urlpatterns = [
    path('', include(router.urls)),
]
