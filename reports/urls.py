from django.urls import path
from .views import ConsumptionReportView, ConsumptionReportExportView

urlpatterns = [
    path('consumption/', ConsumptionReportView.as_view(), name='consumption-report'),
    path('consumption/export/', ConsumptionReportExportView.as_view(), name='consumption-report-export'),
]
