from django.urls import path
from .views import (
    DashboardSummaryView,
    CostTrendView,
    LowStockItemsView,
    RecentEntriesView,
    RecentEntriesExportView,
    InsightsView
)

urlpatterns = [
    path('summary/', DashboardSummaryView.as_view(), name='dashboard-summary'),
    path('cost-trend/', CostTrendView.as_view(), name='dashboard-cost-trend'),
    path('low-stock/', LowStockItemsView.as_view(), name='dashboard-low-stock'),
    path('recent-entries/', RecentEntriesView.as_view(), name='dashboard-recent-entries'),
    path('recent-entries/export/', RecentEntriesExportView.as_view(), name='dashboard-recent-entries-export'),
    path('insights/', InsightsView.as_view(), name='dashboard-insights'),
]
