from django.contrib import admin
from .models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ('timestamp', 'user', 'user_role', 'action', 'details')
    list_filter = ('action', 'user_role')
    search_fields = ('details', 'user__username')
    readonly_fields = ('timestamp', 'user', 'user_role', 'action', 'details', 'metadata')
