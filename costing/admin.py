from django.contrib import admin
from .models import Office, DailyEntry, ConsumptionItem


@admin.register(Office)
class OfficeAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'location')
    search_fields = ('code', 'name', 'location')


class ConsumptionItemInline(admin.TabularInline):
    model = ConsumptionItem
    extra = 0
    readonly_fields = ('ingredient', 'quantity', 'rate', 'remarks')
    can_delete = False


@admin.register(DailyEntry)
class DailyEntryAdmin(admin.ModelAdmin):
    list_display = ('date', 'office', 'participant_count', 'total_cost', 'created_by')
    list_filter = ('office',)
    date_hierarchy = 'date'
    inlines = [ConsumptionItemInline]
    readonly_fields = ('total_cost', 'created_by', 'created_at')
