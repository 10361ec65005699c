from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['id', 'description', 'scheduled_date', 'status', 'field', 'assignee']
    list_filter = ['status', 'field', 'scheduled_date']
    search_fields = ['description', 'assignee__name']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('field', 'assignee')
