from django.contrib import admin, messages
from django.utils.html import format_html
from workerApp.models import Worker
from .exceptions import RecommendationError
from .models import Recommendation
from . import services


@admin.register(Recommendation)
class RecommendationAdmin(admin.ModelAdmin):
    list_display = ['id', 'short_description', 'field', 'status_display', 'assignee', 'timestamp']
    list_filter = ['status', 'field', 'timestamp']
    search_fields = ['description', 'field__name']
    readonly_fields = ['status']

    def short_description(self, obj):
        return obj.description[:60]
    short_description.short_description = "Description"

    def status_display(self, obj):
        status_colors = {
            'Pending': 'orange',
            'Accepted': 'green',
            'Rejected': 'gray'
        }
        color = status_colors.get(obj.status, 'black')
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.get_status_display()
        )
    status_display.short_description = "Status"

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('field', 'assignee')


def accept_selected(modeladmin, request, queryset):
    """Accept pending recommendations, assigning each task to its suggested worker."""
    accepted = 0
    for recommendation in queryset.filter(status=Recommendation.STATUS_PENDING):
        actor = recommendation.assignee or Worker.objects.filter(role='Administrator').first()
        if actor is None:
            modeladmin.message_user(
                request,
                f"Recommendation #{recommendation.id} has no assignee and no administrator exists.",
                level=messages.WARNING
            )
            continue
        try:
            services.accept_recommendation(recommendation.id, actor.id)
        except RecommendationError as e:
            modeladmin.message_user(request, str(e), level=messages.WARNING)
            continue
        accepted += 1

    modeladmin.message_user(
        request,
        f"Successfully accepted {accepted} recommendations."
    )
accept_selected.short_description = "Accept selected recommendations"


def reject_selected(modeladmin, request, queryset):
    rejected = 0
    for recommendation in queryset.filter(status=Recommendation.STATUS_PENDING):
        services.reject_recommendation(recommendation.id)
        rejected += 1

    modeladmin.message_user(
        request,
        f"Successfully rejected {rejected} recommendations."
    )
reject_selected.short_description = "Reject selected recommendations"


RecommendationAdmin.actions = [accept_selected, reject_selected]
