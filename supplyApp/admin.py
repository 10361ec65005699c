from django.contrib import admin
from django.utils.html import format_html
from .models import Supply


@admin.register(Supply)
class SupplyAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'kind', 'stock', 'unit', 'status_display', 'expiry_date']
    list_filter = ['kind', 'status']
    search_fields = ['name']

    def status_display(self, obj):
        color = 'red' if obj.status == Supply.STATUS_RESTOCK else 'green'
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.status
        )
    status_display.short_description = "Status"
