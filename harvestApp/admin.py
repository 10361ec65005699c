from django.contrib import admin
from .models import Harvest


@admin.register(Harvest)
class HarvestAdmin(admin.ModelAdmin):
    list_display = ['id', 'planting', 'date', 'quantity_kg', 'quality']
    list_filter = ['quality', 'date']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('planting__field', 'planting__variety')
