from django.contrib import admin
from .models import Planting


@admin.register(Planting)
class PlantingAdmin(admin.ModelAdmin):
    list_display = ['id', 'date', 'plant_count', 'field', 'variety']
    list_filter = ['field', 'variety']
