from django.contrib import admin
from .models import Sensor, SensorReading


class SensorReadingInline(admin.TabularInline):
    model = SensorReading
    extra = 0
    ordering = ['-timestamp']


@admin.register(Sensor)
class SensorAdmin(admin.ModelAdmin):
    list_display = ['id', 'kind', 'location', 'status', 'field']
    list_filter = ['kind', 'status', 'field']
    inlines = [SensorReadingInline]
