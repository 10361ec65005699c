from django.contrib import admin
from .models import Farm, Field, Variety


@admin.register(Farm)
class FarmAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'location', 'owner']
    search_fields = ['name', 'owner']


@admin.register(Field)
class FieldAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'area_ha', 'status', 'farm']
    list_filter = ['status', 'farm']
    search_fields = ['name']


@admin.register(Variety)
class VarietyAdmin(admin.ModelAdmin):
    list_display = ['id', 'name']
    search_fields = ['name']
