from django.contrib import admin
from .models import Worker


@admin.register(Worker)
class WorkerAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'role', 'contact']
    list_filter = ['role']
    search_fields = ['name', 'contact']
