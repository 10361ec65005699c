from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('farmApp.urls')),
    path('api/plantings/', include('plantingApp.urls')),
    path('api/harvests/', include('harvestApp.urls')),
    path('api/workers/', include('workerApp.urls')),
    path('api/tasks/', include('taskApp.urls')),
    path('api/sensors/', include('sensorApp.urls')),
    path('api/supplies/', include('supplyApp.urls')),
    path('api/recommendations/', include('recommendationApp.urls')),
    path('api/dashboard/', include('dashboardApp.urls')),
]
