from django.urls import path
from . import views


urlpatterns = [
    path('', views.sensor_list, name='sensor_list'),
    path('<int:id>/', views.sensor_detail, name='sensor_detail'),
    path('<int:id>/readings/', views.sensor_readings, name='sensor_readings'),
]
