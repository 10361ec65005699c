from django.urls import path
from . import views


urlpatterns = [
    path('', views.supply_list, name='supply_list'),
    path('<int:id>/', views.supply_detail, name='supply_detail'),
]
