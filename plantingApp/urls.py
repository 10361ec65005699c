from django.urls import path
from . import views


urlpatterns = [
    path('', views.planting_list, name='planting_list'),
    path('<int:id>/', views.planting_detail, name='planting_detail'),
]
