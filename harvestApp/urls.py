# urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.harvest_list, name='harvest_list'),
    path('<int:harvest_id>/', views.harvest_detail, name='harvest_detail'),
]
