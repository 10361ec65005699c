from django.urls import path
from . import views


urlpatterns = [
    path('', views.worker_list, name='worker_list'),
    path('<int:id>/', views.worker_detail, name='worker_detail'),
]
