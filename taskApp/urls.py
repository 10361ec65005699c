from django.urls import path
from . import views


urlpatterns = [
    path('', views.task_list, name='task_list'),
    path('<int:id>/', views.task_detail, name='task_detail'),
    path('<int:id>/status/', views.update_task_status, name='update_task_status'),
]
