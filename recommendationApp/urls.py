from django.urls import path, re_path
from . import views


urlpatterns = [
    path('', views.recommendation_list, name='recommendation_list'),
    path('<int:recommendation_id>/', views.recommendation_detail, name='recommendation_detail'),

    # Workflow actions, reachable with or without the trailing slash
    re_path(r'^(?P<recommendation_id>\d+)/accept/?$', views.accept_recommendation, name='accept_recommendation'),
    re_path(r'^(?P<recommendation_id>\d+)/reject/?$', views.reject_recommendation, name='reject_recommendation'),
]
