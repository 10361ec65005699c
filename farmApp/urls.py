from django.urls import path
from . import views


urlpatterns = [
    # Farms
    path('farms/', views.farm_list, name='farm_list'),
    path('farms/<int:id>/', views.farm_detail, name='farm_detail'),

    # Fields, listed with sensor and pending task counts
    path('fields/', views.field_list, name='field_list'),
    path('fields/<int:id>/', views.field_detail, name='field_detail'),

    # Varieties
    path('varieties/', views.variety_list, name='variety_list'),
    path('varieties/<int:id>/', views.variety_detail, name='variety_detail'),
]
