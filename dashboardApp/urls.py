from django.urls import path
from . import views


urlpatterns = [
    path('stats/', views.dashboard_stats, name='dashboard_stats'),
    path('monthly-production/', views.monthly_production, name='monthly_production'),
    path('annual-summary/', views.annual_summary, name='annual_summary'),
]
