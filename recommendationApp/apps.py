from django.apps import AppConfig


class RecommendationappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recommendationApp'
    verbose_name = 'Recommendations'
