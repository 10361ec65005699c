from django.apps import AppConfig


class FarmappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'farmApp'
    verbose_name = 'Farms and Fields'
