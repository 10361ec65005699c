from django.apps import AppConfig


class SupplyappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'supplyApp'
    verbose_name = 'Supplies'
