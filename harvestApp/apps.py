from django.apps import AppConfig


class HarvestappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'harvestApp'
    verbose_name = 'Harvests'
