from django.apps import AppConfig


class PlantingappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'plantingApp'
    verbose_name = 'Plantings'
