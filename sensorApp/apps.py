from django.apps import AppConfig


class SensorappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sensorApp'
    verbose_name = 'Sensors'
