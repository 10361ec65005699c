from django.apps import AppConfig


class WorkerappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'workerApp'
    verbose_name = 'Workers'
