from django.apps import AppConfig


class TaskappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'taskApp'
    verbose_name = 'Tasks'
