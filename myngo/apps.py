from django.apps import AppConfig


class MyngoConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'myngo'
