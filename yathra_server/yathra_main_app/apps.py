from django.apps import AppConfig


class YathraMainAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'yathra_main_app'
    verbose_name = 'Yathra Booking Engine'
