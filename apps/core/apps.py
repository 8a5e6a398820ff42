from django.apps import AppConfig

class CoreConfig(AppConfig):
    """Wspólne wyjątki i odpowiedzi HTTP, bez modeli."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    label = 'core'
    verbose_name = 'Rdzeń'
