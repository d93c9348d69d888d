from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class BsCalendarConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bs_calendar'
    verbose_name = 'Bikram Sambat Calendar'

    def ready(self):
        """Fail early on a misconfigured default language"""
        from .conf import get_setting
        from .language import resolve_language

        try:
            resolve_language(get_setting('LANGUAGE'))
        except ValueError as e:
            raise ImproperlyConfigured(f"BS_CALENDAR['LANGUAGE']: {e}") from e
