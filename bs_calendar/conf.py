"""
App settings, read from the ``BS_CALENDAR`` dict in Django settings.

Example::

    BS_CALENDAR = {
        'LANGUAGE': 'nepali',
        'CACHE_TIMEOUT': 86400,
    }
"""
from django.conf import settings


DEFAULTS = {
    'LANGUAGE': 'english',
    'CACHE_CONVERSIONS': True,
    'CACHE_TIMEOUT': 3600,
    'LEGACY_WEEKDAY_SHIFT': False,
}


def get_setting(name):
    if name not in DEFAULTS:
        raise KeyError(f"Unknown BS_CALENDAR setting: {name}")
    if not settings.configured:
        return DEFAULTS[name]
    user_settings = getattr(settings, 'BS_CALENDAR', None) or {}
    return user_settings.get(name, DEFAULTS[name])


def cache_enabled() -> bool:
    """Conversions are memoised only when Django is set up to provide a cache"""
    return settings.configured and bool(get_setting('CACHE_CONVERSIONS'))
