"""
Language selection for formatted output.

The process-wide default is only read when a formatter is built; formatters
keep the language they were constructed with.
"""
import logging
import threading
from enum import Enum
from typing import Optional, Union

from .conf import get_setting

logger = logging.getLogger(__name__)


class Language(Enum):
    ENGLISH = 'english'
    NEPALI = 'nepali'


_lock = threading.Lock()
_current: Optional[Language] = None


def resolve_language(value: Union[Language, str, None] = None) -> Language:
    """Turn a Language, its name, or None (process default) into a Language"""
    if value is None:
        return get_language()
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown language: {value!r}. Use 'english' or 'nepali'"
        ) from None


def get_language() -> Language:
    with _lock:
        current = _current
    if current is not None:
        return current
    return resolve_language(get_setting('LANGUAGE'))


def set_language(value: Union[Language, str, None]) -> None:
    """Set the process default; None restores the configured setting"""
    global _current
    language = None if value is None else resolve_language(value)
    with _lock:
        _current = language
    logger.info("Default language set to %s", language.value if language else 'settings default')
