import logging

from .errors import DialOptsError, ValidationError
from .options import ClientOption, settings_from_options
from .settings import DialSettings, SettingKey

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClientOption",
    "DialOptsError",
    "DialSettings",
    "SettingKey",
    "ValidationError",
    "settings_from_options",
]
