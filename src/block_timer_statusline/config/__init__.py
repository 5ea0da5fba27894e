"""Configuration schema, defaults and loading."""

from .defaults import get_default_config
from .loader import get_config_path, load_config
from .schema import StatusLineSettings, WidgetConfigModel

__all__ = [
    "StatusLineSettings",
    "WidgetConfigModel",
    "get_config_path",
    "get_default_config",
    "load_config",
]
