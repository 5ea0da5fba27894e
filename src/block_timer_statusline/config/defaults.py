"""Default configuration for Block Timer Status Line."""

from .schema import StatusLineSettings, WidgetConfigModel


def get_default_config() -> StatusLineSettings:
    """Generate the default status line settings."""
    return StatusLineSettings(
        version=1,
        widgets=[
            WidgetConfigModel(type="block-timer"),
        ],
    )
