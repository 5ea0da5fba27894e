"""Widget registry: maps widget type names to singleton widget instances."""

from typing import Callable, Optional

from .base import Widget

_WIDGET_REGISTRY: dict[str, Widget] = {}


def register_widget(
    widget_type: str,
    display_name: str = "",
    default_color: str = "white",
    description: str = "",
    fallback_text: Optional[str] = None,
) -> Callable[[type[Widget]], type[Widget]]:
    """Class decorator that stamps widget metadata and registers one instance.

    Usage:
        @register_widget("block-timer", display_name="Block Timer",
                         default_color="yellow",
                         description="Elapsed time in the current 5hr block")
        class BlockTimerWidget(Widget):
            def render(self, config, context, settings=None):
                ...

    Args:
        widget_type: Type name used in config files (e.g., "block-timer")
        display_name: Editor label; derived from widget_type when empty
        default_color: Color used when the config leaves it unset
        description: One-line summary for the editor
        fallback_text: Shown when render returns None; None hides the widget

    Raises:
        ValueError: If widget_type is already registered
    """

    def decorator(cls: type[Widget]) -> type[Widget]:
        existing = _WIDGET_REGISTRY.get(widget_type)
        if existing is not None:
            raise ValueError(
                f"Widget type {widget_type!r} already registered by "
                f"{type(existing).__name__}"
            )

        cls.display_name = display_name or widget_type.replace("-", " ").title()
        cls.default_color = default_color
        cls.description = description
        cls.fallback_text = fallback_text

        _WIDGET_REGISTRY[widget_type] = cls()
        return cls

    return decorator


def get_widget(widget_type: str) -> Optional[Widget]:
    """Look up a widget instance by type name, or None if unknown."""
    return _WIDGET_REGISTRY.get(widget_type)


def get_all_widgets() -> dict[str, Widget]:
    """Return a copy of the registry, keyed by widget type."""
    return dict(_WIDGET_REGISTRY)
