"""Main rendering pipeline for status line."""

from typing import Optional

from .config.loader import load_config
from .config.schema import StatusLineSettings, WidgetConfigModel
from .types import RenderContext
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget


def render_widget(
    widget_config: WidgetConfigModel,
    context: RenderContext,
    settings: Optional[StatusLineSettings] = None,
) -> Optional[str]:
    """Render a single widget.

    Args:
        widget_config: Widget configuration
        context: Render context
        settings: Full status line settings passed through to the widget

    Returns:
        Rendered widget string, or None to skip
    """
    widget = get_widget(widget_config.type)
    if not widget:
        return None

    content = widget.render(widget_config, context, settings)

    if content is None:
        return widget.fallback_text

    return content


def render_status_line(
    widgets: list[WidgetConfigModel],
    context: RenderContext,
    settings: Optional[StatusLineSettings] = None,
) -> str:
    """Render complete status line from widget list.

    Args:
        widgets: List of widget configurations
        context: Render context with data and metrics
        settings: Full status line settings passed through to each widget

    Returns:
        Widget output joined by single spaces
    """
    rendered = []
    for widget_config in widgets:
        widget_str = render_widget(widget_config, context, settings)
        if widget_str:
            rendered.append(widget_str)

    return " ".join(rendered)


def render_status_line_with_config(context: RenderContext) -> str:
    """Render status line using loaded configuration.

    Args:
        context: Render context with data and metrics

    Returns:
        Formatted status line string
    """
    settings = load_config()
    return render_status_line(settings.widgets, context, settings)
