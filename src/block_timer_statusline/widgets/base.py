"""Base widget interface for status line components."""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.schema import StatusLineSettings, WidgetConfigModel
from ..types import CustomKeybind, RenderContext, WidgetEditorDisplay


class Widget(ABC):
    """Base widget interface - all widgets must implement this.

    Widget metadata (display_name, description, default_color) is set by the
    @register_widget decorator rather than requiring implementation of methods.
    """

    # Class attributes set by @register_widget decorator
    display_name: str = ""
    description: str = ""
    default_color: str = "white"
    fallback_text: Optional[str] = None

    def get_default_color(self) -> str:
        return self.default_color

    def get_description(self) -> str:
        return self.description

    def get_display_name(self) -> str:
        return self.display_name

    def get_editor_display(self, config: WidgetConfigModel) -> WidgetEditorDisplay:
        """Describe the widget for the configuration editor."""
        return WidgetEditorDisplay(display_text=self.get_display_name())

    def handle_editor_action(
        self, action: str, config: WidgetConfigModel
    ) -> Optional[WidgetConfigModel]:
        """Apply an editor action, returning an updated copy or None if unhandled."""
        return None

    def get_custom_keybinds(self) -> list[CustomKeybind]:
        return []

    def supports_raw_value(self) -> bool:
        return False

    def supports_colors(self, config: WidgetConfigModel) -> bool:
        return True

    @abstractmethod
    def render(
        self,
        config: WidgetConfigModel,
        context: RenderContext,
        settings: Optional[StatusLineSettings] = None,
    ) -> Optional[str]:
        """Render widget content.

        Args:
            config: Widget configuration including colors and metadata
            context: Rendering context with data and metrics
            settings: Full status line settings, if the host has them

        Returns:
            Rendered string or None to hide widget
        """
        pass
