"""Data types for Block Timer Status Line."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass
class BlockMetrics:
    """Timing of the current 5hr block, supplied by an external session tracker."""

    start_time: datetime


@dataclass
class RenderContext:
    """Context passed to widgets during rendering."""

    data: dict[str, Any] = field(default_factory=dict)
    block_metrics: Optional[BlockMetrics] = None
    is_preview: bool = False


@dataclass(frozen=True)
class WidgetEditorDisplay:
    """Label shown for a widget in the configuration editor."""

    display_text: str
    modifier_text: Optional[str] = None


@dataclass(frozen=True)
class CustomKeybind:
    """Widget-specific key binding advertised to the editor."""

    key: str
    label: str
    action: str
