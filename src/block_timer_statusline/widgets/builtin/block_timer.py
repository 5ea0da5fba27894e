"""Block timer widget: time spent in the current 5hr block."""

import dataclasses
import time

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TypeVar

from ...config.schema import StatusLineSettings, WidgetConfigModel
from ...types import BlockMetrics, CustomKeybind, RenderContext, WidgetEditorDisplay
from ...utils.debug import debug_log
from ...utils.formatting import (
    MS_PER_HOUR,
    format_elapsed,
    format_percentage,
    format_remaining,
    render_progress_bar,
    split_hours_minutes,
)
from ..base import Widget
from ..registry import register_widget

BLOCK_DURATION_MS = 5 * MS_PER_HOUR


class DisplayMode(str, Enum):
    TIME = "time"
    PROGRESS = "progress"
    PROGRESS_SHORT = "progress-short"


class BlockStyle(str, Enum):
    SOLID = "█"
    SQUARE = "■"
    SMALL_SQUARE = "▪"


class PrefixStyle(str, Enum):
    BLOCK = "block"
    TIMER = "timer"
    NONE = "none"


_NEXT_DISPLAY = {
    DisplayMode.TIME: DisplayMode.PROGRESS,
    DisplayMode.PROGRESS: DisplayMode.PROGRESS_SHORT,
    DisplayMode.PROGRESS_SHORT: DisplayMode.TIME,
}

_NEXT_BLOCK_STYLE = {
    BlockStyle.SOLID: BlockStyle.SQUARE,
    BlockStyle.SQUARE: BlockStyle.SMALL_SQUARE,
    BlockStyle.SMALL_SQUARE: BlockStyle.SOLID,
}

_NEXT_PREFIX = {
    PrefixStyle.BLOCK: PrefixStyle.TIMER,
    PrefixStyle.TIMER: PrefixStyle.NONE,
    PrefixStyle.NONE: PrefixStyle.BLOCK,
}

BAR_WIDTHS = {
    DisplayMode.PROGRESS: 32,
    DisplayMode.PROGRESS_SHORT: 16,
}

# Sample values shown in the editor preview
PREVIEW_ELAPSED = "3hr 45m"
PREVIEW_REMAINING = "1h 15m"
# Filled cells per bar width in the preview
PREVIEW_FILLED = {
    DisplayMode.PROGRESS: 22,
    DisplayMode.PROGRESS_SHORT: 11,
}
PREVIEW_PERCENTAGE = "73.9%"

# No block yet means the whole window is still ahead
IDLE_REMAINING = "5h 0m"

_E = TypeVar("_E", bound=Enum)


def _resolve(enum_cls: type[_E], value: Optional[str], default: _E) -> _E:
    try:
        return enum_cls(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class BlockTimerConfig:
    """Resolved display settings, one value per independent axis."""

    display: DisplayMode = DisplayMode.TIME
    block_style: BlockStyle = BlockStyle.SOLID
    prefix_style: PrefixStyle = PrefixStyle.BLOCK

    @classmethod
    def from_metadata(
        cls, metadata: Optional[Mapping[str, str]]
    ) -> "BlockTimerConfig":
        """Build a config from widget metadata, defaulting missing or unknown values."""
        metadata = metadata or {}
        return cls(
            display=_resolve(DisplayMode, metadata.get("display"), DisplayMode.TIME),
            block_style=_resolve(
                BlockStyle, metadata.get("blockStyle"), BlockStyle.SOLID
            ),
            prefix_style=_resolve(
                PrefixStyle, metadata.get("prefixStyle"), PrefixStyle.BLOCK
            ),
        )

    def to_metadata(self) -> dict[str, str]:
        return {
            "display": self.display.value,
            "blockStyle": self.block_style.value,
            "prefixStyle": self.prefix_style.value,
        }

    def next_display(self) -> "BlockTimerConfig":
        return dataclasses.replace(self, display=_NEXT_DISPLAY[self.display])

    def next_block_style(self) -> "BlockTimerConfig":
        return dataclasses.replace(
            self, block_style=_NEXT_BLOCK_STYLE[self.block_style]
        )

    def next_prefix_style(self) -> "BlockTimerConfig":
        return dataclasses.replace(self, prefix_style=_NEXT_PREFIX[self.prefix_style])

    @property
    def is_progress(self) -> bool:
        return self.display in BAR_WIDTHS

    @property
    def empty_char(self) -> str:
        # Light shade only pairs with the full block; other glyphs sit on blank space
        return "░" if self.block_style is BlockStyle.SOLID else " "


# action -> (metadata key, config transition)
_ACTIONS = {
    "toggle-progress": ("display", BlockTimerConfig.next_display),
    "toggle-block-style": ("blockStyle", BlockTimerConfig.next_block_style),
    "toggle-prefix": ("prefixStyle", BlockTimerConfig.next_prefix_style),
}


@dataclass(frozen=True)
class BlockProgress:
    """Elapsed/remaining breakdown of a block at one instant."""

    progress: float
    elapsed_hours: int
    elapsed_minutes: int
    remaining_hours: int
    remaining_minutes: int

    @property
    def percentage(self) -> str:
        return format_percentage(self.progress * 100)

    @classmethod
    def from_elapsed(cls, elapsed_ms: float) -> "BlockProgress":
        """Clamp elapsed time to the block and split it into hours and minutes."""
        elapsed_ms = max(elapsed_ms, 0)
        remaining_ms = max(BLOCK_DURATION_MS - elapsed_ms, 0)
        elapsed_hours, elapsed_minutes = split_hours_minutes(elapsed_ms)
        remaining_hours, remaining_minutes = split_hours_minutes(remaining_ms)
        return cls(
            progress=min(elapsed_ms / BLOCK_DURATION_MS, 1.0),
            elapsed_hours=elapsed_hours,
            elapsed_minutes=elapsed_minutes,
            remaining_hours=remaining_hours,
            remaining_minutes=remaining_minutes,
        )


def _now_ms() -> float:
    return time.time() * 1000


def measure_block(metrics: BlockMetrics, now_ms: float) -> BlockProgress:
    """Measure a block against a single wall-clock sample (epoch milliseconds)."""
    start_ms = metrics.start_time.timestamp() * 1000
    return BlockProgress.from_elapsed(now_ms - start_ms)


@register_widget(
    "block-timer",
    display_name="Block Timer",
    default_color="yellow",
    description="Shows elapsed time since beginning of current 5hr block",
)
class BlockTimerWidget(Widget):
    """Display elapsed time or a progress bar for the current 5hr block."""

    def get_editor_display(self, config: WidgetConfigModel) -> WidgetEditorDisplay:
        """Summarize non-default settings, e.g. "(short bar, ■ style, no prefix)"."""
        timer = BlockTimerConfig.from_metadata(config.metadata)
        modifiers = []

        if timer.display is DisplayMode.PROGRESS:
            modifiers.append("progress bar")
        elif timer.display is DisplayMode.PROGRESS_SHORT:
            modifiers.append("short bar")

        if timer.block_style is not BlockStyle.SOLID:
            modifiers.append(f"{timer.block_style.value} style")

        if timer.prefix_style is PrefixStyle.TIMER:
            modifiers.append("timer prefix")
        elif timer.prefix_style is PrefixStyle.NONE:
            modifiers.append("no prefix")

        return WidgetEditorDisplay(
            display_text=self.get_display_name(),
            modifier_text=f"({', '.join(modifiers)})" if modifiers else None,
        )

    def handle_editor_action(
        self, action: str, config: WidgetConfigModel
    ) -> Optional[WidgetConfigModel]:
        """Cycle one display axis, returning an updated copy of the config."""
        if action not in _ACTIONS:
            return None

        key, transition = _ACTIONS[action]
        timer = transition(BlockTimerConfig.from_metadata(config.metadata))
        metadata = {**config.metadata, key: timer.to_metadata()[key]}
        return config.model_copy(update={"metadata": metadata})

    def get_custom_keybinds(self) -> list[CustomKeybind]:
        return [
            CustomKeybind(key="p", label="(p)rogress toggle", action="toggle-progress"),
            CustomKeybind(key="b", label="(b)lock style", action="toggle-block-style"),
            CustomKeybind(key="l", label="prefix (l)abel", action="toggle-prefix"),
        ]

    def supports_raw_value(self) -> bool:
        return True

    def supports_colors(self, config: WidgetConfigModel) -> bool:
        return True

    def _prefix(
        self, timer: BlockTimerConfig, remaining: str, raw_value: bool
    ) -> str:
        if raw_value:
            return ""
        if timer.prefix_style is PrefixStyle.BLOCK:
            return "Block " if timer.is_progress else "Block: "
        if timer.prefix_style is PrefixStyle.TIMER:
            return f"⏱️ {remaining}→ "
        return ""

    def _bar(self, timer: BlockTimerConfig, progress: float) -> str:
        return render_progress_bar(
            progress,
            segments=BAR_WIDTHS[timer.display],
            filled_char=timer.block_style.value,
            empty_char=timer.empty_char,
        )

    def render(
        self,
        config: WidgetConfigModel,
        context: RenderContext,
        settings: Optional[StatusLineSettings] = None,
    ) -> Optional[str]:
        """Render block time as text or a progress bar."""
        timer = BlockTimerConfig.from_metadata(config.metadata)

        if context.is_preview:
            return self._render_preview(timer, config.raw_value)

        if context.block_metrics is None:
            return self._render_idle(timer, config.raw_value)

        try:
            block = measure_block(context.block_metrics, _now_ms())
        except Exception as e:
            debug_log(f"Block timer failed to measure block: {e!r}")
            return None

        remaining = format_remaining(block.remaining_hours, block.remaining_minutes)
        prefix = self._prefix(timer, remaining, config.raw_value)

        if timer.is_progress:
            return f"{prefix}[{self._bar(timer, block.progress)}] {block.percentage}"

        return prefix + format_elapsed(block.elapsed_hours, block.elapsed_minutes)

    def _render_preview(self, timer: BlockTimerConfig, raw_value: bool) -> str:
        prefix = self._prefix(timer, PREVIEW_REMAINING, raw_value)
        if timer.is_progress:
            filled = PREVIEW_FILLED[timer.display]
            bar = self._bar(timer, filled / BAR_WIDTHS[timer.display])
            return f"{prefix}[{bar}] {PREVIEW_PERCENTAGE}"
        return f"{prefix}{PREVIEW_ELAPSED}"

    def _render_idle(self, timer: BlockTimerConfig, raw_value: bool) -> str:
        prefix = self._prefix(timer, IDLE_REMAINING, raw_value)
        if timer.is_progress:
            return f"{prefix}[{self._bar(timer, 0.0)}] 0%"
        return f"{prefix}0hr 0m"
