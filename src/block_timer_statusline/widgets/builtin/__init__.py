"""Built-in widgets for status line.

Importing this module registers all built-in widgets with the registry.
"""

from .block_timer import BlockTimerConfig, BlockTimerWidget

__all__ = [
    "BlockTimerConfig",
    "BlockTimerWidget",
]
