"""Debug logging utilities."""

import os
import sys
import time


def debug_log(message: str, session_id: str = "") -> None:
    """Log debug messages to per-session debug log files if debug mode is enabled.

    Args:
        message: Debug message to log
        session_id: Optional session identifier
    """
    if not os.getenv("BLOCK_TIMER_STATUSLINE_DEBUG"):
        return

    effective_session_id = session_id or "unknown"

    logs_dir = os.getenv("BLOCK_TIMER_STATUSLINE_LOG_DIR") or os.path.join(
        os.path.dirname(os.path.abspath(__file__)), "..", "logs"
    )
    log_file = os.path.join(logs_dir, f"statusline_debug_{effective_session_id}.log")
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    session_prefix = f"[{session_id}] " if session_id else ""
    log_message = f"[{timestamp}] {session_prefix}{message}\n"

    try:
        os.makedirs(logs_dir, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(
            f"DEBUG (couldn't write to {log_file}): {session_prefix}{message}",
            file=sys.stderr,
        )
