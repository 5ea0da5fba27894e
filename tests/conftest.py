import pytest

from datetime import datetime, timezone

FROZEN_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")
    config.addinivalue_line("markers", "performance: Benchmarks using pytest-benchmark")


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(content))

    return _mock_stdin


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the block timer's wall clock to FROZEN_NOW."""
    monkeypatch.setattr(
        "block_timer_statusline.widgets.builtin.block_timer._now_ms",
        lambda: FROZEN_NOW.timestamp() * 1000,
    )
    return FROZEN_NOW


@pytest.fixture
def temp_config_dir(monkeypatch, tmp_path):
    """Point the config loader at an empty temporary directory."""
    from block_timer_statusline.config.loader import clear_config_cache

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    clear_config_cache()
    yield tmp_path
    clear_config_cache()


@pytest.fixture
def sample_input_payload():
    """Sample statusline input payload with an active block."""
    return {
        "session_id": "abc123-def456",
        "block": {"start_time": "2025-06-01T10:30:00Z"},
    }
