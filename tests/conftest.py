import faulthandler
import os
import sys
import time
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from design_consts.config import Config  # noqa: E402


@pytest.fixture
def temp_config(tmp_path):
    """
    Provide a fresh Config with validation.

    This fixture GUARANTEES a clean config or fails loudly.
    """
    config_path = tmp_path / f"config_{id(tmp_path)}_{time.time_ns()}.json"

    config = Config(config_file=config_path)

    # VALIDATE it starts clean (will fail test if not)
    assert config.window_size == (1200, 800), \
        f"FIXTURE CONTAMINATED! window={config.window_size}, file={config.config_file}"
    assert config.screen_range == (360.0, 1440.0), \
        f"FIXTURE CONTAMINATED! range={config.screen_range}, file={config.config_file}"
    assert config.reduce_animations is False, \
        f"FIXTURE CONTAMINATED! reduce={config.reduce_animations}, file={config.config_file}"

    return config


def pytest_collection_modifyitems(config, items):
    """Assign tier markers based on test location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()

        if "/tests/unit/showcase_qt/" in path:
            item.add_marker(pytest.mark.gui)
            continue

        if "/tests/unit/" in path:
            item.add_marker(pytest.mark.unit)


def pytest_sessionstart(session):  # pragma: no cover - test harness init
    """Enable faulthandler for the entire test run to aid diagnosing hangs."""
    try:
        faulthandler.enable(file=sys.stderr, all_threads=True)
    except Exception:
        pass
