"""
Shared test fixtures for prettycli tests.
Patches config module so a local .env or PRETTYCLI_* variables don't leak in.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from prettycli import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "MAX_COL_WIDTH", config.DEFAULT_MAX_COL_WIDTH)
    monkeypatch.setattr(config, "DICT_PREFIX", config.DEFAULT_DICT_PREFIX)
    monkeypatch.setattr(config, "DICT_SEPARATOR", config.DEFAULT_DICT_SEPARATOR)
    monkeypatch.setattr(config, "RENDER_LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)
