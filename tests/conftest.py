"""Pytest configuration to make the project root importable.

This ensures that ``import sl_list`` works when tests are run from the
repository root or other locations without installing the package. Handler
settings read from the environment are cleared so defaults do not depend on
the developer's shell.
"""

import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True)
def _clean_sl_list_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SL_LIST_DIAGNOSTICS", "SL_LIST_LOGGER", "SL_LIST_LOG_PATH", "SL_LIST_DEBUG"):
        monkeypatch.delenv(name, raising=False)
