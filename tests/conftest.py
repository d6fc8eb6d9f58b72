from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path.
2. Provides a fixed EnvironmentProvider rooted in a temporary directory.
3. Resets the logging infrastructure around tests that configure it.
"""

import logging
import os
import sys
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from vimbutil.infra.env import EnvironmentProvider  # noqa: E402
from vimbutil.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR  # noqa: E402
from vimbutil.infra.logging.handlers import _HANDLER_TAG_ATTR  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def fake_env(tmp_path) -> EnvironmentProvider:
    """Environment with home and cwd inside tmp_path and no XDG overrides."""
    home = tmp_path / "home"
    cwd = tmp_path / "work"
    home.mkdir()
    cwd.mkdir()
    return EnvironmentProvider(home=str(home), cwd=str(cwd))


@pytest.fixture
def isolated_home(tmp_path, monkeypatch) -> str:
    """Point HOME and the XDG directories of the process at tmp_path."""
    home = tmp_path / "home"
    home.mkdir(exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    return str(home)


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Remove handlers installed by configure_logging before and after a test."""
    _teardown_logging()
    yield
    _teardown_logging()


def _teardown_logging() -> None:
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    setattr(root, _CONFIGURED_FLAG_ATTR, False)
    root.setLevel(logging.WARNING)
