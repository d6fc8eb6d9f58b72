from __future__ import annotations

"""
Process Environment Provider.

Wraps the process-wide lookups (home directory, working directory and the
XDG base directories) behind a small value object so callers and tests can
substitute fixed values instead of touching the real environment.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class EnvironmentProvider:
    """
    Snapshot of the environment values consumed by the path helpers.

    Attributes:
        home: Value of $HOME, or None if unset.
        cwd: Current working directory.
        xdg_config_home: Value of $XDG_CONFIG_HOME, or None.
        xdg_cache_home: Value of $XDG_CACHE_HOME, or None.
    """
    home: Optional[str] = None
    cwd: Optional[str] = None
    xdg_config_home: Optional[str] = None
    xdg_cache_home: Optional[str] = None

    @classmethod
    def from_os(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvironmentProvider":
        """Capture the current process environment."""
        environ = os.environ if environ is None else environ
        return cls(
            home=environ.get("HOME"),
            cwd=os.getcwd(),
            xdg_config_home=environ.get("XDG_CONFIG_HOME"),
            xdg_cache_home=environ.get("XDG_CACHE_HOME"),
        )

    def home_dir(self) -> str:
        """Return $HOME, falling back to the platform home directory."""
        if self.home:
            return self.home
        return os.path.expanduser("~")

    def current_dir(self) -> str:
        return self.cwd or os.getcwd()

    def user_config_dir(self) -> str:
        """Base directory for user configuration files (XDG semantics)."""
        if self.xdg_config_home and os.path.isabs(self.xdg_config_home):
            return self.xdg_config_home
        return os.path.join(self.home_dir(), ".config")

    def user_cache_dir(self) -> str:
        """Base directory for user cache files (XDG semantics)."""
        if self.xdg_cache_home and os.path.isabs(self.xdg_cache_home):
            return self.xdg_cache_home
        return os.path.join(self.home_dir(), ".cache")


def resolve_env(env: Optional[EnvironmentProvider]) -> EnvironmentProvider:
    """Return the given provider or a fresh snapshot of the process."""
    return env if env is not None else EnvironmentProvider.from_os()
