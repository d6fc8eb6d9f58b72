from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides application directory resolution, idempotent directory and file
creation, and the absolute path builder used for every user supplied file
name (history, bookmarks, downloads). Environment lookups are delegated to
an injectable EnvironmentProvider.
"""

import logging
import os
from typing import List, Optional, Tuple

from vimbutil.infra.env import EnvironmentProvider, resolve_env

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "vimb"
APP_DIR_MODE = 0o755
PRIVATE_DIR_MODE = 0o700

# -----------------------------------------------------------------------------
# APPLICATION DIRECTORIES
# -----------------------------------------------------------------------------

def get_config_dir(env: Optional[EnvironmentProvider] = None) -> str:
    """
    Resolve the application configuration directory.

    Follows XDG semantics ($XDG_CONFIG_HOME or ~/.config) and creates the
    directory with mode 0755 if it does not exist yet.

    Returns:
        str: Absolute path to the configuration directory.
    """
    path = os.path.join(resolve_env(env).user_config_dir(), APP_DIR_NAME)
    create_dir_if_not_exists(path)
    return path


def get_cache_dir(env: Optional[EnvironmentProvider] = None) -> str:
    """
    Resolve the application cache directory ($XDG_CACHE_HOME or ~/.cache).

    Returns:
        str: Absolute path to the cache directory.
    """
    path = os.path.join(resolve_env(env).user_cache_dir(), APP_DIR_NAME)
    create_dir_if_not_exists(path)
    return path


def get_home_dir(env: Optional[EnvironmentProvider] = None) -> str:
    """Return $HOME, or the platform home directory when it is unset."""
    return resolve_env(env).home_dir()


def create_dir_if_not_exists(path: str, mode: int = APP_DIR_MODE) -> Tuple[bool, Optional[str]]:
    """
    Recursively create a directory unless it already exists.

    Unlike os.makedirs(), every missing ancestor gets the same mode, not
    just the leaf.

    Args:
        path: Target directory path.
        mode: Permission bits for every directory created.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    missing: List[str] = []
    head = os.path.abspath(path)
    while not os.path.isdir(head):
        missing.append(head)
        parent = os.path.dirname(head)
        if parent == head:
            break
        head = parent

    try:
        for d in reversed(missing):
            try:
                os.mkdir(d, mode)
            except FileExistsError:
                if not os.path.isdir(d):
                    raise
        return True, None
    except (OSError, ValueError) as e:
        logger.warning(f"Could not create directory {path}: {e}")
        return False, str(e)


def create_file_if_not_exists(filename: str) -> bool:
    """
    Create an empty regular file unless one already exists.

    Returns:
        bool: True if the file exists after the call.
    """
    if os.path.isfile(filename):
        return True
    try:
        with open(filename, "a", encoding="utf-8"):
            pass
        return True
    except OSError as e:
        logger.warning(f"Could not create file {filename}: {e}")
        return False

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def build_path(
        path: str,
        directory: Optional[str] = None,
        env: Optional[EnvironmentProvider] = None,
) -> str:
    """
    Build the absolute file path of a path and an optional base directory.

    Absolute paths and paths starting with '~' ignore the directory. Relative
    paths are joined to the directory, or to the current working directory
    if none is given. The parent directory of the result is created with
    mode 0700 if it is missing.

    Args:
        path: User supplied path.
        directory: Base directory for relative paths.
        env: Environment used for the home and working directories.

    Returns:
        str: Absolute path.
    """
    if path.startswith("/"):
        full_path = path
    elif path.startswith("~"):
        home = resolve_env(env).home_dir()
        rest = path[1:]
        if rest.startswith("/"):
            full_path = home + rest
        else:
            full_path = home + "/" + rest
    elif directory is not None:
        full_path = directory + "/" + path
    else:
        full_path = resolve_env(env).current_dir() + "/" + path

    parent, sep, _ = full_path.rpartition("/")
    if sep and parent:
        create_dir_if_not_exists(parent, mode=PRIVATE_DIR_MODE)

    return full_path
