from __future__ import annotations

"""
Command Line Interface Application Controller.

Bootstraps logging and settings, then dispatches to the requested utility
and renders its result on stdout. Failures map to exit code 1.
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

from vimbutil.domain.settings import UtilSettings, load_settings
from vimbutil.infra.fs import build_path, get_cache_dir, get_config_dir, get_home_dir
from vimbutil.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from vimbutil.interface.cli.args import build_parser
from vimbutil.io.tmpfile import create_tmp_file
from vimbutil.io.unique_list import LineStrategy, file_to_unique_list
from vimbutil.text import find_case_insensitive, str_replace

logger = get_logger(__name__)

Command = Callable[[argparse.Namespace, UtilSettings], int]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    args = build_parser().parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    log_file = args.log_file
    if log_file is None and args.log:
        log_file = get_default_log_path()
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    settings = load_settings(args.settings_path)
    logger.debug(f"Running '{args.command}' with {settings}")

    return _COMMANDS[args.command](args, settings)


# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _cmd_path(args: argparse.Namespace, settings: UtilSettings) -> int:
    print(build_path(args.path, args.directory))
    return 0


def _cmd_uniq(args: argparse.Namespace, settings: UtilSettings) -> int:
    strategy = LineStrategy(ignore_case=args.ignore_case, separator=args.separator)
    for entry in file_to_unique_list(args.file, strategy, encoding=settings.encoding):
        print(entry)
    return 0


def _cmd_find(args: argparse.Namespace, settings: UtilSettings) -> int:
    pos = find_case_insensitive(args.haystack, args.needle)
    if pos is None:
        return 1
    print(pos)
    return 0


def _cmd_replace(args: argparse.Namespace, settings: UtilSettings) -> int:
    print(str_replace(args.search, args.replace, args.text))
    return 0


def _cmd_tmp(args: argparse.Namespace, settings: UtilSettings) -> int:
    content = args.content if args.content is not None else sys.stdin.read()
    ok, path = create_tmp_file(content, settings)
    if not ok:
        return 1
    print(path)
    return 0


def _cmd_dirs(args: argparse.Namespace, settings: UtilSettings) -> int:
    print(f"config: {get_config_dir()}")
    print(f"cache: {get_cache_dir()}")
    print(f"home: {get_home_dir()}")
    return 0


_COMMANDS: Dict[str, Command] = {
    "path": _cmd_path,
    "uniq": _cmd_uniq,
    "find": _cmd_find,
    "replace": _cmd_replace,
    "tmp": _cmd_tmp,
    "dirs": _cmd_dirs,
}
