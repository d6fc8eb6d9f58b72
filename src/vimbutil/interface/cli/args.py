from __future__ import annotations

"""
CLI Argument Definition.

Defines the command-line schema: global diagnostics options and one
subcommand per utility.
"""

import argparse


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the vimbutil CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="vimbutil",
        description="Filesystem and text helpers for vimb configuration files.",
    )

    # --- Diagnostics ---
    p.add_argument("--debug", action="store_true", help="Enable debug logging.")
    p.add_argument("--log", action="store_true", help="Also write logs to the default log file in the cache dir.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    p.add_argument("--settings", dest="settings_path", default=None, help="Settings JSON file.")

    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("path", help="Resolve a path to an absolute path.")
    sp.add_argument("path")
    sp.add_argument("-d", "--dir", dest="directory", default=None, help="Base directory for relative paths.")

    sp = sub.add_parser("uniq", help="Print the unique lines of a file, last occurrence wins.")
    sp.add_argument("file")
    sp.add_argument("-i", "--ignore-case", action="store_true", help="Compare keys ignoring ASCII case.")
    sp.add_argument("-s", "--separator", default=None, help="Only the text before this separator is the key.")

    sp = sub.add_parser("find", help="Case-insensitive search; prints the match offset.")
    sp.add_argument("haystack")
    sp.add_argument("needle")

    sp = sub.add_parser("replace", help="Replace every occurrence of SEARCH in TEXT.")
    sp.add_argument("search")
    sp.add_argument("replace")
    sp.add_argument("text")

    sp = sub.add_parser("tmp", help="Write content to a new temporary file and print its path.")
    sp.add_argument("content", nargs="?", default=None, help="Content to write (default: stdin).")

    sub.add_parser("dirs", help="Print the config, cache and home directories.")

    return p
