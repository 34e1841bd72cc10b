"""Command line handling for the recipe calculator."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Sequence, TextIO

from brewcalc.session import DEFAULT_FILE, Session
from brewcalc.settings import load_settings

PACKAGE = "qbrew"
VERSION = "0.4.1"
DESCRIPTION = "A brewing recipe calculator"
CONFIG_ENV = "BREWCALC_CONFIG"

_HELP_FLAGS = ("-h", "-help", "--help")
_VERSION_FLAGS = ("-v", "-version", "--version")


def format_help() -> str:
    """Return the usage text."""
    return (
        f"Usage: {PACKAGE} [options] [file]\n"
        f"{DESCRIPTION}\n\n"
        "Arguments\n"
        "    file                  File to open\n\n"
        "Options\n"
        "    --help                Print the command line options.\n"
        "    --version             Print the application version.\n"
        "\n"
    )


def format_version() -> str:
    """Return the version banner."""
    return f"{PACKAGE} {VERSION}\n{DESCRIPTION}\n"


def parse_args(argv: Sequence[str], out: TextIO) -> str:
    """Return the file named on the command line, or the default file name.

    Help and version requests are written to ``out`` and end the program
    with status 0; an unknown option prints the help and exits with 1.
    """
    for arg in argv:
        if arg in _HELP_FLAGS:
            out.write(format_help())
            raise SystemExit(0)
        if arg in _VERSION_FLAGS:
            out.write(format_version())
            raise SystemExit(0)
        if arg.startswith("-"):
            out.write(f'Invalid parameter "{arg}"\n')
            out.write(format_help())
            raise SystemExit(1)
        return arg
    return DEFAULT_FILE


def _config_path() -> str:
    configured = os.environ.get(CONFIG_ENV)
    if configured:
        return configured
    return os.path.join(os.path.expanduser("~"), ".config", f"{PACKAGE}.ini")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the command line and report which recipe would be opened."""
    args = sys.argv[1:] if argv is None else argv
    filename = parse_args(args, sys.stdout)

    session = Session(load_settings(_config_path()))
    target = session.resolve_startup_file(filename)
    if target is None:
        print(f"Created new recipe {session.filename}")
        return 0

    path = os.path.join(session.cwd, target)
    if not os.path.isfile(path):
        print(f"Unable to load the recipe {os.path.basename(target)}", file=sys.stderr)
        return 1
    session.add_recent(target)
    print(f"Loaded recipe {session.file_caption(target)}")
    return 0