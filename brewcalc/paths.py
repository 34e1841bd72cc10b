"""Locations of the data files and documentation that ship with the application."""

from __future__ import annotations

import os
import posixpath
import re
import sys
from enum import Enum
from typing import Optional

_OWN_DIR = re.compile(r"qbrew/?$")
_BIN_DIR = re.compile(r"bin/?$")
_BUNDLE_DIR = re.compile(r"Contents/MacOS/?$")


class _Family(Enum):
    X11 = "x11"
    MAC = "mac"
    OTHER = "other"


def _family(platform: Optional[str]) -> _Family:
    name = (platform if platform is not None else sys.platform).lower()
    if name in ("darwin", "mac", "macos", "macosx"):
        return _Family.MAC
    if name in ("x11", "unix") or name.startswith(("linux", "freebsd", "openbsd", "netbsd", "sunos")):
        return _Family.X11
    return _Family.OTHER


def _clean(path: str) -> str:
    """Normalise separators and dot segments, then end with a single slash."""
    cleaned = posixpath.normpath(path.replace("\\", "/"))
    return cleaned + "/"


def data_base(app_dir: str, platform: Optional[str] = None) -> str:
    """Return the directory holding the data files, ending in ``/``.

    ``app_dir`` is the directory of the executable and ``platform`` a
    platform name such as ``sys.platform`` (the running platform by default).
    """
    base = app_dir.replace("\\", "/")
    family = _family(platform)
    if family is _Family.X11:
        if _OWN_DIR.search(base):
            base += "/"
        elif _BIN_DIR.search(base):
            base += "/../share/qbrew/"
        else:
            base += "/"
    elif family is _Family.MAC:
        if _BUNDLE_DIR.search(base):
            base += "/../Resources/"
        else:
            base += "/"
    else:
        base += "/"
    return _clean(base)


def doc_base(app_dir: str, platform: Optional[str] = None) -> str:
    """Return the directory holding the help documents, ending in ``/``."""
    base = app_dir.replace("\\", "/")
    family = _family(platform)
    if family is _Family.X11:
        if _OWN_DIR.search(base):
            base += "/doc/"
        elif _BIN_DIR.search(base):
            base += "/../share/doc/qbrew/"
        else:
            base += "/doc/"
    elif family is _Family.MAC:
        if _BUNDLE_DIR.search(base):
            base += "/../Resources/en.lproj/"
        elif os.path.exists(base + "/en.lproj/"):
            base += "/en.lproj/"
        else:
            base += "/doc/"
    else:
        base += "/doc/"
    return _clean(base)