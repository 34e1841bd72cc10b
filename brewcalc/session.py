"""State of the recipe being edited: file name, recent files, backups and autosave."""

from __future__ import annotations

import dataclasses
import os
import shutil
from typing import Optional, Set, Union

from brewcalc.settings import ConfigState, GeneralSettings

PathLike = Union[str, "os.PathLike[str]"]

TITLE = "QBrew"
DEFAULT_FILE = "untitled"
FILE_EXT = "qbrew"
BACKUP_SUFFIX = "~"


class Session:
    """Book-keeping for the file behind the current recipe.

    ``state`` holds the application settings and ``cwd`` is the directory
    that relative file names and the autosave file are resolved against.
    """

    def __init__(self, state: Optional[ConfigState] = None, cwd: Optional[PathLike] = None) -> None:
        self.state = state if state is not None else ConfigState()
        self.cwd = os.fspath(cwd) if cwd is not None else os.getcwd()
        self.filename = ""
        self.newflag = False
        self.backed = False

    def _path(self, filename: str) -> str:
        return os.path.join(self.cwd, filename)

    @staticmethod
    def _is_default(filename: str) -> bool:
        return not filename or filename == DEFAULT_FILE

    def resolve_startup_file(self, filename: str = "") -> Optional[str]:
        """Decide which file to open at start-up.

        Without an explicit file the most recent one is used when
        ``loadlast`` is set and it still exists.  Returns the file to open,
        or None when a new recipe is to be created instead.
        """
        general = self.state.general
        if self._is_default(filename) and general.loadlast and general.recentfiles:
            first = general.recentfiles[0]
            if os.path.exists(self._path(first)):
                self.filename = first
        elif not self._is_default(filename):
            self.filename = filename
        else:
            self.filename = filename

        if not self._is_default(self.filename):
            self.newflag = False
            self.backed = False
            return self.filename

        self.newflag = True
        self.backed = False
        self.filename = f"{DEFAULT_FILE}.{FILE_EXT}"
        return None

    def add_recent(self, filename: str) -> None:
        """Put the absolute path of ``filename`` at the front of the recent list."""
        general = self.state.general
        if general.recentnum == 0:
            return
        filepath = os.path.normpath(self._path(filename))
        general.recentfiles[:] = [name for name in general.recentfiles if name != filepath]
        if len(general.recentfiles) >= general.recentnum:
            general.recentfiles.pop()
        general.recentfiles.insert(0, filepath)

    def trim_recent(self) -> None:
        """Drop recent files beyond the configured number."""
        general = self.state.general
        del general.recentfiles[general.recentnum:]

    def backup_file(self) -> bool:
        """Copy the current file to ``<file>~`` once per session of the file.

        Returns whether a backup exists.
        """
        if self.backed:
            return True
        if self._is_default(self.filename):
            return False
        source = self._path(self.filename)
        target = source + BACKUP_SUFFIX
        try:
            if os.path.exists(target):
                os.remove(target)
            shutil.copyfile(source, target)
        except OSError:
            return False
        self.backed = True
        return True

    def file_caption(self, filename: str) -> str:
        """Window caption for ``filename``; ``[*]`` marks where "modified" goes."""
        shown = DEFAULT_FILE if not filename else os.path.basename(filename)
        return f"{TITLE} - {shown}[*]"

    def autosave_path(self) -> str:
        """Path of the file that unnamed recipes are autosaved to."""
        return os.path.join(self.cwd, f"autosave.{FILE_EXT}")

    def apply_general(self, general: GeneralSettings) -> Set[str]:
        """Adopt new general settings.

        Returns the names of settings whose change needs further action:
        ``"lookfeel"`` when the style changed and ``"autosave"`` when the
        autosave timer must be restarted.  The recent file list is trimmed
        when the allowed number shrinks.
        """
        old = self.state.general
        new = dataclasses.replace(general, recentfiles=list(general.recentfiles))
        self.state.general = new

        changes: Set[str] = set()
        if new.lookfeel != old.lookfeel:
            changes.add("lookfeel")
        if new.autosave != old.autosave or new.saveinterval != old.saveinterval:
            changes.add("autosave")
        if new.recentnum < old.recentnum:
            self.trim_recent()
        return changes