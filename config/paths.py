# config/paths.py
"""
Centralized, cross-platform path management for splitwatch.

Design goals
- One place that decides where the session log and the journal live
- Honors these env vars:
    SPLITWATCH_DATA_ROOT, SPLITWATCH_LOGS_ROOT, SPLITWATCH_LOG_FILE
- Sensible OS defaults when env vars are not provided
- Safe directory creation with writeability checks
"""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FILE = "done.org"
JOURNAL_FILE = "journal.jsonl"


# ---------- OS defaults (used only if env vars not set) ----------

def _platform_default_base() -> Path:
    """
    Returns an OS-specific base directory for user data, following conventions:
    - Windows: %LOCALAPPDATA%/Splitwatch
    - macOS:   ~/Library/Application Support/Splitwatch
    - Linux:   ~/.local/share/splitwatch
    """
    if sys.platform.startswith("win"):
        base = os.getenv("LOCALAPPDATA") or os.getenv("APPDATA") or str(Path.home() / "AppData" / "Local")
        return Path(base) / "Splitwatch"
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "Splitwatch"
    else:
        # Linux / other POSIX
        return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share")) / "splitwatch"


# ---------- Environment overrides ----------

def _env_or_default_data_root() -> Path:
    return Path(os.getenv("SPLITWATCH_DATA_ROOT", _platform_default_base()))


def _env_or_default_logs_root(data_root: Path) -> Path:
    return Path(os.getenv("SPLITWATCH_LOGS_ROOT", data_root / "logs"))


def _env_or_default_log_file() -> Path:
    return Path(os.getenv("SPLITWATCH_LOG_FILE", DEFAULT_LOG_FILE))


# ---------- Core dataclass ----------

@dataclass(frozen=True)
class Paths:
    """
    Canonical path container for splitwatch.

    Most callers should obtain a singleton instance via get_paths().
    ``log_file`` is relative to the working directory unless absolute.
    """
    data_root: Path
    logs_root: Path
    log_file: Path

    @staticmethod
    def from_env() -> "Paths":
        data = _env_or_default_data_root()
        return Paths(data, _env_or_default_logs_root(data), _env_or_default_log_file())

    # ----- helpers -----

    @property
    def journal_path(self) -> Path:
        return self.logs_root / JOURNAL_FILE

    def resolve_log_path(self, arg: Optional[Union[str, Path]] = None) -> Path:
        """
        The session log to append to: the CLI argument when given, else the
        configured default.
        """
        if arg is None or str(arg) == "":
            return self.log_file
        return Path(arg)

    # ----- setup / validation -----

    def verify_writeable(self) -> None:
        """
        Raise OSError if the journal directory is not writeable.
        """
        for p in [self.data_root, self.logs_root]:
            try:
                p.mkdir(parents=True, exist_ok=True)
                test = p / ".write_test"
                test.write_text("ok", encoding="utf-8")
                test.unlink(missing_ok=True)
            except OSError as e:
                raise OSError(errno.EACCES, f"Not writeable: {p}") from e


# ---------- Singleton access ----------

_paths_singleton: Optional[Paths] = None

def get_paths(force_refresh: bool = False) -> Paths:
    """
    Return a cached Paths instance.
    """
    global _paths_singleton
    if force_refresh or _paths_singleton is None:
        _paths_singleton = Paths.from_env()
    return _paths_singleton

