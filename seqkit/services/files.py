"""Filesystem size and well-known path queries.

Platform errors (missing path, access denied) propagate unchanged.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from seqkit.observability.metrics import instrumented

__all__: list[str] = [
    "get_file_size",
    "get_directory_size",
    "get_user_path",
    "get_root_path",
]

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@instrumented("get_file_size")
def get_file_size(file_path: PathLike) -> int:
    """Size of a file in bytes."""
    return Path(file_path).stat().st_size


def _directory_size(dir_path: Path) -> int:
    total = 0
    # iterdir() raises NotADirectoryError / FileNotFoundError like the OS does
    for entry in dir_path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            total += _directory_size(entry)
        elif entry.is_file():
            total += entry.stat().st_size
    logger.debug("Measured directory %s: %d bytes", dir_path, total)
    return total


@instrumented("get_directory_size")
def get_directory_size(dir_path: PathLike) -> int:
    """Total size in bytes of every file under a directory, subdirectories included."""
    return _directory_size(Path(dir_path))


def get_user_path() -> str:
    """Absolute path of the current user's profile (home) directory."""
    return str(Path.home())


def get_root_path() -> str:
    """Root of the filesystem holding the system directory."""
    if os.name == "nt":
        system_root = os.environ.get("SystemRoot", "C:\\Windows")
        drive, _ = os.path.splitdrive(system_root)
        return drive + os.sep
    return os.path.abspath(os.sep)
