"""File I/O operations for materializing rendered entries.

Rendered text files are written through ``atomic_write_text`` so a failed
write never leaves a truncated file at the destination, carrying the source
file's permission bits; binary files go through ``copy_binary`` untouched.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    An existing file at ``path`` is replaced.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def copy_binary(source: Path, path: Path) -> None:
    """Copy ``source`` byte-for-byte to ``path``, replacing any existing file.

    Args:
        source: File to copy
        path: Destination file path
    """
    ensure_parent(path)
    shutil.copy2(source, path)
