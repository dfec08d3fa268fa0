"""
scaffoldkit.filesystem - File System Capability
===============================================

The generation engine never touches the disk directly. It talks to an object
implementing the :class:`FileSystem` protocol, which makes it easy to swap
in a fake for tests or an alternative backend (e.g. a sandbox) for embedding
applications.

:class:`LocalFileSystem` is the default implementation, built on ``pathlib``
and ``os``.

Existence Checks
----------------
``exists`` is tri-state:

- returns ``True`` when the path exists;
- returns ``False`` when the path (or one of its parents) does not exist;
- raises the underlying ``OSError`` for anything else, e.g. a
  ``PermissionError`` while probing a directory we cannot read.

``Path.exists`` is not used because, depending on the Python version, it
swallows every ``OSError`` and reports it as "does not exist".
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from scaffoldkit.errors import TemplateDecodeError


if TYPE_CHECKING:
    from collections.abc import Iterator


class FileSystem(Protocol):
    """Operations the generator needs from a file system."""

    def walk_files(self, root: Path) -> Iterator[str]:
        """Yield every non-directory entry under ``root`` as a relative posix path."""
        ...

    def exists(self, path: Path) -> bool:
        """Tri-state existence check (see module docs)."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create ``path`` and its parents, no error if it already exists."""
        ...

    def read_text(self, path: Path) -> str:
        """Read the whole file as text, raising TemplateDecodeError on binary data."""
        ...

    def write_text(self, path: Path, text: str) -> None:
        """Create or truncate the file and write ``text``."""
        ...

    def remove(self, path: Path) -> None:
        """Delete a single file."""
        ...


class LocalFileSystem:
    """
    :class:`FileSystem` backed by the local disk.

    Parameters
    ----------
    encoding : str, default="utf-8"
        Encoding used for reading templates and writing generated files.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def walk_files(self, root: Path) -> Iterator[str]:
        # rglob follows os.scandir order, which is not sorted
        for entry in root.rglob("*"):
            if entry.is_dir():
                continue
            yield entry.relative_to(root).as_posix()

    def exists(self, path: Path) -> bool:
        try:
            os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise TemplateDecodeError(path, self.encoding) from e

    def write_text(self, path: Path, text: str) -> None:
        path.write_text(text, encoding=self.encoding)

    def remove(self, path: Path) -> None:
        path.unlink()
