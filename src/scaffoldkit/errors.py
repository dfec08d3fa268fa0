"""
scaffoldkit.errors - Exception Types
====================================

Only :class:`DestinationExistsError` is treated as recoverable by the
generation engine. Everything else (missing templates, permission problems,
full disks) surfaces as the ``OSError`` raised by the file system and is left
to propagate.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffoldkit errors."""


class ConfigError(ScaffoldError):
    """Raised when a configuration file or option value is invalid."""


class DestinationExistsError(ScaffoldError):
    """
    A destination file already exists and overwriting was not forced.

    Carries everything a caller needs to decide what to do next and, if it
    wants to, retry the same generation with ``force=True``.

    Attributes
    ----------
    template_name : str
        Name of the template relative to the template directory.
        If the template directory is ``_templates`` and it contains
        ``package.json.mustache``, the template name is simply
        ``package.json.mustache``.

    file_name : str
        Name of the file relative to the destination directory. Unless given
        explicitly this is the template name with its template extension
        removed.

    destination_path : Path
        Full path of the file that already exists.
    """

    def __init__(
        self,
        template_name: str,
        file_name: str,
        destination_path: Path,
    ) -> None:
        super().__init__(f'The file "{destination_path}" already exists')
        self.template_name = template_name
        self.file_name = file_name
        self.destination_path = destination_path

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(template_name={self.template_name!r}, "
            f"file_name={self.file_name!r}, "
            f"destination_path={self.destination_path!r})"
        )


class TemplateDecodeError(ScaffoldError):
    """Raised when a template file is not valid text in the expected encoding."""

    def __init__(self, path: Path, encoding: str) -> None:
        super().__init__(f"Template {path} is not valid {encoding} text")
        self.path = path
        self.encoding = encoding
