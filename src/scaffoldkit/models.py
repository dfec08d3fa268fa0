"""
scaffoldkit.models - Configuration and Result Models
====================================================

Data types passed between the generator, the overwrite controller and the
command line interface.

Models
------
GeneratorConfig
    Pydantic model holding the template root, destination root and the
    ordered list of template extensions.

GeneratedFile
    Success record returned for each file written. It is a ``NamedTuple``, so
    it unpacks like a ``(template_path, destination_path)`` pair.

Outcome
    ``GeneratedFile | DestinationExistsError``. The bulk generation yields
    one of these per template.

Usage Example
-------------
>>> from scaffoldkit.models import GeneratorConfig
>>> config = GeneratorConfig(
...     template_dir="_templates",
...     destination_dir="out",
...     template_extensions=[".j2", ".mustache"],
... )
>>> config.template_extensions
['.j2', '.mustache']
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scaffoldkit.errors import ConfigError, DestinationExistsError


# =============================================================================
# Generator Configuration
# =============================================================================

class GeneratorConfig(BaseModel):
    """
    Configuration for a :class:`~scaffoldkit.generator.Generator`.

    The model is frozen: roots cannot be reassigned once a generator has been
    built. The ``template_extensions`` list itself may still be mutated
    between calls; the generator reads it on every call and never caches the
    stripped names.

    Attributes
    ----------
    template_dir : Path
        Directory where all the templates live.

    destination_dir : Path
        Directory the generated files are written to.

    template_extensions : list[str]
        Extensions to remove from template names to obtain destination file
        names, e.g. ``[".mustache", ".mu"]``. Order matters: the first
        extension matching the end of a name wins.

    sort_templates : bool
        Discover templates in lexicographic order instead of the order the
        directory walk happens to produce.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    template_dir: Path = Field(
        description="Directory where all the templates live",
    )
    destination_dir: Path = Field(
        description="Directory to generate files in to",
    )
    template_extensions: list[str] = Field(
        default_factory=list,
        description="Extensions removed from template names, first match wins",
    )
    sort_templates: bool = Field(
        default=False,
        description="Yield template names in sorted order",
    )

    @field_validator("template_dir", "destination_dir", mode="before")
    @classmethod
    def validate_not_empty(cls, v: Any) -> Any:
        """Reject empty paths, which would silently resolve to the cwd."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("Directory path cannot be empty")
        return v

    @field_validator("template_extensions")
    @classmethod
    def strip_extensions(cls, v: list[str]) -> list[str]:
        """
        Strip surrounding whitespace from each extension.

        ``""`` is kept (it matches every name and removes nothing), but an
        entry made only of whitespace is rejected rather than turned into it.
        """
        stripped = []
        for ext in v:
            if ext and not ext.strip():
                raise ValueError(f"Blank template extension {ext!r}")
            stripped.append(ext.strip())
        return stripped


# =============================================================================
# Generation Outcomes
# =============================================================================

class GeneratedFile(NamedTuple):
    """
    A template that was rendered and written.

    Attributes
    ----------
    template_path : Path
        Full path of the template that was read.

    destination_path : Path
        Full path of the file that was written.
    """

    template_path: Path
    destination_path: Path


Outcome = Union[GeneratedFile, DestinationExistsError]


# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_TABLE = "tool.scaffoldkit"

CONFIG_KEYS = frozenset(GeneratorConfig.model_fields)


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Load generator settings from a TOML file.

    Files with a ``[tool]`` table (e.g. a project's ``pyproject.toml``) must
    hold the settings in ``[tool.scaffoldkit]``. Any other file holds them at
    the top level.

    Parameters
    ----------
    path : Path
        Path to the TOML file.

    Returns
    -------
    dict[str, Any]
        The settings, validated against :class:`GeneratorConfig` field names.
        Relative directories are resolved against the file's directory.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid TOML, lacks the
        ``[tool.scaffoldkit]`` table where one is required, or contains
        unknown keys.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    if "tool" in data or path.name == "pyproject.toml":
        tool = data.get("tool")
        if not isinstance(tool, dict) or "scaffoldkit" not in tool:
            raise ConfigError(f"No [{CONFIG_TABLE}] table in {path}")
        table = tool["scaffoldkit"]
    else:
        table = data

    if not isinstance(table, dict):
        raise ConfigError(f"[{CONFIG_TABLE}] in {path} must be a table")

    unknown = set(table) - CONFIG_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown setting(s) in {path}: {', '.join(sorted(unknown))}"
        )

    settings = dict(table)
    for key in ("template_dir", "destination_dir"):
        if key in settings:
            settings[key] = path.parent / str(settings[key])

    return settings


def build_config(
    settings: dict[str, Any],
    **overrides: Any,
) -> GeneratorConfig:
    """
    Merge file settings with explicit overrides and validate the result.

    Overrides set to ``None`` (or an empty sequence) are ignored so that
    command-line options only win when they were actually given.

    Raises
    ------
    ConfigError
        If the merged settings don't form a valid :class:`GeneratorConfig`.
    """
    merged = dict(settings)
    for key, value in overrides.items():
        if value is None or (isinstance(value, (list, tuple)) and not value):
            continue
        merged[key] = value

    try:
        return GeneratorConfig(**merged)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def parse_variables(pairs: list[str]) -> dict[str, str]:
    """
    Parse ``KEY=VALUE`` strings into a dictionary.

    Examples
    --------
    >>> parse_variables(["name=demo", "greeting=hello=world"])
    {'name': 'demo', 'greeting': 'hello=world'}
    """
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigError(f"Invalid variable '{pair}', expected KEY=VALUE")
        variables[key] = value
    return variables
