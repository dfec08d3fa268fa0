"""
scaffoldkit - Template Directory Scaffolding
============================================

Turn a directory of template files into a directory of generated files,
without silently clobbering files that already exist.

Quick Start
-----------
```bash
scaffoldkit generate --template-dir _templates --destination-dir . -e .j2
```

Example
-------
>>> from scaffoldkit import Generator, GeneratorConfig, identity_render
>>> generator = Generator(
...     GeneratorConfig(template_dir="_templates", destination_dir="out"),
...     render=identity_render,
... )
>>> results = list(generator.generate_all(context=None))

Architecture
------------
- ``generator``: Template discovery and per-file / bulk generation
- ``controller``: Asks before overwriting existing files
- ``filesystem``: File system capability used for all I/O
- ``rendering``: Render functions (identity, Jinja2)
- ``models``: Configuration and result types
- ``errors``: Exception types
- ``cli``: Typer command line interface
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from scaffoldkit.controller import OverwriteController
from scaffoldkit.errors import (
    ConfigError,
    DestinationExistsError,
    ScaffoldError,
    TemplateDecodeError,
)
from scaffoldkit.filesystem import FileSystem, LocalFileSystem
from scaffoldkit.generator import Generator
from scaffoldkit.models import GeneratedFile, GeneratorConfig
from scaffoldkit.rendering import JinjaRenderer, identity_render


__all__ = [
    "ConfigError",
    "DestinationExistsError",
    "FileSystem",
    "GeneratedFile",
    "Generator",
    "GeneratorConfig",
    "JinjaRenderer",
    "LocalFileSystem",
    "OverwriteController",
    "ScaffoldError",
    "TemplateDecodeError",
    "__version__",
    "identity_render",
]
