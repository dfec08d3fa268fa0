"""
pytest configuration and shared fixtures for scaffoldkit tests.

Fixtures defined here are automatically available to all test modules.

Fixtures
--------
template_dir : Path
    A template directory holding ``package.json.mustache`` and
    ``src/index.js``.

destination_dir : Path
    A destination directory path that does not exist yet.

config : GeneratorConfig
    Configuration tying the two together with ``[".mustache"]`` as the
    template extensions.

generator : Generator
    A generator using ``config`` and an identity render function wrapped in
    a ``MagicMock`` so calls can be asserted.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from scaffoldkit.generator import Generator
from scaffoldkit.models import GeneratorConfig


PACKAGE_JSON = '{\n  "name": "something"\n}\n'
INDEX_JS = "// I have no extra template extensions\n"


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Create the template directory with two templates."""
    templates = tmp_path / "templates"
    (templates / "src").mkdir(parents=True)
    (templates / "package.json.mustache").write_text(PACKAGE_JSON, encoding="utf-8")
    (templates / "src" / "index.js").write_text(INDEX_JS, encoding="utf-8")
    return templates


@pytest.fixture
def destination_dir(tmp_path: Path) -> Path:
    """Path of the (not yet created) output directory."""
    return tmp_path / "output"


@pytest.fixture
def config(template_dir: Path, destination_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(
        template_dir=template_dir,
        destination_dir=destination_dir,
        template_extensions=[".mustache"],
        sort_templates=True,
    )


@pytest.fixture
def render() -> MagicMock:
    """Identity render function that records its calls."""
    return MagicMock(side_effect=lambda context, text: text)


@pytest.fixture
def generator(config: GeneratorConfig, render: MagicMock) -> Generator:
    return Generator(config, render=render)


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line(
        "markers", "integration: marks end-to-end tests going through the CLI"
    )
