"""Tests for scaffoldkit.rendering."""

import pytest
from jinja2 import UndefinedError
from pydantic import BaseModel

from scaffoldkit.rendering import JinjaRenderer, create_jinja_env, identity_render


class Settings(BaseModel):
    name: str
    version: str = "0.1.0"


def test_identity_render_ignores_context() -> None:
    assert identity_render({"foo": "bar"}, "{{ foo }}\n") == "{{ foo }}\n"


class TestCreateJinjaEnv:
    """Tests for the Jinja2 environment."""

    def test_configured_for_code(self) -> None:
        env = create_jinja_env()

        assert env.trim_blocks is True
        assert env.lstrip_blocks is True
        assert env.keep_trailing_newline is True
        assert env.autoescape is False

    def test_snake_case_filter(self) -> None:
        env = create_jinja_env()
        assert env.from_string("{{ 'My-Project' | snake_case }}").render() == "my_project"


class TestJinjaRenderer:
    """Tests for JinjaRenderer."""

    def test_mapping_context(self) -> None:
        render = JinjaRenderer()
        assert render({"name": "demo"}, '{"name": "{{ name }}"}\n') == '{"name": "demo"}\n'

    def test_pydantic_context(self) -> None:
        render = JinjaRenderer()
        text = render(Settings(name="demo"), "{{ name }}=={{ version }}")
        assert text == "demo==0.1.0"

    def test_other_context_exposed_as_context(self) -> None:
        render = JinjaRenderer()
        assert render(42, "{{ context + 1 }}") == "43"

    def test_no_html_escaping(self) -> None:
        """Test substituted values are written verbatim, not HTML-escaped."""
        render = JinjaRenderer()
        assert render({"x": "<a & b>"}, "{{ x }}") == "<a & b>"
        assert render({"v": "\"q\" 's'"}, '{"k": "{{ v }}"}') == '{"k": ""q" \'s\'"}'

    def test_undefined_variable_raises(self) -> None:
        render = JinjaRenderer()
        with pytest.raises(UndefinedError):
            render({}, "{{ missing }}")

    def test_plain_text_unchanged(self) -> None:
        render = JinjaRenderer()
        text = "// I have no extra template extensions\n"
        assert render(None, text) == text
