"""
scaffoldkit.rendering - Render Functions
========================================

The generator accepts any callable ``render(context, template_text) -> str``.
This module ships the two the command line needs:

identity_render
    Returns the template text untouched. Useful for plain file copies and
    for tests.

JinjaRenderer
    Renders template text with Jinja2. The environment is configured for
    code generation, not HTML: autoescaping is off, trailing newlines are
    kept and undefined variables are an error.

Template Context
----------------
``JinjaRenderer`` exposes the context to templates as variables:

- a mapping is unpacked as-is;
- a pydantic model is dumped with ``model_dump()`` first;
- anything else is available as ``context``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from jinja2 import Environment, StrictUndefined
from pydantic import BaseModel


RenderFunction = Callable[[Any, str], str]


def identity_render(context: Any, template_text: str) -> str:
    """Return ``template_text`` unchanged, ignoring ``context``."""
    return template_text


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment used for rendering template text.

    Returns
    -------
    Environment
        Environment with autoescaping disabled, trim/lstrip blocks enabled,
        trailing newlines preserved and :class:`~jinja2.StrictUndefined`.
    """
    env = Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )

    env.filters["snake_case"] = lambda s: s.replace("-", "_").lower()

    return env


class JinjaRenderer:
    """
    Render function backed by a Jinja2 :class:`~jinja2.Environment`.

    Parameters
    ----------
    env : Environment | None
        Environment to compile templates with. Defaults to
        :func:`create_jinja_env`.

    Examples
    --------
    >>> render = JinjaRenderer()
    >>> render({"name": "demo"}, "Hello {{ name }}!")
    'Hello demo!'
    """

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or create_jinja_env()

    def __call__(self, context: Any, template_text: str) -> str:
        template = self.env.from_string(template_text)
        return template.render(**self._variables(context))

    @staticmethod
    def _variables(context: Any) -> dict[str, Any]:
        if isinstance(context, BaseModel):
            return context.model_dump()
        if isinstance(context, Mapping):
            return dict(context)
        return {"context": context}
