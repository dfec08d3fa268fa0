"""
scaffoldkit.generator - Core Generation Engine
==============================================

This module turns a directory of template files into a directory of
generated files. It is the only part of scaffoldkit with real contracts:

- templates are discovered by a recursive walk of the template directory;
- each template maps to a destination file name (its template extension
  removed);
- a destination that already exists is never overwritten unless the caller
  forces it;
- the bulk operation keeps going past existing destinations and hands them
  back as data.

Pipeline
--------
For every template, :meth:`Generator.generate` runs:

    1. Check the destination doesn't exist (skipped with ``force=True``)
    2. Read the template text
    3. Render it with the injected render function
    4. Create the destination's parent directories
    5. Write the rendered text

The existence check and the write are not atomic. Another process creating
the destination in between will have its file overwritten.

Usage Example
-------------
>>> from scaffoldkit.errors import DestinationExistsError
>>> from scaffoldkit.generator import Generator
>>> from scaffoldkit.models import GeneratorConfig
>>> from scaffoldkit.rendering import JinjaRenderer
>>>
>>> generator = Generator(
...     GeneratorConfig(
...         template_dir="_templates",
...         destination_dir=".",
...         template_extensions=[".j2"],
...     ),
...     render=JinjaRenderer(),
... )
>>> for outcome in generator.generate_all({"name": "demo"}):
...     if isinstance(outcome, DestinationExistsError):
...         print(f"exists: {outcome.destination_path}")
...     else:
...         print(f"created: {outcome.destination_path}")

See Also
--------
- controller.py: Interactive handling of existing destinations
- filesystem.py: File system capability used for all I/O
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from typing import TYPE_CHECKING, Any, Union

from scaffoldkit.errors import DestinationExistsError
from scaffoldkit.filesystem import FileSystem, LocalFileSystem
from scaffoldkit.models import GeneratedFile, GeneratorConfig


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from scaffoldkit.models import Outcome
    from scaffoldkit.rendering import RenderFunction


logger = logging.getLogger(__name__)

# Either an explicit collection of template names or a predicate over them
TemplateFilter = Union[Collection[str], Callable[[str], bool]]


def _accept_all(template_name: str) -> bool:
    return True


def _create_template_name_filter(
    template_filter: TemplateFilter | None,
) -> Callable[[str], bool]:
    if template_filter is None:
        return _accept_all
    if callable(template_filter):
        return template_filter
    names = frozenset(template_filter)
    return lambda template_name: template_name in names


class Generator:
    """
    Generate files from the templates found in a template directory.

    Parameters
    ----------
    config : GeneratorConfig
        Template directory, destination directory and template extensions.

    render : RenderFunction
        ``render(context, template_text) -> str``. Called once per generated
        file with the context passed to :meth:`generate` or
        :meth:`generate_all`.

    filesystem : FileSystem | None
        File system used for all I/O. Defaults to :class:`LocalFileSystem`.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        render: RenderFunction,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.config = config
        self.render = render
        self.filesystem = filesystem or LocalFileSystem()

    @property
    def template_dir(self) -> Path:
        return self.config.template_dir

    @property
    def destination_dir(self) -> Path:
        return self.config.destination_dir

    @property
    def template_extensions(self) -> list[str]:
        return self.config.template_extensions

    # =========================================================================
    # Bulk Generation
    # =========================================================================

    def generate_all(
        self,
        context: Any,
        template_filter: TemplateFilter | None = None,
    ) -> Iterator[Outcome]:
        """
        Run :meth:`generate` on every template and yield each outcome.

        :class:`DestinationExistsError` is caught and yielded in place of the
        result so the caller can decide what to do (skip, overwrite, ask)
        while the remaining templates are still processed. Any other error
        stops the iteration and propagates.

        Parameters
        ----------
        context : Any
            Passed to the render function for every template.

        template_filter : TemplateFilter | None
            Collection of template names to include, or a predicate over
            template names. Everything is included by default.

        Yields
        ------
        GeneratedFile | DestinationExistsError
            One outcome per matching template, in discovery order.

        Examples
        --------
        >>> for outcome in generator.generate_all(context):
        ...     if isinstance(outcome, DestinationExistsError):
        ...         if confirm_overwrite():
        ...             generator.generate(
        ...                 context,
        ...                 outcome.template_name,
        ...                 file_name=outcome.file_name,
        ...                 force=True,
        ...             )
        ...         continue
        ...     print("success")
        """
        include = _create_template_name_filter(template_filter)
        for template_name in self.template_names():
            if not include(template_name):
                logger.debug("Filtered out %s", template_name)
                continue
            outcome: Outcome
            try:
                outcome = self.generate(context, template_name)
            except DestinationExistsError as error:
                logger.debug("Destination exists for %s", template_name)
                outcome = error
            yield outcome

    # =========================================================================
    # Single File Generation
    # =========================================================================

    def generate(
        self,
        context: Any,
        template_name: str,
        *,
        file_name: str | None = None,
        force: bool = False,
    ) -> GeneratedFile:
        """
        Render ``template_name`` into the destination directory.

        Parameters
        ----------
        context : Any
            Passed unchanged to the render function.

        template_name : str
            Template path relative to the template directory.

        file_name : str | None
            Destination path relative to the destination directory. Defaults
            to ``template_name`` with its template extension removed.

        force : bool, default=False
            Overwrite the destination if it already exists.

        Returns
        -------
        GeneratedFile
            ``(template_path, destination_path)`` of the written file.

        Raises
        ------
        DestinationExistsError
            If the destination exists and ``force`` is False. Nothing is read
            or written in that case.
        OSError
            If the template can't be read or the destination can't be
            written.
        """
        if file_name is None:
            file_name = self.remove_template_extension(template_name)

        if not force:
            self.assert_destination_inexistence(file_name, template_name)

        template_path = self.template_path(template_name)
        template = self.filesystem.read_text(template_path)
        rendered = self.render(context, template)

        destination_path = self.destination_path(file_name)
        self.filesystem.make_dirs(destination_path.parent)
        self.filesystem.write_text(destination_path, rendered)

        logger.debug("Generated %s from %s", destination_path, template_path)
        return GeneratedFile(template_path, destination_path)

    # =========================================================================
    # Paths and Names
    # =========================================================================

    def template_path(self, template_name: str) -> Path:
        """The full template path of ``template_name``."""
        return self.template_dir / template_name

    def destination_path(self, file_name: str) -> Path:
        """The full destination path of ``file_name``."""
        return self.destination_dir / file_name

    def assert_destination_inexistence(
        self,
        file_name: str,
        template_name: str,
    ) -> None:
        """
        Assert that ``file_name`` doesn't exist in the destination directory.

        ``template_name`` is only used to build the error, since the template
        name can differ from the destination file name.

        Raises
        ------
        DestinationExistsError
            If the destination file exists.
        OSError
            If existence can't be determined (e.g. permission denied).
        """
        destination_path = self.destination_path(file_name)
        if self.filesystem.exists(destination_path):
            raise DestinationExistsError(template_name, file_name, destination_path)

    def remove_template_extension(self, file_name: str) -> str:
        """
        Remove the first template extension that matches the end of
        ``file_name``.

        Only one extension is removed, from the end of the name. An empty
        extension matches every name and removes nothing.

        Examples
        --------
        >>> generator.config.template_extensions
        ['.mustache', '.mu']
        >>> generator.remove_template_extension("package.json.mustache")
        'package.json'
        >>> generator.remove_template_extension("index.js")
        'index.js'
        """
        for extension in self.template_extensions:
            if file_name.endswith(extension):
                return file_name[: len(file_name) - len(extension)]
        return file_name

    def template_names(self) -> Iterator[str]:
        """
        Yield the name of every template in the template directory.

        Names are posix paths relative to the template directory, e.g.
        ``src/index.js``. Directories are never yielded.

        The order is whatever the directory walk produces and is not sorted,
        unless ``sort_templates`` is set in the configuration. Each call
        starts a new walk.
        """
        names = self.filesystem.walk_files(self.template_dir)
        if self.config.sort_templates:
            names = iter(sorted(names))
        for name in names:
            logger.debug("Discovered template %s", name)
            yield name
