"""
scaffoldkit.controller - Interactive Overwrite Handling
=======================================================

:class:`OverwriteController` drives :meth:`Generator.generate_all` and
decides what happens to destinations that already exist. For each one it
asks a confirmation oracle (usually a human at a terminal) whether to
overwrite. Confirmed files are generated again with ``force=True``; declined
ones are skipped for the rest of the session.

Successful generations are handed to a report sink as soon as they happen,
so output streams while the run progresses.

Usage Example
-------------
>>> controller = OverwriteController(
...     generator,
...     context={"name": "demo"},
...     confirm=lambda message: questionary.confirm(message).ask(),
...     report=lambda result: print(result.destination_path),
... )
>>> controller.generate_all()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from scaffoldkit.errors import DestinationExistsError


if TYPE_CHECKING:
    from pathlib import Path

    from scaffoldkit.generator import Generator, TemplateFilter
    from scaffoldkit.models import GeneratedFile


logger = logging.getLogger(__name__)

ConfirmFunction = Callable[[str], bool]
ReportFunction = Callable[["GeneratedFile"], None]


def overwrite_message(destination_path: Path) -> str:
    """Prompt shown before overwriting or removing ``destination_path``."""
    return f"{destination_path} already exists. Overwrite it?"


class OverwriteController:
    """
    Generate all templates, asking before overwriting existing files.

    Parameters
    ----------
    generator : Generator
        Generator to drive.

    context : Any
        Passed to the generator (and so to the render function) for every
        template.

    confirm : ConfirmFunction
        Called with a message naming the existing destination. Returning
        True overwrites it. Exceptions raised here propagate unchanged.

    report : ReportFunction
        Called with every file that was written.

    template_filter : TemplateFilter | None
        Restrict the bulk run to some templates. See
        :meth:`Generator.generate_all`.
    """

    def __init__(
        self,
        generator: Generator,
        context: Any,
        *,
        confirm: ConfirmFunction,
        report: ReportFunction,
        template_filter: TemplateFilter | None = None,
    ) -> None:
        self.generator = generator
        self.context = context
        self.confirm = confirm
        self.report = report
        self.template_filter = template_filter

    def generate_all(self) -> list[GeneratedFile]:
        """
        Generate every template, prompting on each existing destination.

        Returns
        -------
        list[GeneratedFile]
            Files actually written, including confirmed overwrites, in the
            order they were written.
        """
        written: list[GeneratedFile] = []
        outcomes = self.generator.generate_all(self.context, self.template_filter)

        for outcome in outcomes:
            if isinstance(outcome, DestinationExistsError):
                if not self.confirm(overwrite_message(outcome.destination_path)):
                    logger.info("Skipped existing %s", outcome.destination_path)
                    continue
                written.append(
                    self.generate(
                        outcome.template_name,
                        file_name=outcome.file_name,
                        force=True,
                    )
                )
            else:
                self.report(outcome)
                written.append(outcome)

        return written

    def generate(
        self,
        template_name: str,
        *,
        file_name: str | None = None,
        force: bool = False,
    ) -> GeneratedFile:
        """Generate a single template and report it."""
        result = self.generator.generate(
            self.context,
            template_name,
            file_name=file_name,
            force=force,
        )
        self.report(result)
        return result

    def remove_destination_file(self, file_name: str, template_name: str) -> bool:
        """
        Remove a destination file after confirmation.

        Say you are about to create ``docker-compose.yml`` but want to make
        sure ``docker-compose.yaml`` isn't also in the project:

        >>> controller.remove_destination_file(
        ...     "docker-compose.yaml", "docker-compose.yml.j2"
        ... )

        Returns
        -------
        bool
            True if the file existed and was removed. False if it didn't
            exist or removal was declined.
        """
        try:
            self.generator.assert_destination_inexistence(file_name, template_name)
        except DestinationExistsError as error:
            if not self.confirm(overwrite_message(error.destination_path)):
                return False
            self.generator.filesystem.remove(error.destination_path)
            logger.info("Removed %s", error.destination_path)
            return True
        return False
