"""Converter adapters implementing the ``Converter`` port."""

from __future__ import annotations

from pathlib import Path

from manpage_builder.application.options import (
    DOCBOOK_MANPAGES_STYLESHEET,
    BuildOptions,
)
from manpage_builder.application.ports import Converter
from manpage_builder.application.results import CommandSpec
from manpage_builder.types import SourceFormat


class PandocConverter:
    """Convert Markdown to roff with pandoc."""

    def __init__(self, program: str = "pandoc") -> None:
        self.program = program

    def command(self, input_path: Path, output_path: Path) -> CommandSpec:
        """Return the pandoc command for a standalone man page.

        Parameters
        ----------
        input_path : Path
            Markdown source document.
        output_path : Path
            Destination manual page.

        Returns
        -------
        CommandSpec
            ``<program> -s -f markdown -t man -o <output> <input>``.
        """
        return CommandSpec(
            program=self.program,
            args=(
                "-s",
                "-f",
                "markdown",
                "-t",
                "man",
                "-o",
                str(output_path),
                str(input_path),
            ),
        )


class XsltprocConverter:
    """Convert DocBook XML to roff with xsltproc and the DocBook stylesheets."""

    def __init__(
        self,
        program: str = "xsltproc",
        stylesheet: str = DOCBOOK_MANPAGES_STYLESHEET,
    ) -> None:
        self.program = program
        self.stylesheet = stylesheet

    def command(self, input_path: Path, output_path: Path) -> CommandSpec:
        """Return the xsltproc command for a quiet, ANSI-synopsis man page.

        Parameters
        ----------
        input_path : Path
            DocBook source document.
        output_path : Path
            Destination manual page.

        Returns
        -------
        CommandSpec
            Command applying ``stylesheet`` with network access disabled.
        """
        return CommandSpec(
            program=self.program,
            args=(
                "--nonet",
                "--stringparam",
                "man.output.quietly",
                "1",
                "--param",
                "funcsynopsis.style",
                # XPath string literal, quotes included.
                "'ansi'",
                "--output",
                str(output_path),
                self.stylesheet,
                str(input_path),
            ),
        )


def create_default_converters(
    options: BuildOptions | None = None,
) -> dict[SourceFormat, Converter]:
    """Bind each source format to its converter."""
    options = options or BuildOptions()
    return {
        "markdown": PandocConverter(program=options.markdown_program),
        "docbook": XsltprocConverter(
            program=options.docbook_program,
            stylesheet=options.docbook_stylesheet,
        ),
    }
