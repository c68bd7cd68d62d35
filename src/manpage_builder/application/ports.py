"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from manpage_builder.application.results import CommandSpec


class Converter(Protocol):
    """Map a source document and a target page to a converter command."""

    def command(self, input_path: Path, output_path: Path) -> CommandSpec:
        """Return the command converting ``input_path`` into ``output_path``."""


class CommandRunner(Protocol):
    """Execute an external command to completion."""

    def run(self, command: CommandSpec) -> None:
        """Raise ``CommandFailedError`` unless the command succeeds."""


class BuildReporter(Protocol):
    """Receive build-dependency and trace notifications."""

    def rerun_if_changed(self, path: Path) -> None:
        """Declare that the build step depends on ``path``."""

    def trace(self, command: CommandSpec) -> None:
        """Announce a command about to run."""
