"""Build reporter adapters implementing the ``BuildReporter`` port."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from manpage_builder.application.options import CARGO_RERUN_PREFIX
from manpage_builder.application.results import CommandSpec

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """Write dependency declarations and command traces to a text stream.

    Notes
    -----
    Dependency lines follow ``<prefix><path>``, by default the
    ``cargo:rerun-if-changed=`` convention read by build drivers from the
    step's standard output.
    """

    def __init__(
        self,
        prefix: str = CARGO_RERUN_PREFIX,
        stream: TextIO | None = None,
    ) -> None:
        self.prefix = prefix
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def _write(self, line: str) -> None:
        # Undecodable file names arrive as lone surrogates; escape them.
        stream = self.stream
        encoding = getattr(stream, "encoding", None) or "utf-8"
        safe = line.encode(encoding, "backslashreplace").decode(encoding)
        print(safe, file=stream, flush=True)

    def rerun_if_changed(self, path: Path) -> None:
        self._write(f"{self.prefix}{path}")

    def trace(self, command: CommandSpec) -> None:
        logger.debug("running %s", command)
        self._write(f"Running {command}")


@dataclass
class RecordingReporter:
    """Collect dependency paths and traced commands in memory."""

    dependencies: list[Path] = field(default_factory=list)
    commands: list[CommandSpec] = field(default_factory=list)

    def rerun_if_changed(self, path: Path) -> None:
        self.dependencies.append(path)

    def trace(self, command: CommandSpec) -> None:
        self.commands.append(command)
