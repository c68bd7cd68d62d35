"""Application-layer value objects."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

from manpage_builder.types import SourceFormat


@dataclass(frozen=True)
class CommandSpec:
    """Fully-assembled external command."""

    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """Program followed by its arguments."""
        return [self.program, *self.args]

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class ConversionJob:
    """One source file and the manual page it produces."""

    input_path: Path
    output_path: Path
    section: str
    format: SourceFormat


@dataclass(frozen=True)
class BuildResult:
    """Structured build outcome."""

    source_dir: Path
    destination_dir: Path
    pages: tuple[ConversionJob, ...] = ()
