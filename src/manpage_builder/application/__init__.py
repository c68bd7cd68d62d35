"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from manpage_builder.application.options import BuildOptions
from manpage_builder.application.ports import BuildReporter, CommandRunner, Converter
from manpage_builder.application.results import BuildResult, CommandSpec, ConversionJob
from manpage_builder.types import SourceFormat


def build_options(
    *,
    markdown_program: str = "pandoc",
    docbook_program: str = "xsltproc",
    docbook_stylesheet: str | None = None,
    dependency_prefix: str | None = None,
) -> BuildOptions:
    """Build typed build options via lazy use-case import."""
    from manpage_builder.application.use_cases import build_options as _impl

    return _impl(
        markdown_program=markdown_program,
        docbook_program=docbook_program,
        docbook_stylesheet=docbook_stylesheet,
        dependency_prefix=dependency_prefix,
    )


def build_manpages(
    *,
    source_dir: Path,
    destination_dir: Path,
    options: BuildOptions,
    converters: Mapping[SourceFormat, Converter] | None = None,
    runner: CommandRunner | None = None,
    reporter: BuildReporter | None = None,
) -> BuildResult:
    """Build manual pages via lazy use-case import."""
    from manpage_builder.application.use_cases import build_manpages as _impl

    return _impl(
        source_dir=source_dir,
        destination_dir=destination_dir,
        options=options,
        converters=converters,
        runner=runner,
        reporter=reporter,
    )


__all__ = [
    "BuildOptions",
    "BuildResult",
    "CommandSpec",
    "ConversionJob",
    "build_options",
    "build_manpages",
]
