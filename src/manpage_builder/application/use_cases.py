"""Application use-cases orchestrating manual-page builds."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from manpage_builder.adapters.converters import create_default_converters
from manpage_builder.adapters.reporters import ConsoleReporter
from manpage_builder.application.options import BuildOptions
from manpage_builder.application.ports import BuildReporter, CommandRunner, Converter
from manpage_builder.application.results import BuildResult, ConversionJob
from manpage_builder.classify import classify_path
from manpage_builder.errors import (
    BuildConfigError,
    OutputDirectoryError,
    ScanError,
)
from manpage_builder.infrastructure.process import SubprocessCommandRunner
from manpage_builder.schemas import BuildConfig
from manpage_builder.types import SourceFormat

logger = logging.getLogger(__name__)


def list_sources(source_dir: Path) -> list[Path]:
    """Return direct entries of ``source_dir`` sorted by name.

    Raises
    ------
    ScanError
        If the directory cannot be listed.
    """
    try:
        entries = list(source_dir.iterdir())
    except OSError as exc:
        raise ScanError(f"Unable to list source directory {source_dir}: {exc}") from exc
    return sorted(entries, key=lambda entry: entry.name)


def plan_job(input_path: Path, destination_dir: Path) -> ConversionJob | None:
    """Derive the conversion job for ``input_path``, or ``None`` to skip it."""
    classification = classify_path(input_path)
    if classification is None:
        return None
    return ConversionJob(
        input_path=input_path,
        output_path=destination_dir / classification.section / classification.stem,
        section=classification.section,
        format=classification.format,
    )


def ensure_output_dir(job: ConversionJob) -> None:
    """Create the section directory of ``job`` and any missing ancestors."""
    section_dir = job.output_path.parent
    try:
        section_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Unable to create output directory {section_dir}: {exc}"
        ) from exc


def build_manpages(
    *,
    source_dir: Path,
    destination_dir: Path,
    options: BuildOptions,
    converters: Mapping[SourceFormat, Converter] | None = None,
    runner: CommandRunner | None = None,
    reporter: BuildReporter | None = None,
) -> BuildResult:
    """Use-case: convert every documentation source of a directory.

    Each entry of ``source_dir`` named ``<stem>.<section>.<md|xml>`` is
    converted into ``destination_dir/<section>/<stem>``. Other entries are
    skipped. The first failure aborts the build; pages already written are
    left in place.

    Raises
    ------
    BuildConfigError
        If the inputs fail validation.
    ScanError
        If ``source_dir`` cannot be listed.
    OutputDirectoryError
        If a section directory cannot be created.
    CommandFailedError
        If a converter fails or cannot be launched.
    """
    try:
        config = BuildConfig(
            source_dir=source_dir,
            destination_dir=destination_dir,
            markdown_program=options.markdown_program,
            docbook_program=options.docbook_program,
            docbook_stylesheet=options.docbook_stylesheet,
            dependency_prefix=options.dependency_prefix,
        )
    except ValidationError as exc:
        raise BuildConfigError(f"Invalid build parameters: {exc}") from exc

    converters = {**create_default_converters(options), **(converters or {})}
    runner = runner or SubprocessCommandRunner()
    reporter = reporter or ConsoleReporter(prefix=config.dependency_prefix)

    pages: list[ConversionJob] = []
    for entry in list_sources(config.source_dir):
        job = plan_job(entry, config.destination_dir)
        if job is None:
            logger.debug("skipping %s: not a manual-page source", entry)
            continue
        ensure_output_dir(job)
        command = converters[job.format].command(job.input_path, job.output_path)
        reporter.trace(command)
        runner.run(command)
        reporter.rerun_if_changed(job.input_path)
        pages.append(job)

    logger.info("built %d manual page(s) into %s", len(pages), config.destination_dir)
    return BuildResult(
        source_dir=config.source_dir,
        destination_dir=config.destination_dir,
        pages=tuple(pages),
    )


def build_options(
    *,
    markdown_program: str = "pandoc",
    docbook_program: str = "xsltproc",
    docbook_stylesheet: str | None = None,
    dependency_prefix: str | None = None,
) -> BuildOptions:
    """Build typed option object from command/API params."""
    defaults = BuildOptions()
    return BuildOptions(
        markdown_program=markdown_program,
        docbook_program=docbook_program,
        docbook_stylesheet=(
            defaults.docbook_stylesheet
            if docbook_stylesheet is None
            else docbook_stylesheet
        ),
        dependency_prefix=(
            defaults.dependency_prefix
            if dependency_prefix is None
            else dependency_prefix
        ),
    )
