"""Unit tests for the build use-case contract."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from manpage_builder.adapters.reporters import RecordingReporter
from manpage_builder.application.options import (
    DOCBOOK_MANPAGES_STYLESHEET,
    BuildOptions,
)
from manpage_builder.application.results import CommandSpec
from manpage_builder.application.use_cases import (
    build_manpages,
    build_options,
    plan_job,
)
from manpage_builder.errors import (
    BuildConfigError,
    CommandFailedError,
    OutputDirectoryError,
    ScanError,
)


class _Runner:
    """Record commands and write the page named after ``-o``/``--output``."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.commands: list[CommandSpec] = []

    def run(self, command: CommandSpec) -> None:
        self.commands.append(command)
        if self.fail_on and command.args[-1].endswith(self.fail_on):
            raise CommandFailedError(f"Command failed: {command}")
        args = list(command.args)
        flag = "-o" if "-o" in args else "--output"
        output = Path(args[args.index(flag) + 1])
        assert output.parent.is_dir()
        output.write_text(".TH FAKE 1\n")


class _Converter:
    def __init__(self, program: str) -> None:
        self.program = program

    def command(self, input_path: Path, output_path: Path) -> CommandSpec:
        return CommandSpec(self.program, ("-o", str(output_path), str(input_path)))


def _sources(root: Path, *names: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for name in names:
        (root / name).write_text("dummy")
    return root


def test_build_converts_matching_sources(tmp_path: Path) -> None:
    """Convert markdown and docbook sources, ignoring other files."""
    src = _sources(tmp_path / "man", "guide.1.md", "config.5.xml", "readme.txt")
    dst = tmp_path / "out"
    runner = _Runner()
    reporter = RecordingReporter()

    result = build_manpages(
        source_dir=src,
        destination_dir=dst,
        options=BuildOptions(),
        runner=runner,
        reporter=reporter,
    )

    assert (dst / "1" / "guide").is_file()
    assert (dst / "5" / "config").is_file()
    assert sorted(p.name for p in dst.iterdir()) == ["1", "5"]
    assert [c.argv for c in runner.commands] == [
        [
            "xsltproc",
            "--nonet",
            "--stringparam",
            "man.output.quietly",
            "1",
            "--param",
            "funcsynopsis.style",
            "'ansi'",
            "--output",
            str(dst / "5" / "config"),
            DOCBOOK_MANPAGES_STYLESHEET,
            str(src / "config.5.xml"),
        ],
        [
            "pandoc",
            "-s",
            "-f",
            "markdown",
            "-t",
            "man",
            "-o",
            str(dst / "1" / "guide"),
            str(src / "guide.1.md"),
        ],
    ]
    assert reporter.commands == runner.commands
    assert reporter.dependencies == [src / "config.5.xml", src / "guide.1.md"]
    assert [(job.section, job.format) for job in result.pages] == [
        ("5", "docbook"),
        ("1", "markdown"),
    ]
    assert result.destination_dir == dst


def test_build_last_digit_suffix_wins(tmp_path: Path) -> None:
    """Treat earlier digit groups as part of the stem."""
    src = _sources(tmp_path / "man", "tool.1.2.md")
    dst = tmp_path / "out"

    result = build_manpages(
        source_dir=src,
        destination_dir=dst,
        options=BuildOptions(),
        runner=_Runner(),
        reporter=RecordingReporter(),
    )

    assert (dst / "2" / "tool.1").is_file()
    assert not (dst / "1").exists()
    assert result.pages[0].output_path == dst / "2" / "tool.1"


def test_build_aborts_on_first_failure(tmp_path: Path) -> None:
    """Stop at the first failing converter and keep earlier output."""
    src = _sources(tmp_path / "man", "a.1.md", "b.1.md", "c.1.md")
    dst = tmp_path / "out"
    runner = _Runner(fail_on="b.1.md")
    reporter = RecordingReporter()

    with pytest.raises(CommandFailedError):
        build_manpages(
            source_dir=src,
            destination_dir=dst,
            options=BuildOptions(),
            runner=runner,
            reporter=reporter,
        )

    assert (dst / "1" / "a").is_file()
    assert not (dst / "1" / "c").exists()
    assert len(runner.commands) == 2
    assert reporter.dependencies == [src / "a.1.md"]


def test_build_is_idempotent(tmp_path: Path) -> None:
    """Rebuild over an existing destination tree without error."""
    src = _sources(tmp_path / "man", "guide.1.md")
    dst = tmp_path / "out"
    for _ in range(2):
        result = build_manpages(
            source_dir=src,
            destination_dir=dst,
            options=BuildOptions(),
            runner=_Runner(),
            reporter=RecordingReporter(),
        )
        assert len(result.pages) == 1
    assert (dst / "1" / "guide").is_file()


def test_build_with_no_sources_creates_nothing(tmp_path: Path) -> None:
    """Leave the destination untouched when nothing matches."""
    src = _sources(tmp_path / "man", "notes.txt", "guide.md")
    dst = tmp_path / "out"
    runner = _Runner()

    result = build_manpages(
        source_dir=src,
        destination_dir=dst,
        options=BuildOptions(),
        runner=runner,
        reporter=RecordingReporter(),
    )

    assert result.pages == ()
    assert runner.commands == []
    assert not dst.exists()


def test_build_uses_injected_converters(tmp_path: Path) -> None:
    """Route each format through the converter bound to it."""
    src = _sources(tmp_path / "man", "a.1.md", "b.3.xml")
    runner = _Runner()

    build_manpages(
        source_dir=src,
        destination_dir=tmp_path / "out",
        options=BuildOptions(),
        converters={"markdown": _Converter("md-fake"), "docbook": _Converter("xml-fake")},
        runner=runner,
        reporter=RecordingReporter(),
    )

    assert [c.program for c in runner.commands] == ["md-fake", "xml-fake"]


def test_build_missing_source_dir_raises_scan_error(tmp_path: Path) -> None:
    """Surface an unreadable source directory as ScanError."""
    with pytest.raises(ScanError):
        build_manpages(
            source_dir=tmp_path / "missing",
            destination_dir=tmp_path / "out",
            options=BuildOptions(),
            runner=_Runner(),
            reporter=RecordingReporter(),
        )


def test_build_section_path_collision_raises(tmp_path: Path) -> None:
    """Surface a non-directory in place of a section directory."""
    src = _sources(tmp_path / "man", "guide.1.md")
    dst = tmp_path / "out"
    dst.mkdir()
    (dst / "1").write_text("not a directory")

    with pytest.raises(OutputDirectoryError):
        build_manpages(
            source_dir=src,
            destination_dir=dst,
            options=BuildOptions(),
            runner=_Runner(),
            reporter=RecordingReporter(),
        )


def test_build_rejects_blank_program(tmp_path: Path) -> None:
    """Validate options before touching the filesystem."""
    with pytest.raises(BuildConfigError, match="Invalid build parameters"):
        build_manpages(
            source_dir=tmp_path,
            destination_dir=tmp_path / "out",
            options=BuildOptions(markdown_program="  "),
            runner=_Runner(),
            reporter=RecordingReporter(),
        )


def test_plan_job_layout(tmp_path: Path) -> None:
    """Place output at destination/section/stem without extension."""
    job = plan_job(tmp_path / "guide.8.md", Path("/dst"))
    assert job is not None
    assert job.output_path == Path("/dst/8/guide")
    assert plan_job(tmp_path / "guide.txt", Path("/dst")) is None


def test_build_options_defaults_and_overrides() -> None:
    """Fill unset options with defaults while keeping explicit values."""
    assert build_options() == BuildOptions()
    custom = build_options(markdown_program="pandoc3", dependency_prefix="")
    assert custom.markdown_program == "pandoc3"
    assert custom.dependency_prefix == ""
    assert custom.docbook_stylesheet == DOCBOOK_MANPAGES_STYLESHEET


def test_build_rejects_multiline_dependency_prefix(tmp_path: Path) -> None:
    """Refuse a prefix that would split the dependency declaration."""
    with pytest.raises(BuildConfigError, match="single line"):
        build_manpages(
            source_dir=tmp_path,
            destination_dir=tmp_path / "out",
            options=build_options(dependency_prefix="a\nb"),
            runner=_Runner(),
            reporter=RecordingReporter(),
        )


def test_build_rejects_empty_stylesheet(tmp_path: Path) -> None:
    """Keep an explicit empty stylesheet so validation rejects it."""
    options = build_options(docbook_stylesheet="")
    assert options.docbook_stylesheet == ""
    with pytest.raises(BuildConfigError, match="docbook_stylesheet"):
        build_manpages(
            source_dir=tmp_path,
            destination_dir=tmp_path / "out",
            options=options,
            runner=_Runner(),
            reporter=RecordingReporter(),
        )


def test_build_logs_skipped_entries(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Record a debug message for each entry outside the naming convention."""
    src = _sources(tmp_path / "man", "guide.1.md", "readme.txt")
    caplog.set_level(logging.DEBUG, logger="manpage_builder.application.use_cases")

    build_manpages(
        source_dir=src,
        destination_dir=tmp_path / "out",
        options=BuildOptions(),
        runner=_Runner(),
        reporter=RecordingReporter(),
    )

    skipped = [
        r
        for r in caplog.records
        if r.levelno == logging.DEBUG and r.getMessage().startswith("skipping")
    ]
    assert [r.getMessage() for r in skipped] == [
        f"skipping {src / 'readme.txt'}: not a manual-page source"
    ]
