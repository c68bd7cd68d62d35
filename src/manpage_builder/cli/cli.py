#!/usr/bin/env python3
"""
manpage_builder.cli.cli

Typer-based CLI for building manual pages from Markdown and DocBook sources.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Build pages from ``man/`` into ``$OUT_DIR/man``:

    build-manpages build man

Check which converter programs are available:

    build-manpages doctor
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from manpage_builder.errors import ManpageBuildError

app = typer.Typer(
    name="build-manpages",
    help="Build manual pages from Markdown (pandoc) and DocBook (xsltproc) sources.",
    no_args_is_help=True,
)

CONVERTER_PROGRAMS = ("pandoc", "xsltproc")


def _print_build_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly build error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the build.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show full tracebacks on error and debug logs."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("build")
def build_cmd(
    ctx: typer.Context,
    source_dir: Path = typer.Argument(
        ..., help="Directory holding <name>.<section>.md / .xml sources."
    ),
    destination_dir: Path | None = typer.Argument(
        None, help="Output root. Defaults to $OUT_DIR/man."
    ),
    pandoc: str = typer.Option(
        "pandoc", "--pandoc", help="Markdown converter program."
    ),
    xsltproc: str = typer.Option(
        "xsltproc", "--xsltproc", help="DocBook converter program."
    ),
    stylesheet: str | None = typer.Option(
        None, "--stylesheet", help="DocBook manpages stylesheet URL or path."
    ),
    dependency_prefix: str | None = typer.Option(
        None,
        "--dependency-prefix",
        help="Prefix of build-dependency lines (default: cargo:rerun-if-changed=).",
    ),
) -> None:
    """Convert every documentation source of SOURCE_DIR into manual pages.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    source_dir : Path
        Directory scanned (non-recursively) for sources.
    destination_dir : Path | None
        Output root; ``$OUT_DIR/man`` when omitted.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from manpage_builder.api import build, destination_from_env

        destination = destination_dir or destination_from_env()
        result = build(
            source_dir,
            destination,
            markdown_program=pandoc,
            docbook_program=xsltproc,
            docbook_stylesheet=stylesheet,
            dependency_prefix=dependency_prefix,
        )
        typer.echo(f"✓ Built {len(result.pages)} page(s) in {result.destination_dir}")
    except ManpageBuildError as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))


@app.command("classify")
def classify_cmd(
    names: list[str] = typer.Argument(..., help="File names to classify."),
) -> None:
    """Show how file names would be classified, without converting anything."""
    from manpage_builder.classify import classify_path

    for name in names:
        found = classify_path(Path(name))
        if found is None:
            typer.echo(f"{name}: skipped")
        else:
            typer.echo(
                f"{name}: section={found.section} format={found.format} stem={found.stem}"
            )


@app.command("doctor")
def doctor_cmd() -> None:
    """Print converter availability and installed library versions."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("manpage-builder", "pydantic", "typer"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    for program in CONVERTER_PROGRAMS:
        location = shutil.which(program)
        typer.echo(f"{program}: {location or '<not found>'}")


if __name__ == "__main__":
    app()
