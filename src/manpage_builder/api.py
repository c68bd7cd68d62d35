"""Public build API (delegates to application use-cases)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from manpage_builder.application import build_manpages, build_options
from manpage_builder.application.ports import BuildReporter, CommandRunner
from manpage_builder.application.results import BuildResult
from manpage_builder.errors import BuildConfigError
from manpage_builder.types import StrPath


def build(
    source_dir: StrPath,
    destination_dir: StrPath,
    markdown_program: str = "pandoc",
    docbook_program: str = "xsltproc",
    docbook_stylesheet: Optional[str] = None,
    dependency_prefix: Optional[str] = None,
    runner: Optional[CommandRunner] = None,
    reporter: Optional[BuildReporter] = None,
) -> BuildResult:
    """Build manual pages from ``source_dir`` into ``destination_dir``."""
    options = build_options(
        markdown_program=markdown_program,
        docbook_program=docbook_program,
        docbook_stylesheet=docbook_stylesheet,
        dependency_prefix=dependency_prefix,
    )
    return build_manpages(
        source_dir=Path(source_dir),
        destination_dir=Path(destination_dir),
        options=options,
        runner=runner,
        reporter=reporter,
    )


def destination_from_env(
    env_var: str = "OUT_DIR",
    subdir: str = "man",
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Resolve ``$<env_var>/<subdir>``.

    Raises
    ------
    BuildConfigError
        If the variable is unset or empty.
    """
    environ = os.environ if environ is None else environ
    root = environ.get(env_var, "")
    if not root:
        raise BuildConfigError(f"Environment variable {env_var} is not set.")
    return Path(root) / subdir


def build_from_env(
    source_dir: StrPath,
    *,
    env_var: str = "OUT_DIR",
    subdir: str = "man",
    **kwargs: Any,
) -> BuildResult:
    """Build manual pages into ``$<env_var>/<subdir>``."""
    return build(source_dir, destination_from_env(env_var, subdir), **kwargs)
