"""Build manual pages from Markdown and DocBook sources."""

from __future__ import annotations

from typing import Any

from manpage_builder.application.results import BuildResult
from manpage_builder.classify import Classification, classify
from manpage_builder.errors import ManpageBuildError
from manpage_builder.types import StrPath

__version__ = "0.1.0"


def build(
    source_dir: StrPath,
    destination_dir: StrPath,
    **kwargs: Any,
) -> BuildResult:
    """Convert every ``<stem>.<section>.<md|xml>`` file of ``source_dir``.

    Parameters
    ----------
    source_dir : str | PathLike
        Directory holding the documentation sources. Not searched recursively.
    destination_dir : str | PathLike
        Output root. Pages are written to ``<destination_dir>/<section>/<stem>``.
    **kwargs
        Converter program overrides, forwarded to ``manpage_builder.api.build``.

    Returns
    -------
    BuildResult
        Jobs completed, in processing order.

    Raises
    ------
    ManpageBuildError
        On the first scan, directory or converter failure.
    """
    from .api import build as _impl

    return _impl(source_dir, destination_dir, **kwargs)


def build_from_env(
    source_dir: StrPath,
    *,
    env_var: str = "OUT_DIR",
    subdir: str = "man",
    **kwargs: Any,
) -> BuildResult:
    """Build into ``$OUT_DIR/man`` (or the given variable and subdirectory).

    Raises
    ------
    BuildConfigError
        If the environment variable is unset or empty.
    """
    from .api import build_from_env as _impl

    return _impl(source_dir, env_var=env_var, subdir=subdir, **kwargs)


__all__ = [
    "BuildResult",
    "Classification",
    "ManpageBuildError",
    "build",
    "build_from_env",
    "classify",
]
