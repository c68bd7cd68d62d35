"""Typed option objects shared across build use-cases."""

from __future__ import annotations

from dataclasses import dataclass

DOCBOOK_MANPAGES_STYLESHEET = (
    "http://docbook.sourceforge.net/release/xsl/current/manpages/docbook.xsl"
)
CARGO_RERUN_PREFIX = "cargo:rerun-if-changed="


@dataclass(frozen=True)
class BuildOptions:
    """Converter programs and reporting conventions for a build."""

    markdown_program: str = "pandoc"
    docbook_program: str = "xsltproc"
    docbook_stylesheet: str = DOCBOOK_MANPAGES_STYLESHEET
    dependency_prefix: str = CARGO_RERUN_PREFIX
