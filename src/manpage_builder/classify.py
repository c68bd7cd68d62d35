"""Classify documentation sources by file name.

A convertible source is named ``<stem>.<section>.<ext>`` where ``<section>``
is a single ASCII digit and ``<ext>`` is ``md`` (Markdown) or ``xml``
(DocBook). Only the two trailing components are inspected, so the stem may
itself contain dots: ``tool.1.2.md`` is section ``2`` with stem ``tool.1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from manpage_builder.types import SourceFormat

_DIGITS = frozenset("0123456789")
_FORMATS: dict[str, SourceFormat] = {"md": "markdown", "xml": "docbook"}


@dataclass(frozen=True)
class Classification:
    """Section and format extracted from a source file name."""

    stem: str
    section: str
    format: SourceFormat


def classify(name: str) -> Classification | None:
    """Classify a file name.

    Parameters
    ----------
    name : str
        Bare file name, e.g. ``"guide.1.md"``.

    Returns
    -------
    Classification | None
        The extracted stem, section and format, or ``None`` when the name
        does not follow the ``<stem>.<digit>.<md|xml>`` convention.
    """
    parts = name.rsplit(".", 2)
    if len(parts) != 3:
        return None
    stem, section, extension = parts
    if not stem:
        return None
    if len(section) != 1 or section not in _DIGITS:
        return None
    source_format = _FORMATS.get(extension)
    if source_format is None:
        return None
    return Classification(stem=stem, section=section, format=source_format)


def classify_path(path: PurePath) -> Classification | None:
    """Classify ``path`` by its final component only."""
    return classify(path.name)
