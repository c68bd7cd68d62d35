"""Shared type aliases for the manual-page build pipeline."""

from __future__ import annotations

from os import PathLike
from typing import Literal

type SourceFormat = Literal["markdown", "docbook"]
type StrPath = str | PathLike[str]
