"""Error taxonomy for manual-page builds."""

from __future__ import annotations


class ManpageBuildError(Exception):
    """Base class for every failure that aborts a build."""

    exit_code: int = 1


class BuildConfigError(ManpageBuildError):
    """Raised when build inputs or environment are invalid."""

    exit_code = 2


class ScanError(ManpageBuildError):
    """Raised when the source directory cannot be listed."""


class OutputDirectoryError(ManpageBuildError):
    """Raised when a section directory cannot be created."""


class CommandFailedError(ManpageBuildError):
    """Raised when a converter exits unsuccessfully or cannot be launched."""
