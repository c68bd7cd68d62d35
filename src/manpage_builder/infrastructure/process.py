"""External process execution."""

from __future__ import annotations

import logging
import subprocess

from manpage_builder.application.results import CommandSpec
from manpage_builder.errors import CommandFailedError

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Run commands as child processes sharing the caller's stdio."""

    def run(self, command: CommandSpec) -> None:
        """Run ``command`` and wait for it to exit.

        Parameters
        ----------
        command : CommandSpec
            Program and arguments to execute. No shell is involved.

        Raises
        ------
        CommandFailedError
            If the program exits with a non-zero status or cannot be started.
        """
        try:
            completed = subprocess.run(command.argv, check=False)
        except OSError as exc:
            raise CommandFailedError(f"Command failed: {command}") from exc
        if completed.returncode != 0:
            logger.debug("%s exited with status %d", command.program, completed.returncode)
            raise CommandFailedError(f"Command failed: {command}")
