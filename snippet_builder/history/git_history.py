"""Git-backed history provider.

Runs ``git log`` in the snippet directory through asyncio subprocesses, so
the three queries for one file can run concurrently.
"""

import asyncio
import shutil
from datetime import datetime, timezone
from pathlib import Path

import structlog

from snippet_builder.utils.exceptions import DegradedEnrichmentError

logger = structlog.get_logger(__name__)


def _parse_timestamp(output: str) -> datetime | None:
    """Parse the first unix timestamp line of git output."""
    lines = output.strip().splitlines()
    if not lines:
        return None
    try:
        return datetime.fromtimestamp(int(lines[0].strip()), tz=timezone.utc)
    except ValueError as e:
        raise DegradedEnrichmentError(f"Unexpected git timestamp: {lines[0]!r}") from e


class GitHistoryProvider:
    """History queries answered by the git CLI."""

    def __init__(self, git_binary: str = "git") -> None:
        """Initialize provider.

        Args:
            git_binary: Name or path of the git executable
        """
        self.git_binary = git_binary

    def is_available(self) -> bool:
        return shutil.which(self.git_binary) is not None

    async def _git_log(self, directory: Path, args: list[str]) -> str:
        """Run ``git log`` with the given arguments in a directory.

        Raises:
            DegradedEnrichmentError: If git cannot be started or exits non-zero
        """
        try:
            process = await asyncio.create_subprocess_exec(
                self.git_binary,
                "log",
                *args,
                cwd=str(directory),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise DegradedEnrichmentError(f"Cannot run {self.git_binary}: {e}") from e

        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            # Timed out by the enricher; do not leave git running
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise DegradedEnrichmentError(
                f"git log exited with {process.returncode}: {message}"
            )

        return stdout.decode("utf-8", errors="replace")

    async def first_seen(self, directory: Path, filename: str) -> datetime | None:
        output = await self._git_log(
            directory, ["--diff-filter=A", "--pretty=format:%at", "--", filename]
        )
        return _parse_timestamp(output)

    async def last_updated(self, directory: Path, filename: str) -> datetime | None:
        output = await self._git_log(directory, ["-n", "1", "--pretty=format:%at", "--", filename])
        return _parse_timestamp(output)

    async def update_count(self, directory: Path, filename: str) -> int:
        output = await self._git_log(directory, ["--pretty=format:%H", "--", filename])
        return sum(1 for line in output.splitlines() if line.strip())
