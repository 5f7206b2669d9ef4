"""Filesystem prober for existence and size queries.

Sizes come from ``du`` so that directory sizes are block-aligned the
same way Finder and the terminal report them. When ``du`` is not
available the prober falls back to summing file sizes.
"""

import logging
import os
import subprocess
from collections.abc import Hashable
from pathlib import Path

from zapctl.capabilities.base import PathProber
from zapctl.utils.shell import run_command

logger = logging.getLogger(__name__)

_KIB = 1024


class FilesystemProber(PathProber):
    """Probes the local filesystem.

    Args:
        timeout: Maximum seconds for a single ``du`` invocation.
    """

    def __init__(self, timeout: float | None = 120.0) -> None:
        self._timeout = timeout

    def exists(self, path: str) -> bool:
        try:
            return os.path.lexists(path)
        except (OSError, ValueError):
            return False

    def physical_key(self, path: str) -> Hashable:
        try:
            stat = os.lstat(path)
        except OSError:
            return path
        return (stat.st_dev, stat.st_ino)

    def size_of(self, path: str) -> int:
        return self._du([path], total=False)

    def size_of_many(self, paths: list[str]) -> int:
        if not paths:
            return 0
        return self._du(paths, total=True)

    def _du(self, paths: list[str], *, total: bool) -> int:
        """Measure paths with ``du -sk`` (``-c`` for an aggregate total).

        du exits non-zero when it cannot read part of a tree but still
        prints what it measured, so the output is used regardless.

        Args:
            paths: Paths to measure.
            total: If True, read the grand total line instead of the first entry.

        Returns:
            Size in bytes, 0 if nothing could be measured.
        """
        args = ["du", "-sck" if total else "-sk", *paths]
        try:
            result = run_command(args, timeout=self._timeout)
        except FileNotFoundError:
            logger.debug("du not available, summing file sizes instead")
            return sum(self._walk_size(Path(p)) for p in paths)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning("Cannot measure %s: %s", ", ".join(paths), e)
            return 0

        if not result.success:
            logger.debug("du reported errors: %s", result.stderr.strip())

        lines = [line for line in result.stdout.strip().split("\n") if line.strip()]
        if not lines:
            return 0

        line = lines[-1] if total else lines[0]
        try:
            return int(line.split("\t", 1)[0]) * _KIB
        except ValueError:
            logger.warning("Unexpected du output: %s", line)
            return 0

    @staticmethod
    def _walk_size(path: Path) -> int:
        """Sum file sizes below path, ignoring unreadable entries."""
        try:
            if path.is_symlink() or path.is_file():
                return path.lstat().st_size

            if path.is_dir():
                total = 0
                for child in path.rglob("*"):
                    try:
                        if child.is_file() and not child.is_symlink():
                            total += child.stat().st_size
                    except OSError:
                        continue
                return total
        except OSError:
            return 0

        return 0
