"""Deletion with optional administrator escalation.

Unprivileged deletes use shutil/pathlib directly. Escalated deletes
write a short-lived shell script and run it once through
``osascript ... with administrator privileges`` so the user sees a
single authorization prompt for the whole batch.
"""

import logging
import os
import shlex
import shutil
import tempfile
from pathlib import Path

from zapctl.capabilities.base import BatchResult, PrivilegedExecutor
from zapctl.utils.shell import run_command

logger = logging.getLogger(__name__)

# AppleScript error number for "User canceled."
_USER_CANCELED = "-128"

_SCRIPT_HEADER = """#!/bin/bash
remove_path() {
  if [ -e "$2" ] || [ -L "$2" ]; then
    if rm -rf -- "$2"; then
      echo "removed $1"
    else
      echo "failed $1"
    fi
  else
    echo "absent $1"
  fi
}
"""


def build_removal_script(paths: list[str]) -> str:
    """Build the batch removal script for paths.

    Each path is reported back by its index (``removed N``, ``failed N``
    or ``absent N``) so arbitrary path characters never reach the parser.
    The script always exits 0; per-path status is in its output.

    Args:
        paths: Absolute paths to delete, in order.

    Returns:
        Script source.
    """
    lines = [_SCRIPT_HEADER]
    for index, path in enumerate(paths):
        lines.append(f"remove_path {index} {shlex.quote(path)}")
    lines.append("exit 0\n")
    return "\n".join(lines)


def parse_script_output(output: str, paths: list[str]) -> tuple[int, tuple[str, ...]]:
    """Parse the script's per-path report.

    Paths that produced no report line are counted as failed.

    Args:
        output: Captured stdout of the script.
        paths: Paths passed to build_removal_script, in the same order.

    Returns:
        Tuple of (removed count, failed paths).
    """
    status: dict[int, str] = {}
    for raw in output.replace("\r", "\n").split("\n"):
        parts = raw.strip().split()
        if len(parts) != 2 or not parts[1].isdigit():
            continue
        index = int(parts[1])
        if 0 <= index < len(paths):
            status[index] = parts[0]

    removed = sum(1 for value in status.values() if value == "removed")
    failed = tuple(
        path for index, path in enumerate(paths) if status.get(index) not in ("removed", "absent")
    )
    return removed, failed


def _applescript_string(value: str) -> str:
    """Quote a value as an AppleScript string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class OsascriptPrivilegedExecutor(PrivilegedExecutor):
    """Deletes paths, escalating through the macOS authorization dialog."""

    def delete_unprivileged(self, path: str) -> bool:
        """Delete a single path with the current user's permissions.

        Directories (but not symlinks to directories) are removed with
        shutil.rmtree; files and symlinks with Path.unlink. A path that is
        already gone counts as deleted.
        """
        target = Path(path)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                logger.debug("Already absent: %s", path)
            return True
        except OSError as e:
            logger.info("Unprivileged delete failed for %s: %s", path, e)
            return False

    def delete_batch_elevated(self, paths: list[str]) -> BatchResult:
        if not paths:
            return BatchResult()

        fd, script_path = tempfile.mkstemp(prefix="zapctl-uninstall-", suffix=".sh")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(build_removal_script(paths))
            os.chmod(script_path, 0o700)

            command = (
                "do shell script "
                f"(\"/bin/bash \" & quoted form of {_applescript_string(script_path)})"
                " with administrator privileges without altering line endings"
            )
            logger.debug("Requesting authorization to remove %d path(s)", len(paths))
            try:
                # No timeout: the authorization dialog waits for the user.
                result = run_command(["osascript", "-e", command], timeout=None)
            except (FileNotFoundError, OSError) as e:
                logger.warning("Privilege escalation unavailable: %s", e)
                return BatchResult(declined=True, error=str(e))

            if not result.success:
                stderr = result.stderr.strip()
                if _USER_CANCELED in stderr or "User canceled" in stderr:
                    logger.info("Authorization declined by user")
                    return BatchResult(declined=True, error=stderr or "User canceled")
                logger.warning("Escalated removal failed: %s", stderr)
                removed, failed = parse_script_output(result.stdout, paths)
                return BatchResult(
                    removed_count=removed,
                    failed_paths=failed,
                    error=stderr or "osascript failed",
                )

            removed, failed = parse_script_output(result.stdout, paths)
            return BatchResult(removed_count=removed, failed_paths=failed)
        finally:
            Path(script_path).unlink(missing_ok=True)
