"""Abstract capability interfaces consumed by the uninstall core.

Each interface wraps one kind of OS interaction so that identity
resolution, discovery, planning and execution can be exercised with
fakes instead of real macOS tooling.
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any


class MetadataQuery(ABC):
    """Looks up Spotlight metadata for a bundle."""

    @abstractmethod
    def query_bundle_identifier(self, path: str) -> str | None:
        """Return the bundle identifier of the bundle at path.

        Args:
            path: Absolute path of the application bundle.

        Returns:
            Bundle identifier, or None if unavailable. Implementations
            must not raise for lookup failures.
        """


class ManifestReader(ABC):
    """Reads the embedded manifest (Info.plist) of a bundle."""

    @abstractmethod
    def read_manifest(self, bundle_path: str) -> dict[str, Any] | None:
        """Return the parsed manifest of the bundle.

        Args:
            bundle_path: Absolute path of the application bundle.

        Returns:
            Top-level manifest mapping, or None if it is missing or
            cannot be parsed.
        """


class PathProber(ABC):
    """Side-effect-free existence and size queries.

    Errors never propagate: an unreadable path is reported as missing
    and an unmeasurable one as size 0.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether path exists (dangling symlinks count as existing)."""

    @abstractmethod
    def size_of(self, path: str) -> int:
        """Return the on-disk size of path in bytes."""

    @abstractmethod
    def size_of_many(self, paths: list[str]) -> int:
        """Return the aggregate on-disk size of paths in bytes.

        This is one measurement over all paths, so it may differ from the
        sum of individual size_of results.
        """

    def physical_key(self, path: str) -> Hashable:
        """Return a key identifying the filesystem object at path.

        Two spellings of one object (e.g. differing only in case on a
        case-insensitive volume) share a key. Defaults to the path itself.
        """
        return path


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Result of an escalated batch deletion.

    Attributes:
        removed_count: Number of paths deleted by the batch.
        failed_paths: Paths that still could not be deleted.
        declined: True if the user refused (or could not be asked for)
            authorization. Nothing was attempted in that case.
        error: Diagnostic message from the escalation tool, if any.
    """

    removed_count: int = 0
    failed_paths: tuple[str, ...] = field(default_factory=tuple)
    declined: bool = False
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if every path in the batch is gone."""
        return not self.declined and not self.failed_paths


class PrivilegedExecutor(ABC):
    """Deletes paths with or without administrator privileges."""

    @abstractmethod
    def delete_unprivileged(self, path: str) -> bool:
        """Delete path with the current user's permissions.

        Args:
            path: Absolute path to delete.

        Returns:
            True if the path is gone afterwards, False on failure.
        """

    @abstractmethod
    def delete_batch_elevated(self, paths: list[str]) -> BatchResult:
        """Delete all paths under a single administrator authorization.

        Absent paths are skipped as already satisfied. A failure on one
        path does not stop the batch.

        Args:
            paths: Absolute paths to delete, in order.

        Returns:
            BatchResult describing the batch.
        """
