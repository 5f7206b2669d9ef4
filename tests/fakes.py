"""In-memory fakes for the OS capability interfaces.

The fakes share one FakeFilesystem so that deletions made through
FakePrivilegedExecutor are observed by later existence probes.
"""

from typing import Any

from zapctl.capabilities.base import (
    BatchResult,
    ManifestReader,
    MetadataQuery,
    PathProber,
    PrivilegedExecutor,
)

HOME = "/Users/tester"


class FakeFilesystem(PathProber):
    """In-memory filesystem: a mapping of existing paths to sizes.

    Paths in ``sticky`` keep existing after deletion (e.g. a stale mount).
    ``aggregate_overhead`` is added to size_of_many to mimic block alignment.
    """

    def __init__(
        self,
        files: dict[str, int] | None = None,
        *,
        sticky: set[str] | None = None,
        aggregate_overhead: int = 0,
    ) -> None:
        self.files: dict[str, int] = dict(files or {})
        self.sticky = set(sticky or ())
        self.aggregate_overhead = aggregate_overhead
        self.exists_calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        return path in self.files

    def size_of(self, path: str) -> int:
        return self.files.get(path, 0)

    def size_of_many(self, paths: list[str]) -> int:
        return sum(self.files.get(p, 0) for p in paths) + self.aggregate_overhead

    def remove(self, path: str) -> None:
        if path not in self.sticky:
            self.files.pop(path, None)


class FakeMetadata(MetadataQuery):
    """Returns a fixed bundle identifier (or None)."""

    def __init__(self, bundle_id: str | None = None) -> None:
        self.bundle_id = bundle_id
        self.queried: list[str] = []

    def query_bundle_identifier(self, path: str) -> str | None:
        self.queried.append(path)
        return self.bundle_id


class FakeManifestReader(ManifestReader):
    """Returns a fixed manifest (or None)."""

    def __init__(self, manifest: dict[str, Any] | None = None) -> None:
        self.manifest = manifest

    def read_manifest(self, bundle_path: str) -> dict[str, Any] | None:
        return self.manifest


class FakePrivilegedExecutor(PrivilegedExecutor):
    """Deletes from a FakeFilesystem, simulating permission failures.

    Args:
        fs: Filesystem to delete from.
        protected: Paths the unprivileged delete cannot remove.
        elevated_failures: Paths even the escalated batch cannot remove.
        decline: If True, the user refuses the authorization prompt.
    """

    def __init__(
        self,
        fs: FakeFilesystem,
        *,
        protected: set[str] | None = None,
        elevated_failures: set[str] | None = None,
        decline: bool = False,
    ) -> None:
        self.fs = fs
        self.protected = set(protected or ())
        self.elevated_failures = set(elevated_failures or ())
        self.decline = decline
        self.unprivileged_calls: list[str] = []
        self.batches: list[list[str]] = []

    def delete_unprivileged(self, path: str) -> bool:
        self.unprivileged_calls.append(path)
        if path in self.protected:
            return False
        self.fs.remove(path)
        return True

    def delete_batch_elevated(self, paths: list[str]) -> BatchResult:
        self.batches.append(list(paths))
        if self.decline:
            return BatchResult(declined=True, error="User canceled. (-128)")

        removed = 0
        failed: list[str] = []
        for path in paths:
            if path not in self.fs.files:
                continue
            if path in self.elevated_failures:
                failed.append(path)
                continue
            self.fs.remove(path)
            removed += 1
        return BatchResult(removed_count=removed, failed_paths=tuple(failed))
