"""Leftover artifact discovery.

Renders every path template for every identifier of an application,
deduplicates the results, removes excluded paths, and keeps only the
paths that exist. Existence and size probes run on a bounded thread
pool; results are collected in submission order so the output does not
depend on scheduling.
"""

import logging
import posixpath
from collections.abc import Callable, Hashable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from zapctl.capabilities.base import PathProber
from zapctl.core.paths import get_home_dir
from zapctl.discovery.exclusions import is_excluded, normalize_prefixes
from zapctl.discovery.templates import PATH_TEMPLATES
from zapctl.models.application import Identity
from zapctl.models.artifact import ArtifactKind, CandidateArtifact, PathTemplate

logger = logging.getLogger(__name__)

DEFAULT_PROBE_WORKERS = 8

_T = TypeVar("_T")


def is_safe_identifier(identifier: str) -> bool:
    """Check that an identifier can be used as a single path component.

    Args:
        identifier: Identifier to check.

    Returns:
        False for empty values, '.', '..', or values containing '/' or NUL.
    """
    if not identifier or identifier in (".", ".."):
        return False
    return "/" not in identifier and "\0" not in identifier


class ArtifactDiscoverer:
    """Finds the leftover files of an application.

    Args:
        prober: Filesystem prober used for existence and size queries.
        home: Home directory for user-scoped templates. Resolved from the
            environment at discovery time if None.
        workers: Maximum number of concurrent probes.
        templates: Path template table (defaults to PATH_TEMPLATES).
    """

    def __init__(
        self,
        prober: PathProber,
        *,
        home: str | None = None,
        workers: int = DEFAULT_PROBE_WORKERS,
        templates: tuple[PathTemplate, ...] = PATH_TEMPLATES,
    ) -> None:
        if workers < 1:
            msg = f"Worker count must be at least 1, got {workers}"
            raise ValueError(msg)
        self._prober = prober
        self._home = home
        self._workers = workers
        self._templates = templates

    def discover(
        self,
        identity: Identity,
        exclusion_prefixes: Iterable[str] = (),
    ) -> list[CandidateArtifact]:
        """Discover existing artifacts for an identity.

        Args:
            identity: Identity of the application.
            exclusion_prefixes: Path prefixes that must never be returned.

        Returns:
            Existing artifacts with unique paths, in identifier-then-template order.

        Raises:
            HomeDirectoryNotFoundError: If no home directory can be resolved.
        """
        home = self._home if self._home is not None else get_home_dir()
        excluded = normalize_prefixes(list(exclusion_prefixes), home)

        candidates = self._generate_candidates(identity, home)
        kept = {path: kind for path, kind in candidates.items() if not is_excluded(path, excluded)}
        skipped = len(candidates) - len(kept)
        if skipped:
            logger.debug("Excluded %d candidate path(s)", skipped)

        paths = list(kept)
        exists = self._probe(self._safe_exists, paths)
        found = [path for path, present in zip(paths, exists, strict=True) if present]

        protected = self._protected_keys(
            [*excluded, *(path for path in candidates if path not in kept)]
        )
        existing = self._unique_objects(
            path for path in found if not self._is_protected(path, protected)
        )
        sizes = self._probe(self._safe_size, existing)

        artifacts = [
            CandidateArtifact(path=path, exists=True, size_bytes=max(size, 0), kind=kept[path])
            for path, size in zip(existing, sizes, strict=True)
        ]
        for artifact in artifacts:
            logger.debug("Found artifact: %s", artifact.path)
        logger.info(
            "Checked %d candidate path(s) for %s, found %d",
            len(paths),
            identity.display_name,
            len(artifacts),
        )
        return artifacts

    def _generate_candidates(self, identity: Identity, home: str) -> dict[str, ArtifactKind]:
        """Render all templates for all identifiers, keeping first occurrences.

        Args:
            identity: Identity of the application.
            home: Home directory for user-scoped templates.

        Returns:
            Ordered mapping of normalized path to artifact kind.
        """
        candidates: dict[str, ArtifactKind] = {}
        for identifier in identity.identifiers():
            if not is_safe_identifier(identifier):
                logger.debug("Skipping identifier unusable as a path component: %r", identifier)
                continue

            for template in self._templates:
                try:
                    path = posixpath.normpath(template.render(identifier, home))
                except (TypeError, ValueError) as e:
                    logger.debug("Skipping template %s for %r: %s", template.pattern, identifier, e)
                    continue
                candidates.setdefault(path, template.kind)
        return candidates

    def _protected_keys(self, paths: Iterable[str]) -> set[Hashable]:
        """Physical keys of excluded prefixes and excluded candidates.

        On a case-insensitive volume an excluded directory can be reached
        through a differently cased spelling that passes the string check.
        Comparing physical keys catches those spellings.
        """
        return {self._safe_key(path) for path in paths}

    def _is_protected(self, path: str, protected: set[Hashable]) -> bool:
        """Check if a path or one of its ancestors is a protected object."""
        if not protected:
            return False

        current = path
        while True:
            if self._safe_key(current) in protected:
                logger.debug("Skipping excluded object under another spelling: %s", path)
                return True
            parent = posixpath.dirname(current)
            if parent == current:
                return False
            current = parent

    def _unique_objects(self, paths: Iterable[str]) -> list[str]:
        """Drop paths that name an object already seen under another spelling.

        Only case variants of one name count as duplicates. Hard links with
        different names are separate directory entries and are all kept.
        """
        seen: dict[Hashable, list[str]] = {}
        unique: list[str] = []
        for path in paths:
            key = self._safe_key(path)
            spellings = seen.setdefault(key, [])
            if any(path.casefold() == other.casefold() for other in spellings):
                logger.debug("Skipping duplicate spelling: %s", path)
                continue
            spellings.append(path)
            unique.append(path)
        return unique

    def _safe_key(self, path: str) -> Hashable:
        try:
            return self._prober.physical_key(path)
        except OSError as e:
            logger.debug("Cannot identify %s: %s", path, e)
            return path

    def _safe_exists(self, path: str) -> bool:
        try:
            return self._prober.exists(path)
        except OSError as e:
            logger.debug("Cannot probe %s, treating as absent: %s", path, e)
            return False

    def _safe_size(self, path: str) -> int:
        try:
            return self._prober.size_of(path)
        except OSError as e:
            logger.debug("Cannot measure %s: %s", path, e)
            return 0

    def _probe(self, func: Callable[[str], _T], paths: list[str]) -> list[_T]:
        """Apply a probe function to paths concurrently, preserving order."""
        if not paths:
            return []
        with ThreadPoolExecutor(max_workers=min(self._workers, len(paths))) as executor:
            return list(executor.map(func, paths))
