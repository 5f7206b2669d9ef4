"""Removal planning.

Puts the application bundle first, followed by the discovered
artifacts in discovery order, and measures the whole set once.
"""

import logging
import posixpath
from collections.abc import Iterable

from zapctl.capabilities.base import PathProber
from zapctl.models.application import Application
from zapctl.models.artifact import CandidateArtifact
from zapctl.models.plan import RemovalPlan

logger = logging.getLogger(__name__)


def build_plan(
    application: Application,
    artifacts: Iterable[CandidateArtifact],
    prober: PathProber,
) -> RemovalPlan:
    """Build the removal plan for an application.

    Artifacts that repeat an earlier path or name the bundle itself are
    dropped, so every path appears once. The total size is a single
    aggregate measurement over all paths and is not reconciled with the
    per-artifact sizes.

    Args:
        application: Application being removed.
        artifacts: Discovered artifacts, in discovery order.
        prober: Prober used for size measurement.

    Returns:
        Immutable RemovalPlan.
    """
    bundle_path = posixpath.normpath(application.install_path)

    seen: set[str] = {bundle_path}
    ordered: list[CandidateArtifact] = []
    for artifact in artifacts:
        if artifact.path in seen:
            logger.debug("Dropping repeated plan entry: %s", artifact.path)
            continue
        seen.add(artifact.path)
        ordered.append(artifact)

    all_paths = [bundle_path, *(a.path for a in ordered)]
    bundle_size = prober.size_of(bundle_path)
    total_size = prober.size_of_many(all_paths)

    logger.info(
        "Planned removal of %s and %d related path(s)",
        bundle_path,
        len(ordered),
    )
    return RemovalPlan(
        bundle_path=bundle_path,
        artifacts=tuple(ordered),
        total_size_bytes=max(total_size, 0),
        bundle_size_bytes=max(bundle_size, 0),
    )
