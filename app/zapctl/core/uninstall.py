"""Public uninstall operations.

The four steps of an uninstall are plain functions that take and return
values, so each can be called and tested on its own:

    identity = resolve_identity(app)
    artifacts = discover_artifacts(identity, config.excluded_paths)
    plan = build_plan(app, artifacts)
    outcome = execute(plan, config)

Every function takes its OS collaborators as keyword arguments,
defaulting to the macOS implementations. Uninstaller bundles one set of
collaborators for callers that run all steps together.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from zapctl.capabilities.base import ManifestReader, MetadataQuery, PathProber, PrivilegedExecutor
from zapctl.capabilities.metadata import MdlsMetadataQuery, PlistManifestReader
from zapctl.capabilities.privileged import OsascriptPrivilegedExecutor
from zapctl.capabilities.prober import FilesystemProber
from zapctl.core.config import UninstallConfig
from zapctl.core.report import UninstallReport
from zapctl.discovery import identity as _identity
from zapctl.discovery.discoverer import DEFAULT_PROBE_WORKERS, ArtifactDiscoverer
from zapctl.models.application import Application, Identity
from zapctl.models.artifact import CandidateArtifact
from zapctl.models.plan import RemovalOutcome, RemovalPlan
from zapctl.removal import planner as _planner
from zapctl.removal.executor import RemovalExecutor


def resolve_identity(
    application: Application,
    *,
    metadata: MetadataQuery | None = None,
    manifest_reader: ManifestReader | None = None,
) -> Identity:
    """Derive the identifiers of an application."""
    return _identity.resolve_identity(
        application,
        metadata or MdlsMetadataQuery(),
        manifest_reader or PlistManifestReader(),
    )


def discover_artifacts(
    identity: Identity,
    exclusion_prefixes: Iterable[str] = (),
    *,
    prober: PathProber | None = None,
    home: str | None = None,
    workers: int = DEFAULT_PROBE_WORKERS,
) -> list[CandidateArtifact]:
    """Find existing leftover artifacts, honoring exclusion prefixes.

    Raises:
        HomeDirectoryNotFoundError: If no home directory can be resolved.
    """
    discoverer = ArtifactDiscoverer(prober or FilesystemProber(), home=home, workers=workers)
    return discoverer.discover(identity, exclusion_prefixes)


def build_plan(
    application: Application,
    artifacts: Iterable[CandidateArtifact],
    *,
    prober: PathProber | None = None,
) -> RemovalPlan:
    """Build the removal plan: bundle first, then artifacts in discovery order."""
    return _planner.build_plan(application, artifacts, prober or FilesystemProber())


def execute(
    plan: RemovalPlan,
    config: UninstallConfig | None = None,
    *,
    prober: PathProber | None = None,
    privileged: PrivilegedExecutor | None = None,
) -> RemovalOutcome:
    """Delete everything in the plan and verify the bundle is gone."""
    executor = RemovalExecutor(
        prober or FilesystemProber(),
        privileged or OsascriptPrivilegedExecutor(),
    )
    return executor.execute(plan, config)


@dataclass
class Uninstaller:
    """One set of OS collaborators shared by all uninstall steps.

    Attributes:
        config: User preferences.
        metadata: Metadata query capability.
        manifest_reader: Manifest reader capability.
        prober: Filesystem prober capability.
        privileged: Privileged executor capability.
        home: Home directory override (resolved from the environment if None).
    """

    config: UninstallConfig = field(default_factory=UninstallConfig)
    metadata: MetadataQuery = field(default_factory=MdlsMetadataQuery)
    manifest_reader: ManifestReader = field(default_factory=PlistManifestReader)
    prober: PathProber = field(default_factory=FilesystemProber)
    privileged: PrivilegedExecutor = field(default_factory=OsascriptPrivilegedExecutor)
    home: str | None = None

    def plan(self, application: Application) -> RemovalPlan:
        """Resolve, discover and plan the removal of an application.

        Nothing is deleted.

        Raises:
            HomeDirectoryNotFoundError: If no home directory can be resolved.
        """
        identity = resolve_identity(
            application,
            metadata=self.metadata,
            manifest_reader=self.manifest_reader,
        )
        artifacts = discover_artifacts(
            identity,
            self.config.excluded_paths,
            prober=self.prober,
            home=self.home,
            workers=self.config.probe_workers,
        )
        return build_plan(application, artifacts, prober=self.prober)

    def execute(self, plan: RemovalPlan) -> RemovalOutcome:
        """Execute a previously built plan."""
        return execute(plan, self.config, prober=self.prober, privileged=self.privileged)

    def uninstall(self, application: Application) -> UninstallReport:
        """Plan, execute and report the removal of an application."""
        plan = self.plan(application)
        outcome = self.execute(plan)
        return UninstallReport.from_outcome(application, plan, outcome)
