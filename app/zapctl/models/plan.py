"""Removal plan and outcome models."""

from dataclasses import dataclass, field
from enum import Enum

from zapctl.models.artifact import CandidateArtifact


class RemovalState(str, Enum):
    """States of the removal state machine.

    Attributes:
        PENDING: Nothing attempted yet.
        UNPRIVILEGED_ATTEMPT: Deleting with the caller's own permissions.
        SUCCESS: Every unprivileged delete succeeded.
        ESCALATED_ATTEMPT: Deleting the whole plan under administrator rights.
        VERIFYING: Re-probing the bundle path.
        COMPLETED: Bundle confirmed absent.
        FAILED: Bundle still present, residual failures, or escalation declined.
    """

    PENDING = "pending"
    UNPRIVILEGED_ATTEMPT = "unprivileged_attempt"
    SUCCESS = "success"
    ESCALATED_ATTEMPT = "escalated_attempt"
    VERIFYING = "verifying"
    COMPLETED = "completed"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Why a removal ended in the FAILED state."""

    BUNDLE_NOT_REMOVED = "bundle_not_removed"
    ESCALATION_DECLINED = "escalation_declined"
    RESIDUAL_FAILURES = "residual_failures"


@dataclass(frozen=True, slots=True)
class RemovalPlan:
    """Everything that will be deleted for one application.

    The bundle is always removed first and verified last. Sizes are
    computed once when the plan is built.

    Attributes:
        bundle_path: Path of the application bundle.
        artifacts: Leftover artifacts in discovery order.
        total_size_bytes: Aggregate size of bundle and artifacts as reported
            by a single size query. Not necessarily the sum of the
            individual artifact sizes.
        bundle_size_bytes: Size of the bundle alone.
    """

    bundle_path: str
    artifacts: tuple[CandidateArtifact, ...] = ()
    total_size_bytes: int = 0
    bundle_size_bytes: int = 0

    def __post_init__(self) -> None:
        """Validate plan uniqueness after initialization."""
        if not self.bundle_path:
            msg = "Bundle path cannot be empty"
            raise ValueError(msg)
        paths = [a.path for a in self.artifacts]
        if len(set(paths)) != len(paths):
            msg = "Artifact paths must be unique within a plan"
            raise ValueError(msg)
        if self.bundle_path in paths:
            msg = f"Bundle path listed as an artifact: {self.bundle_path}"
            raise ValueError(msg)

    @property
    def paths(self) -> list[str]:
        """All paths to delete, bundle first."""
        return [self.bundle_path, *(a.path for a in self.artifacts)]


@dataclass(frozen=True, slots=True)
class RemovalOutcome:
    """Result of executing a removal plan.

    Attributes:
        removed_count: Number of paths actually deleted.
        failed_paths: Paths that could not be deleted.
        used_elevated_privileges: Whether the escalated attempt was entered.
        bundle_still_present: Whether the bundle existed at verification time.
        state: Terminal state (COMPLETED or FAILED).
        failure_reason: Why the removal failed, None when completed.
    """

    removed_count: int
    failed_paths: tuple[str, ...] = field(default_factory=tuple)
    used_elevated_privileges: bool = False
    bundle_still_present: bool = False
    state: RemovalState = RemovalState.COMPLETED
    failure_reason: FailureReason | None = None

    @property
    def success(self) -> bool:
        """Check if the application was removed."""
        return self.state == RemovalState.COMPLETED
