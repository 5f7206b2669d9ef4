"""Reporting of uninstall results.

Translates a RemovalOutcome into a small status/reason vocabulary with
a human-readable message. Rendering is left to the caller.
"""

from dataclasses import dataclass
from enum import Enum

from zapctl.models.application import Application
from zapctl.models.plan import FailureReason, RemovalOutcome, RemovalPlan, RemovalState


class UninstallStatus(str, Enum):
    """Final status of an uninstall request."""

    COMPLETED = "completed"
    FAILED = "failed"


_REASON_MESSAGES: dict[FailureReason, str] = {
    FailureReason.ESCALATION_DECLINED: "Administrator authorization was declined or unavailable",
    FailureReason.BUNDLE_NOT_REMOVED: "Application was not removed successfully",
    FailureReason.RESIDUAL_FAILURES: "Some related files could not be removed",
}


@dataclass(frozen=True, slots=True)
class UninstallReport:
    """Caller-facing summary of one uninstall request.

    Attributes:
        name: Application display name.
        bundle_path: Path of the application bundle.
        status: COMPLETED or FAILED.
        reason: Failure reason, None when completed.
        message: One-line human-readable summary.
        removed_count: Number of paths removed.
        planned_count: Number of paths in the plan (bundle included).
        failed_paths: Paths that could not be removed.
        used_elevated_privileges: Whether administrator privileges were requested.
        total_size_bytes: Aggregate size of the plan.
    """

    name: str
    bundle_path: str
    status: UninstallStatus
    reason: FailureReason | None
    message: str
    removed_count: int
    planned_count: int
    failed_paths: tuple[str, ...]
    used_elevated_privileges: bool
    total_size_bytes: int

    @property
    def success(self) -> bool:
        """Check if the application was uninstalled."""
        return self.status == UninstallStatus.COMPLETED

    @classmethod
    def from_outcome(
        cls,
        application: Application,
        plan: RemovalPlan,
        outcome: RemovalOutcome,
    ) -> "UninstallReport":
        """Build a report from a removal outcome.

        Args:
            application: Application that was removed.
            plan: Plan that was executed.
            outcome: Outcome of the execution.

        Returns:
            UninstallReport for the caller.
        """
        if outcome.state == RemovalState.COMPLETED:
            status = UninstallStatus.COMPLETED
            message = (
                f"Successfully uninstalled {application.name}: "
                f"removed {outcome.removed_count} files"
            )
        else:
            status = UninstallStatus.FAILED
            reason = outcome.failure_reason or FailureReason.BUNDLE_NOT_REMOVED
            message = f"Failed to uninstall {application.name}: {_REASON_MESSAGES[reason]}"
            if outcome.failed_paths:
                message += f" ({len(outcome.failed_paths)} path(s) remain)"

        return cls(
            name=application.name,
            bundle_path=plan.bundle_path,
            status=status,
            reason=outcome.failure_reason,
            message=message,
            removed_count=outcome.removed_count,
            planned_count=len(plan.paths),
            failed_paths=outcome.failed_paths,
            used_elevated_privileges=outcome.used_elevated_privileges,
            total_size_bytes=plan.total_size_bytes,
        )

    def to_dict(self) -> dict[str, object]:
        """Convert the report to a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "bundle_path": self.bundle_path,
            "status": self.status.value,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "removed_count": self.removed_count,
            "planned_count": self.planned_count,
            "failed_paths": list(self.failed_paths),
            "used_elevated_privileges": self.used_elevated_privileges,
            "total_size_bytes": self.total_size_bytes,
        }
