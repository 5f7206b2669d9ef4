"""Removal execution with privilege escalation and verification.

The executor runs a small state machine:

    PENDING -> UNPRIVILEGED_ATTEMPT -> (SUCCESS | ESCALATED_ATTEMPT)
            -> VERIFYING -> (COMPLETED | FAILED)

The unprivileged pass stops at the first failure and the whole plan is
then retried under one administrator authorization. Only the bundle is
re-probed during verification: the application counts as uninstalled
exactly when its bundle is gone. Deletions are permanent.
"""

import logging
import time
from collections.abc import Callable

from zapctl.capabilities.base import PathProber, PrivilegedExecutor
from zapctl.core.config import UninstallConfig
from zapctl.models.plan import FailureReason, RemovalOutcome, RemovalPlan, RemovalState

logger = logging.getLogger(__name__)


class RemovalExecutor:
    """Carries out a RemovalPlan.

    Callers must not run two executions for the same application at
    the same time.

    Args:
        prober: Prober used to skip absent paths and to verify the bundle.
        privileged: Executor used for unprivileged and escalated deletes.
        sleep: Function used for the settle delay before verification.
    """

    def __init__(
        self,
        prober: PathProber,
        privileged: PrivilegedExecutor,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._prober = prober
        self._privileged = privileged
        self._sleep = sleep
        self._state = RemovalState.PENDING

    @property
    def state(self) -> RemovalState:
        """Current state of the most recent execution."""
        return self._state

    def execute(self, plan: RemovalPlan, config: UninstallConfig | None = None) -> RemovalOutcome:
        """Delete every path in the plan and verify the bundle is gone.

        Args:
            plan: Plan to execute.
            config: Settings; only always_elevate and verify_delay_seconds
                are used. Defaults to UninstallConfig().

        Returns:
            RemovalOutcome in state COMPLETED or FAILED.
        """
        config = config or UninstallConfig()
        self._state = RemovalState.PENDING

        removed = 0
        failed_paths: tuple[str, ...] = ()
        declined = False
        used_elevated = False

        if config.always_elevate:
            logger.debug("Administrator privileges forced by configuration")
            self._transition(RemovalState.ESCALATED_ATTEMPT)
        else:
            self._transition(RemovalState.UNPRIVILEGED_ATTEMPT)
            removed, ok = self._delete_unprivileged(plan)
            self._transition(RemovalState.SUCCESS if ok else RemovalState.ESCALATED_ATTEMPT)

        if self._state == RemovalState.ESCALATED_ATTEMPT:
            used_elevated = True
            batch = self._privileged.delete_batch_elevated(plan.paths)
            if batch.declined:
                declined = True
                logger.warning("Administrator authorization not granted: %s", batch.error)
            else:
                removed += batch.removed_count
                failed_paths = batch.failed_paths
                if failed_paths:
                    logger.warning("%d path(s) could not be removed", len(failed_paths))

        self._transition(RemovalState.VERIFYING)
        if config.verify_delay_seconds > 0:
            self._sleep(config.verify_delay_seconds)
        bundle_present = self._prober.exists(plan.bundle_path)

        reason: FailureReason | None = None
        if declined:
            reason = FailureReason.ESCALATION_DECLINED
        elif bundle_present:
            reason = FailureReason.BUNDLE_NOT_REMOVED
        elif failed_paths:
            reason = FailureReason.RESIDUAL_FAILURES

        if reason is None:
            self._transition(RemovalState.COMPLETED)
        else:
            logger.warning("Removal of %s failed: %s", plan.bundle_path, reason.value)
            self._transition(RemovalState.FAILED)

        return RemovalOutcome(
            removed_count=removed,
            failed_paths=failed_paths,
            used_elevated_privileges=used_elevated,
            bundle_still_present=bundle_present,
            state=self._state,
            failure_reason=reason,
        )

    def _delete_unprivileged(self, plan: RemovalPlan) -> tuple[int, bool]:
        """Delete plan paths in order, stopping at the first failure.

        Returns:
            Tuple of (paths removed, whether every delete succeeded).
        """
        removed = 0
        for path in plan.paths:
            if not self._prober.exists(path):
                logger.debug("Already absent: %s", path)
                continue
            if not self._privileged.delete_unprivileged(path):
                logger.info("Cannot remove %s without administrator privileges", path)
                return removed, False
            removed += 1
        return removed, True

    def _transition(self, state: RemovalState) -> None:
        logger.debug("Removal state: %s -> %s", self._state.value, state.value)
        self._state = state
