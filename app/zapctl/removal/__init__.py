"""Removal planning and execution."""

from zapctl.removal.executor import RemovalExecutor
from zapctl.removal.planner import build_plan

__all__ = ["RemovalExecutor", "build_plan"]
