"""Data models for zapctl.

This module exports the core data structures used throughout the application.
"""

from zapctl.models.application import Application, Identity
from zapctl.models.artifact import ArtifactKind, ArtifactScope, CandidateArtifact, PathTemplate
from zapctl.models.plan import FailureReason, RemovalOutcome, RemovalPlan, RemovalState

__all__ = [
    "Application",
    "ArtifactKind",
    "ArtifactScope",
    "CandidateArtifact",
    "FailureReason",
    "Identity",
    "PathTemplate",
    "RemovalOutcome",
    "RemovalPlan",
    "RemovalState",
]
