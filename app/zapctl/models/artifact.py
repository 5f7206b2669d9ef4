"""Artifact models for leftover file discovery.

Defines how candidate paths are generated (PathTemplate) and what a
discovered leftover looks like (CandidateArtifact).
"""

from dataclasses import dataclass
from enum import Enum


class ArtifactScope(str, Enum):
    """Where a path template is rooted.

    Attributes:
        USER: Relative to the user's home directory.
        SYSTEM: Absolute, machine-wide location.
    """

    USER = "user"
    SYSTEM = "system"


class ArtifactKind(str, Enum):
    """Category of a leftover artifact."""

    SUPPORT = "support"
    PREFERENCE = "preference"
    CACHE = "cache"
    HTTP_STORAGE = "http_storage"
    WEB_STORAGE = "web_storage"
    COOKIES = "cookies"
    SAVED_STATE = "saved_state"
    CONTAINER = "container"
    GROUP_CONTAINER = "group_container"
    APP_SCRIPTS = "app_scripts"
    LOG = "log"
    LAUNCH_AGENT = "launch_agent"
    LAUNCH_DAEMON = "launch_daemon"
    KERNEL_EXTENSION = "kernel_extension"
    INPUT_METHOD = "input_method"
    PREFERENCE_PANE = "preference_pane"
    QUICK_LOOK = "quick_look"
    SCREEN_SAVER = "screen_saver"
    SERVICE = "service"
    SPOTLIGHT = "spotlight"
    STARTUP_ITEM = "startup_item"
    INTERNET_PLUGIN = "internet_plugin"
    RECEIPT = "receipt"
    HELPER_TOOL = "helper_tool"
    BUNDLE = "bundle"


@dataclass(frozen=True, slots=True)
class PathTemplate:
    """A candidate location for leftover files, parameterized by identifier.

    The pattern uses ``{id}`` as the identifier placeholder. USER templates
    are relative to the home directory; SYSTEM templates are absolute.

    Attributes:
        scope: USER or SYSTEM.
        kind: Artifact category produced by this template.
        pattern: Path pattern containing exactly one ``{id}`` placeholder.
    """

    scope: ArtifactScope
    kind: ArtifactKind
    pattern: str

    def __post_init__(self) -> None:
        """Validate template pattern after initialization."""
        if self.pattern.count("{id}") != 1:
            msg = f"Template must contain exactly one {{id}} placeholder: {self.pattern}"
            raise ValueError(msg)
        if self.scope == ArtifactScope.SYSTEM and not self.pattern.startswith("/"):
            msg = f"System template must be absolute: {self.pattern}"
            raise ValueError(msg)
        if self.scope == ArtifactScope.USER and self.pattern.startswith("/"):
            msg = f"User template must be home-relative: {self.pattern}"
            raise ValueError(msg)

    def render(self, identifier: str, home: str) -> str:
        """Render the template for an identifier.

        Args:
            identifier: Application identifier to substitute.
            home: Absolute path of the user's home directory.

        Returns:
            Absolute candidate path.
        """
        relative = self.pattern.replace("{id}", identifier)
        if self.scope == ArtifactScope.USER:
            return f"{home.rstrip('/')}/{relative}"
        return relative


@dataclass(frozen=True, slots=True)
class CandidateArtifact:
    """A leftover filesystem path belonging to an application.

    Attributes:
        path: Absolute filesystem path.
        exists: Whether the path existed when probed.
        size_bytes: Size on disk in bytes (0 if unknown).
        kind: Artifact category of the template that produced it.
    """

    path: str
    exists: bool
    size_bytes: int
    kind: ArtifactKind = ArtifactKind.SUPPORT

    def __post_init__(self) -> None:
        """Validate artifact data after initialization."""
        if not self.path:
            msg = "Artifact path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Artifact size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)
