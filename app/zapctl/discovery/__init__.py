"""Identity resolution and leftover artifact discovery."""

from zapctl.discovery.discoverer import ArtifactDiscoverer, is_safe_identifier
from zapctl.discovery.exclusions import is_excluded, normalize_prefixes
from zapctl.discovery.identity import resolve_identity
from zapctl.discovery.templates import PATH_TEMPLATES

__all__ = [
    "PATH_TEMPLATES",
    "ArtifactDiscoverer",
    "is_excluded",
    "is_safe_identifier",
    "normalize_prefixes",
    "resolve_identity",
]
