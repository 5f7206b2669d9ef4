"""Identity resolution for installed applications.

Collects the names an application may use for its files: the display
name, two normalized variants, the bundle identifier, and identifier
fields from the bundle's Info.plist. Metadata and manifest lookups are
best-effort and never fail the request.
"""

import logging
import re
from typing import Any

from zapctl.capabilities.base import ManifestReader, MetadataQuery
from zapctl.models.application import Application, Identity

logger = logging.getLogger(__name__)

# Info.plist keys whose values name the application on disk
MANIFEST_ALIAS_KEYS: tuple[str, ...] = (
    "CFBundleExecutable",
    "CFBundleIdentifier",
    "CFBundleName",
    "CFBundleDisplayName",
)

_WHITESPACE = re.compile(r"\s+")


def normalize_no_spaces(name: str) -> str:
    """Lower-case a name and remove all whitespace."""
    return _WHITESPACE.sub("", name.lower())


def normalize_alnum(name: str) -> str:
    """Lower-case a name and keep only letters and digits."""
    return "".join(ch for ch in normalize_no_spaces(name) if ch.isalnum())


def display_name_for(application: Application) -> str:
    """Return the display name without a trailing ``.app`` suffix."""
    name = application.name.strip()
    if name.lower().endswith(".app"):
        name = name[: -len(".app")]
    return name


def extract_manifest_aliases(manifest: dict[str, object] | None) -> frozenset[str]:
    """Extract identifier-like string values from a parsed manifest.

    Args:
        manifest: Parsed Info.plist mapping, or None.

    Returns:
        Set of non-empty alias strings (possibly empty).
    """
    if not manifest:
        return frozenset()

    aliases: set[str] = set()
    for key in MANIFEST_ALIAS_KEYS:
        value = manifest.get(key)
        if isinstance(value, str) and value.strip():
            aliases.add(value.strip())
    return frozenset(aliases)


def _query_bundle_identifier(metadata: MetadataQuery, path: str) -> str | None:
    try:
        return metadata.query_bundle_identifier(path)
    except Exception as e:
        logger.warning("Bundle identifier lookup failed for %s: %s", path, e)
        return None


def _read_manifest(manifest_reader: ManifestReader, path: str) -> dict[str, Any] | None:
    try:
        return manifest_reader.read_manifest(path)
    except Exception as e:
        logger.warning("Manifest read failed for %s: %s", path, e)
        return None


def resolve_identity(
    application: Application,
    metadata: MetadataQuery,
    manifest_reader: ManifestReader,
) -> Identity:
    """Derive the Identity of an application.

    If the metadata query yields nothing, the manifest's
    CFBundleIdentifier is used as the bundle identifier instead.

    Args:
        application: Application to resolve.
        metadata: Metadata query capability.
        manifest_reader: Manifest reader capability.

    Returns:
        Immutable Identity.
    """
    display_name = display_name_for(application)
    no_spaces = normalize_no_spaces(display_name)

    bundle_id = _query_bundle_identifier(metadata, application.install_path)
    if bundle_id:
        logger.debug("Found bundle ID for %s: %s", display_name, bundle_id)
    else:
        logger.info("No bundle identifier for %s", application.install_path)

    manifest = _read_manifest(manifest_reader, application.install_path)
    aliases = extract_manifest_aliases(manifest)
    if manifest is None:
        logger.debug("No readable manifest for %s", application.install_path)

    if not bundle_id and manifest:
        fallback = manifest.get("CFBundleIdentifier")
        if isinstance(fallback, str) and fallback.strip():
            bundle_id = fallback.strip()
            logger.debug("Using manifest bundle ID for %s: %s", display_name, bundle_id)

    return Identity(
        display_name=display_name,
        normalized_no_spaces=no_spaces,
        normalized_alnum=normalize_alnum(display_name),
        bundle_identifier=bundle_id or None,
        manifest_aliases=aliases,
    )
