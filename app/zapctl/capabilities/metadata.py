"""Bundle metadata lookups through Spotlight (mdls) and Info.plist.

Both sources are best-effort: any failure is logged and reported as
"nothing found" so that discovery can continue with fewer identifiers.
"""

import logging
import plistlib
import subprocess
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from zapctl.capabilities.base import ManifestReader, MetadataQuery
from zapctl.utils.shell import run_command

logger = logging.getLogger(__name__)

# Relative location of the manifest inside an application bundle
INFO_PLIST_PATH = Path("Contents") / "Info.plist"

# mdls prints this literal when the attribute is not set
_MDLS_NULL = "(null)"


class MdlsMetadataQuery(MetadataQuery):
    """Reads kMDItemCFBundleIdentifier via ``mdls``."""

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout

    def query_bundle_identifier(self, path: str) -> str | None:
        try:
            result = run_command(
                ["mdls", "-name", "kMDItemCFBundleIdentifier", "-raw", path],
                timeout=self._timeout,
            )
        except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
            logger.debug("mdls unavailable for %s: %s", path, e)
            return None

        if not result.success:
            logger.debug("mdls failed for %s: %s", path, result.stderr.strip())
            return None

        value = result.stdout.strip()
        if not value or value == _MDLS_NULL:
            return None
        return value


class PlistManifestReader(ManifestReader):
    """Parses ``Contents/Info.plist`` with plistlib (XML and binary formats)."""

    def read_manifest(self, bundle_path: str) -> dict[str, Any] | None:
        plist_path = Path(bundle_path) / INFO_PLIST_PATH
        try:
            with open(plist_path, "rb") as f:
                data = plistlib.load(f)
        except FileNotFoundError:
            logger.debug("No Info.plist in %s", bundle_path)
            return None
        except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
            logger.warning("Failed to parse %s: %s", plist_path, e)
            return None
        except OSError as e:
            logger.warning("Failed to read %s: %s", plist_path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Unexpected Info.plist root type in %s", bundle_path)
            return None
        return data
