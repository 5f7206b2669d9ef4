"""OS capability interfaces and their macOS implementations.

The uninstall core only talks to the operating system through these
interfaces, which keeps it testable with in-memory fakes.
"""

from zapctl.capabilities.base import (
    BatchResult,
    ManifestReader,
    MetadataQuery,
    PathProber,
    PrivilegedExecutor,
)
from zapctl.capabilities.metadata import MdlsMetadataQuery, PlistManifestReader
from zapctl.capabilities.privileged import OsascriptPrivilegedExecutor
from zapctl.capabilities.prober import FilesystemProber

__all__ = [
    "BatchResult",
    "FilesystemProber",
    "ManifestReader",
    "MdlsMetadataQuery",
    "MetadataQuery",
    "OsascriptPrivilegedExecutor",
    "PathProber",
    "PlistManifestReader",
    "PrivilegedExecutor",
]
