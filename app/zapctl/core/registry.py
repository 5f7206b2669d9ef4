"""Installed application registry.

Lists the application bundles directly under /Applications, which is
where user-removable applications live.
"""

import logging
from pathlib import Path

from zapctl.core.errors import ApplicationNotFoundError
from zapctl.core.paths import APPLICATIONS_DIR
from zapctl.models.application import Application

logger = logging.getLogger(__name__)

_BUNDLE_SUFFIX = ".app"


class ApplicationRegistry:
    """Enumerates installed applications.

    Args:
        root: Directory containing application bundles.
    """

    def __init__(self, root: Path = APPLICATIONS_DIR) -> None:
        self._root = root

    def list_applications(self) -> list[Application]:
        """Return all bundles under the root, sorted case-insensitively by name."""
        try:
            entries = list(self._root.iterdir())
        except FileNotFoundError:
            logger.warning("Applications directory not found: %s", self._root)
            return []
        except PermissionError:
            logger.warning("Permission denied listing applications: %s", self._root)
            return []

        apps = [
            Application(name=entry.name[: -len(_BUNDLE_SUFFIX)], install_path=str(entry))
            for entry in entries
            if entry.name.endswith(_BUNDLE_SUFFIX) and entry.is_dir()
        ]
        return sorted(apps, key=lambda app: app.name.lower())

    def find(self, query: str) -> Application:
        """Find an application by display name or bundle path.

        Names match case-insensitively, with or without the ``.app``
        suffix. An absolute path to an existing bundle is accepted as is.

        Args:
            query: Display name or bundle path.

        Returns:
            Matching Application.

        Raises:
            ApplicationNotFoundError: If nothing matches.
        """
        if query.startswith("/"):
            path = Path(query.rstrip("/"))
            if path.name.endswith(_BUNDLE_SUFFIX) and path.is_dir():
                return Application(name=path.name[: -len(_BUNDLE_SUFFIX)], install_path=str(path))
            msg = f"No application bundle at {query}"
            raise ApplicationNotFoundError(msg)

        wanted = query.strip().lower()
        if wanted.endswith(_BUNDLE_SUFFIX):
            wanted = wanted[: -len(_BUNDLE_SUFFIX)]

        for app in self.list_applications():
            if app.name.lower() == wanted:
                return app

        msg = f"Application not found: {query}"
        raise ApplicationNotFoundError(msg)
