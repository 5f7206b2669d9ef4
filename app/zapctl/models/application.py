"""Application and identity models.

An Application is what the registry hands us: a display name and the
path of its bundle. An Identity is everything we derive from it that can
appear in the name of a leftover file.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Application:
    """An installed application bundle.

    Attributes:
        name: Display name (e.g., 'Visual Studio Code').
        install_path: Absolute path to the bundle (e.g., '/Applications/Foo.app').
    """

    name: str
    install_path: str

    def __post_init__(self) -> None:
        """Validate application data after initialization."""
        if not self.name:
            msg = "Application name cannot be empty"
            raise ValueError(msg)
        if not self.install_path:
            msg = "Application install path cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Identity:
    """Identifiers under which an application may have stored files.

    Derived once per uninstall request and never mutated afterwards.

    Attributes:
        display_name: Name as shown to the user.
        normalized_no_spaces: Lower-cased display name without whitespace.
        normalized_alnum: normalized_no_spaces with non-alphanumerics stripped.
        bundle_identifier: Reverse-DNS bundle ID, None if it could not be resolved.
        manifest_aliases: Identifier-like values read from the bundle's Info.plist.
    """

    display_name: str
    normalized_no_spaces: str
    normalized_alnum: str
    bundle_identifier: str | None = None
    manifest_aliases: frozenset[str] = field(default_factory=frozenset)

    def identifiers(self) -> list[str]:
        """Return every usable identifier in a stable order, without duplicates.

        Order: display name, the two normalized variants, the bundle
        identifier, then manifest aliases sorted alphabetically. Empty
        and missing values are skipped.

        Returns:
            List of identifier strings.
        """
        candidates = [
            self.display_name,
            self.normalized_no_spaces,
            self.normalized_alnum,
            self.bundle_identifier,
            *sorted(self.manifest_aliases),
        ]
        seen: set[str] = set()
        result: list[str] = []
        for candidate in candidates:
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            result.append(candidate)
        return result
