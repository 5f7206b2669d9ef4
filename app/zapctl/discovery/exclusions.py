"""User-configured path exclusions.

Exclusions are path prefixes that discovery must never return. A prefix
matches the path itself and everything below it, on path separator
boundaries only: ``/Library/Launch`` does not exclude
``/Library/LaunchDaemons``. Prefixes starting with ``~`` are expanded
to the user's home directory before matching.
"""

import posixpath


def normalize_prefix(prefix: str, home: str) -> str | None:
    """Normalize an exclusion prefix for matching.

    Args:
        prefix: Prefix as configured (absolute or ``~``-relative).
        home: Absolute home directory used for ``~`` expansion.

    Returns:
        Normalized absolute prefix, or None if the prefix is empty or relative.
    """
    value = prefix.strip()
    if not value:
        return None

    if value == "~" or value.startswith("~/"):
        value = home.rstrip("/") + value[1:]

    if not value.startswith("/"):
        return None

    return posixpath.normpath(value)


def normalize_prefixes(prefixes: list[str], home: str) -> tuple[str, ...]:
    """Normalize a list of prefixes, dropping unusable entries."""
    normalized: list[str] = []
    for prefix in prefixes:
        value = normalize_prefix(prefix, home)
        if value is not None and value not in normalized:
            normalized.append(value)
    return tuple(normalized)


def is_excluded(path: str, prefixes: tuple[str, ...]) -> bool:
    """Check if a path falls under any normalized exclusion prefix.

    Args:
        path: Absolute, normalized filesystem path.
        prefixes: Prefixes from normalize_prefixes.

    Returns:
        True if path equals a prefix or lies below one.
    """
    for prefix in prefixes:
        if prefix == "/":
            return True
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False
