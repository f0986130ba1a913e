"""
intake/versions.py — Client version detection.

CLI releases listed here still send the v1 payload shape. Anything else,
including a missing header, is treated as the current shape.
"""
from typing import Iterable, Optional, Tuple

CLI_VERSION_HEADER = "X-Horusec-CLI-Version"

LEGACY_VERSIONS: Tuple[str, ...] = (
    "v1.7.0",
    "v1.8.0", "v1.8.1", "v1.8.2", "v1.8.3", "v1.8.4",
    "v1.9.0",
    "v1.10.0", "v1.10.1", "v1.10.2", "v1.10.3",
)


def is_legacy(version: Optional[str], legacy_versions: Iterable[str] = LEGACY_VERSIONS) -> bool:
    """True when `version` case-insensitively equals one of `legacy_versions`."""
    if not version:
        return False
    sent = version.casefold()
    return any(sent == known.casefold() for known in legacy_versions)
