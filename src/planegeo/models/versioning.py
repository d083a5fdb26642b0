"""Format version tag carried by every persisted entity record."""

from __future__ import annotations

from typing import Final

FORMAT_VERSION: Final[int] = 1


def check_format_version(version: int) -> int:
    """Reject records written by a newer (or nonsensical) format revision."""
    if version < 1 or version > FORMAT_VERSION:
        raise ValueError(
            f"Unsupported format version {version}; this library reads up to {FORMAT_VERSION}"
        )
    return version
