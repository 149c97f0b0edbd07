# src/fel4_config/meta.py
"""Program identity and version metadata."""

from dataclasses import dataclass
from importlib import metadata


# --- program identity -------------------------------------------------------

PROGRAM_PACKAGE = "fel4_config"
PROGRAM_SCRIPT = "fel4-config"
PROGRAM_DISPLAY = "fel4-config"
PROGRAM_ENV = "FEL4"
PROGRAM_MANIFEST = "fel4"  # name of the header table and manifest stem


@dataclass(frozen=True)
class Metadata:
    """Version information for the installed package."""

    version: str

    def __str__(self) -> str:
        return self.version


def get_metadata() -> Metadata:
    """Return version metadata, or "unknown" when running from a bare checkout."""
    try:
        return Metadata(metadata.version(PROGRAM_SCRIPT))
    except metadata.PackageNotFoundError:
        return Metadata("unknown")
