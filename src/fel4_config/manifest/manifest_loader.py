# src/fel4_config/manifest/manifest_loader.py
"""Filesystem and environment plumbing around the pure manifest core."""

import os
from collections.abc import Mapping
from pathlib import Path

from fel4_config.constants import (
    DEFAULT_ENV_MANIFEST_PATH,
    DEFAULT_ENV_PROFILE,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_STRICT_MANIFEST,
)
from fel4_config.logs import getAppLogger
from fel4_config.utils import load_toml, loads_toml

from .manifest_errors import (
    FileReadFailure,
    InvalidBuildProfile,
    InvalidProfileVariable,
    MissingEnvVar,
    TomlParseFailure,
)
from .manifest_parse import from_document
from .manifest_resolve import resolve
from .manifest_types import (
    BUILD_PROFILES,
    BuildProfile,
    FullManifest,
    ResolvedConfig,
    parse_build_profile,
)


def find_manifest(
    cwd: Path,
    explicit: str | Path | None = None,
    *,
    missing_level: str = "error",
) -> Path | None:
    """Locate a fel4 manifest.

    missing_level: log-level for failing to find a manifest.

    Search order:
      1. Explicit path (from --manifest or FEL4_MANIFEST_PATH)
      2. fel4.toml in `cwd`, then in each parent directory

    Returns the first matching path, or None if nothing was found.
    """
    logger = getAppLogger()

    # --- 1. Explicit manifest path ---
    if explicit:
        manifest = Path(explicit).expanduser().resolve()
        logger.trace(f"[find_manifest] Checking explicit path: {manifest}")
        if not manifest.exists():
            # Explicit path → hard failure
            xmsg = f"Specified manifest file not found: {manifest}"
            raise FileNotFoundError(xmsg)
        if manifest.is_dir():
            xmsg = f"Specified manifest path is a directory, not a file: {manifest}"
            raise ValueError(xmsg)
        return manifest

    # --- 2. Search current dir and parents, closest to cwd wins ---
    current = cwd
    while True:
        candidate = current / DEFAULT_MANIFEST_NAME
        logger.trace(f"[find_manifest] Checking {candidate}")
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:  # Reached filesystem root
            break
        current = parent

    logger.logDynamic(
        missing_level,
        "No %s found in %s or parents",
        DEFAULT_MANIFEST_NAME,
        cwd,
    )
    return None


def parse_manifest(
    text: str,
    *,
    source: str = "<string>",
    strict: bool = DEFAULT_STRICT_MANIFEST,
) -> FullManifest:
    """Parse fel4 manifest text into a FullManifest."""
    try:
        document = loads_toml(text)
    except ValueError as e:
        raise TomlParseFailure(source, str(e)) from e
    return from_document(document, strict=strict)


def get_full_manifest(
    path: str | Path,
    *,
    strict: bool = DEFAULT_STRICT_MANIFEST,
) -> FullManifest:
    """Read and parse the fel4 manifest at `path`."""
    logger = getAppLogger()
    manifest_path = Path(path)
    logger.trace(f"[get_full_manifest] Loading {manifest_path}")

    try:
        document = load_toml(manifest_path)
    except OSError as e:
        raise FileReadFailure(str(manifest_path), str(e)) from e
    except ValueError as e:
        raise TomlParseFailure(manifest_path.name, str(e)) from e
    return from_document(document, strict=strict)


def get_fel4_config(
    path: str | Path,
    profile: BuildProfile,
    *,
    strict: bool = DEFAULT_STRICT_MANIFEST,
) -> ResolvedConfig:
    """Load, parse, and resolve a fel4 manifest in one step."""
    return resolve(get_full_manifest(path, strict=strict), profile)


def parse_profile_variable(
    raw_profile: str,
    name: str = DEFAULT_ENV_PROFILE,
) -> BuildProfile:
    """Interpret the value of the profile environment variable `name`."""
    try:
        return parse_build_profile(raw_profile)
    except InvalidBuildProfile as e:
        raise InvalidProfileVariable(name, raw_profile, BUILD_PROFILES) from e


def infer_manifest_location_from_env(
    environ: Mapping[str, str] | None = None,
) -> tuple[Path, BuildProfile]:
    """Read the manifest path and build profile from the environment.

    Uses FEL4_MANIFEST_PATH and PROFILE (as cargo sets it for build scripts).
    """
    env = os.environ if environ is None else environ

    manifest_path = env.get(DEFAULT_ENV_MANIFEST_PATH)
    if manifest_path is None:
        raise MissingEnvVar(DEFAULT_ENV_MANIFEST_PATH)

    raw_profile = env.get(DEFAULT_ENV_PROFILE)
    if raw_profile is None:
        raise MissingEnvVar(DEFAULT_ENV_PROFILE)

    return Path(manifest_path), parse_profile_variable(raw_profile)
