# src/fel4_config/manifest/manifest_validate.py


from collections.abc import Mapping

from fel4_config.logs import getAppLogger

from .manifest_errors import EmptyPath, InvalidPlatformForTarget, UnknownTarget
from .manifest_types import TARGET_PLATFORMS, Header


def validate_header(
    header: Header,
    *,
    target_platforms: Mapping[str, frozenset[str]] = TARGET_PLATFORMS,
) -> None:
    """Check a header against the known target/platform pairings.

    Checks, in order:
      1. the target is a known target            → UnknownTarget
      2. the platform is valid for that target    → InvalidPlatformForTarget
      3. both paths are non-empty strings          → EmptyPath

    Path existence is not checked; that belongs to whoever consumes them.
    """
    logger = getAppLogger()
    logger.trace(
        f"[validate_header] target={header.target!r} platform={header.platform!r}"
    )

    valid_platforms = target_platforms.get(header.target)
    if valid_platforms is None:
        raise UnknownTarget(header.target, target_platforms.keys())

    if header.platform not in valid_platforms:
        raise InvalidPlatformForTarget(
            header.target, header.platform, valid_platforms
        )

    if not header.artifact_path:
        raise EmptyPath("artifact-path")
    if not header.target_specs_path:
        raise EmptyPath("target-specs-path")
