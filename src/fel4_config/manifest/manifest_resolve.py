# src/fel4_config/manifest/manifest_resolve.py


from fel4_config.logs import getAppLogger

from .manifest_errors import (
    ConflictingPropertyType,
    InvalidBuildProfile,
    MissingPlatformSubtable,
    MissingTargetTable,
)
from .manifest_types import (
    BUILD_PROFILES,
    BuildProfile,
    FullManifest,
    Properties,
    PropertyLayer,
    ResolvedConfig,
    is_build_profile,
)
from .manifest_validate import validate_header


def merge_layer(
    merged: Properties,  # modified
    layer: PropertyLayer,
    *,
    layer_name: str,
) -> None:
    """Fold one property layer into `merged`.

    A key already present may only be replaced by a value of the same kind.
    """
    logger = getAppLogger()
    for name, value in layer.items():
        existing = merged.get(name)
        if existing is not None:
            if existing.kind != value.kind:
                raise ConflictingPropertyType(name, existing.kind, value.kind)
            logger.trace(
                f"[merge_layer] {layer_name} overrides {name}: {existing} -> {value}"
            )
        merged[name] = value


def resolve(manifest: FullManifest, profile: BuildProfile) -> ResolvedConfig:
    """Resolve the selected target/platform and `profile` into one property set.

    Layers are applied base → platform → profile; later layers win on
    same-kind collisions. The result shares no state with `manifest`.
    """
    logger = getAppLogger()
    header = manifest.header
    logger.trace(
        f"[resolve] target={header.target} platform={header.platform}"
        f" profile={profile}"
    )

    validate_header(header)

    if not is_build_profile(profile):
        raise InvalidBuildProfile(profile, BUILD_PROFILES)

    target_table = manifest.targets.get(header.target)
    if target_table is None:
        raise MissingTargetTable(header.target)

    platform_properties = target_table.platform_subtables.get(header.platform)
    if platform_properties is None:
        raise MissingPlatformSubtable(header.target, header.platform)

    layers: list[tuple[str, PropertyLayer]] = [
        (header.target, target_table.base_properties),
        (f"{header.target}.{header.platform}", platform_properties),
        (f"{header.target}.{profile}", target_table.profile_properties(profile)),
    ]
    merged: Properties = {}
    for layer_name, layer in layers:
        merge_layer(merged, layer, layer_name=layer_name)

    properties = {name: merged[name] for name in sorted(merged)}
    logger.debug(
        "Resolved %d properties for %s/%s (%s)",
        len(properties),
        header.target,
        header.platform,
        profile,
    )
    return ResolvedConfig(
        target=header.target,
        platform=header.platform,
        artifact_path=header.artifact_path,
        target_specs_path=header.target_specs_path,
        profile=profile,
        properties=properties,
    )
