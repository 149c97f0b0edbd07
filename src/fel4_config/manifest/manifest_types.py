# src/fel4_config/manifest/manifest_types.py


from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, TypedDict

from fel4_config.utils import cast_hint, literal_to_set

from .manifest_errors import InvalidBuildProfile, InvalidScalarValue


ScalarKind = Literal["boolean", "integer", "string"]
BuildProfile = Literal["debug", "release"]

BUILD_PROFILES: tuple[BuildProfile, ...] = ("debug", "release")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# Valid (target, platform) pairings. Adding a pairing is a one-line change.
TARGET_PLATFORMS: "MappingProxyType[str, frozenset[str]]" = MappingProxyType(
    {
        "x86_64-sel4-fel4": frozenset({"pc99"}),
        "arm-sel4-fel4": frozenset({"sabre"}),
    }
)

KNOWN_PLATFORMS: frozenset[str] = frozenset().union(*TARGET_PLATFORMS.values())


# Raw shape of the [fel4] header table as it comes out of the TOML parser
RawHeader = TypedDict(
    "RawHeader",
    {
        "target": str,
        "platform": str,
        "artifact-path": str,
        "target-specs-path": str,
    },
)


# bool subclasses int, so the exact Python type is checked per kind
_SCALAR_TYPES: "MappingProxyType[str, type]" = MappingProxyType(
    {"boolean": bool, "integer": int, "string": str}
)


@dataclass(frozen=True)
class ScalarValue:
    """A single typed property value: boolean, 64-bit integer or string."""

    kind: ScalarKind
    value: bool | int | str

    def __post_init__(self) -> None:
        if self.kind not in literal_to_set(ScalarKind):
            raise InvalidScalarValue(self.kind, self.value, "unknown kind")
        if type(self.value) is not _SCALAR_TYPES[self.kind]:
            found = type(self.value).__name__
            raise InvalidScalarValue(self.kind, self.value, f"value is a {found}")
        if self.kind == "integer" and not INT64_MIN <= self.value <= INT64_MAX:
            raise InvalidScalarValue(self.kind, self.value, "outside 64-bit range")

    @classmethod
    def boolean(cls, value: bool) -> "ScalarValue":  # noqa: FBT001
        return cls("boolean", value)

    @classmethod
    def integer(cls, value: int) -> "ScalarValue":
        return cls("integer", value)

    @classmethod
    def string(cls, value: str) -> "ScalarValue":
        return cls("string", value)

    def __str__(self) -> str:
        if self.kind == "boolean":
            return "true" if self.value else "false"
        return str(self.value)


# Mutable while a layer is being built; frozen into a PropertyLayer after.
Properties = dict[str, ScalarValue]
PropertyLayer = Mapping[str, ScalarValue]


def freeze_layer(layer: PropertyLayer) -> PropertyLayer:
    """Return a read-only copy of `layer`."""
    return MappingProxyType(dict(layer))


@dataclass(frozen=True)
class Header:
    target: str
    platform: str
    artifact_path: str
    target_specs_path: str


@dataclass(frozen=True)
class TargetTable:
    """All property layers declared for one build target.

    Layers are copied into read-only mappings on construction, so a
    parsed manifest cannot be changed through them afterwards.
    """

    target: str
    base_properties: PropertyLayer = field(default_factory=dict)
    platform_subtables: Mapping[str, PropertyLayer] = field(default_factory=dict)
    debug_properties: PropertyLayer = field(default_factory=dict)
    release_properties: PropertyLayer = field(default_factory=dict)

    def __post_init__(self) -> None:
        # frozen dataclass: object.__setattr__ is the only way in
        for name in ("base_properties", "debug_properties", "release_properties"):
            object.__setattr__(self, name, freeze_layer(getattr(self, name)))
        subtables = {
            platform: freeze_layer(layer)
            for platform, layer in self.platform_subtables.items()
        }
        object.__setattr__(self, "platform_subtables", MappingProxyType(subtables))

    def profile_properties(self, profile: BuildProfile) -> PropertyLayer:
        if profile == "debug":
            return self.debug_properties
        return self.release_properties


@dataclass(frozen=True)
class FullManifest:
    header: Header
    targets: Mapping[str, TargetTable] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", MappingProxyType(dict(self.targets)))


@dataclass(frozen=True)
class ResolvedConfig:
    """Flat, conflict-free property set for one target/platform/profile."""

    target: str
    platform: str
    artifact_path: str
    target_specs_path: str
    profile: BuildProfile
    properties: PropertyLayer = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", freeze_layer(self.properties))

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-ready plain dict."""
        return {
            "target": self.target,
            "platform": self.platform,
            "artifact_path": self.artifact_path,
            "target_specs_path": self.target_specs_path,
            "profile": self.profile,
            "properties": {name: v.value for name, v in self.properties.items()},
        }


def is_build_profile(value: Any) -> bool:
    return isinstance(value, str) and value in literal_to_set(BuildProfile)


def parse_build_profile(value: str) -> BuildProfile:
    """Interpret `value` as a build profile (case-sensitive, as cargo sets it)."""
    if not is_build_profile(value):
        raise InvalidBuildProfile(value, BUILD_PROFILES)
    return cast_hint(BuildProfile, value)  # type: ignore[arg-type]
