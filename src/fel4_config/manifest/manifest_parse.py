# src/fel4_config/manifest/manifest_parse.py
"""Conversion of a generic parsed TOML tree into the typed manifest model.

All "unknown shape" handling lives here. Once a FullManifest exists, the
resolver only deals with fixed shapes: target → {base, platform, profile}.
"""

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from fel4_config.constants import DEFAULT_STRICT_MANIFEST
from fel4_config.logs import getAppLogger
from fel4_config.meta import PROGRAM_MANIFEST
from fel4_config.utils import cast_hint, schema_from_typeddict

from .manifest_errors import (
    MissingRequiredProperty,
    MissingTable,
    NonStringProperty,
    ReservedPropertyName,
    UnexpectedKey,
    UnexpectedNestedTable,
    UnsupportedValueType,
)
from .manifest_types import (
    BUILD_PROFILES,
    INT64_MAX,
    INT64_MIN,
    KNOWN_PLATFORMS,
    TARGET_PLATFORMS,
    FullManifest,
    Header,
    Properties,
    RawHeader,
    ScalarValue,
    TargetTable,
)


# Names reserved for subtables, keyed by casefolded form.
# A scalar property may not take any of these names, in any casing.
RESERVED_SUBTABLE_NAMES: dict[str, str] = {
    name.casefold(): name for name in (*sorted(KNOWN_PLATFORMS), *BUILD_PROFILES)
}


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


def _kind_name(value: Any) -> str:  # noqa: PLR0911
    """Describe a TOML value kind for error messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (datetime, date, time)):
        return "datetime"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "table"
    return type(value).__name__


def _unexpected_key(path: str, *, strict: bool) -> None:
    if strict:
        raise UnexpectedKey(path)
    logger = getAppLogger()
    logger.warning("Ignoring unknown key in %s manifest: %s", PROGRAM_MANIFEST, path)


def to_scalar(path: str, value: Any) -> ScalarValue:
    """Convert one document value into a ScalarValue.

    bool is tested before int because bool subclasses int.
    """
    if isinstance(value, bool):
        return ScalarValue.boolean(value)
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise UnsupportedValueType(path, "integer outside 64-bit range")
        return ScalarValue.integer(value)
    if isinstance(value, str):
        return ScalarValue.string(value)
    if isinstance(value, dict):
        raise UnexpectedNestedTable(path)
    raise UnsupportedValueType(path, _kind_name(value))


def _parse_properties(path: str, table: Mapping[str, Any]) -> Properties:
    """Convert a flat subtable; nesting below this level is not allowed."""
    return {name: to_scalar(f"{path}.{name}", value) for name, value in table.items()}


# ---------------------------------------------------------------------------
# header
# ---------------------------------------------------------------------------


def _header_string(raw: Mapping[str, Any], key: str) -> str:
    if key not in raw:
        raise MissingRequiredProperty(PROGRAM_MANIFEST, key)
    value = raw[key]
    if not isinstance(value, str):
        raise NonStringProperty(key, _kind_name(value))
    return value


def parse_header(
    tree: Mapping[str, Any],
    *,
    strict: bool = DEFAULT_STRICT_MANIFEST,
) -> Header:
    """Extract the [fel4] header table.

    Empty strings are accepted here; validate_header() rejects them.
    """
    raw_table = tree.get(PROGRAM_MANIFEST)
    if not isinstance(raw_table, dict):
        raise MissingTable(PROGRAM_MANIFEST)

    known_keys = schema_from_typeddict(RawHeader)
    for key, value in raw_table.items():
        if isinstance(value, (dict, list)):
            raise UnexpectedNestedTable(f"{PROGRAM_MANIFEST}.{key}")
        if key not in known_keys:
            _unexpected_key(f"{PROGRAM_MANIFEST}.{key}", strict=strict)

    # required keys are checked in declaration order: target first
    for key in known_keys:
        _header_string(raw_table, key)

    raw = cast_hint(RawHeader, raw_table)
    return Header(
        target=raw["target"],
        platform=raw["platform"],
        artifact_path=raw["artifact-path"],
        target_specs_path=raw["target-specs-path"],
    )


# ---------------------------------------------------------------------------
# targets
# ---------------------------------------------------------------------------


def parse_target_table(target: str, table: Mapping[str, Any]) -> TargetTable:
    """Split a target table into base, platform and profile layers.

    Subtable names are matched case-sensitively: `[target.pc99]` is a
    platform layer, `[target.Debug]` is an unexpected table.
    """
    logger = getAppLogger()
    platforms = TARGET_PLATFORMS[target]

    base: Properties = {}
    platform_subtables: dict[str, Properties] = {}
    profiles: dict[str, Properties] = {}

    for key, value in table.items():
        path = f"{target}.{key}"
        if isinstance(value, dict):
            if key in platforms:
                platform_subtables[key] = _parse_properties(path, value)
            elif key in BUILD_PROFILES:
                profiles[key] = _parse_properties(path, value)
            else:
                raise UnexpectedNestedTable(path)
            continue

        reserved = RESERVED_SUBTABLE_NAMES.get(key.casefold())
        if reserved is not None:
            raise ReservedPropertyName(path, reserved)
        base[key] = to_scalar(path, value)

    logger.trace(
        f"[parse_target_table] {target}: {len(base)} base properties,"
        f" platforms={sorted(platform_subtables)}, profiles={sorted(profiles)}"
    )
    return TargetTable(
        target=target,
        base_properties=base,
        platform_subtables=platform_subtables,
        debug_properties=profiles.get("debug", {}),
        release_properties=profiles.get("release", {}),
    )


def from_document(
    tree: Mapping[str, Any],
    *,
    strict: bool = DEFAULT_STRICT_MANIFEST,
) -> FullManifest:
    """Build a FullManifest from an already-parsed TOML document.

    Top-level tables named after a known target become TargetTables.
    Anything else besides the header is ignored with a warning, or
    rejected with UnexpectedKey when `strict` is set.
    """
    logger = getAppLogger()
    logger.trace(f"[from_document] Parsing document with {len(tree)} top-level keys")

    header = parse_header(tree, strict=strict)

    targets: dict[str, TargetTable] = {}
    for key, value in tree.items():
        if key == PROGRAM_MANIFEST:
            continue
        if key in TARGET_PLATFORMS and isinstance(value, dict):
            targets[key] = parse_target_table(key, value)
            continue
        _unexpected_key(key, strict=strict)

    logger.debug(
        "Parsed %s manifest: target=%s platform=%s, %d target table(s)",
        PROGRAM_MANIFEST,
        header.target,
        header.platform,
        len(targets),
    )
    return FullManifest(header=header, targets=targets)
