# src/fel4_config/manifest/__init__.py

"""Manifest handling for fel4-config.

This module provides the manifest model, document parsing, header
validation, layered resolution, and file/environment loading.
"""

from .manifest_errors import (
    ConfigError,
    ConflictingPropertyType,
    EmptyPath,
    FileReadFailure,
    InvalidBuildProfile,
    InvalidPlatformForTarget,
    InvalidProfileVariable,
    InvalidScalarValue,
    ManifestDiscoveryError,
    MissingEnvVar,
    MissingPlatformSubtable,
    MissingRequiredProperty,
    MissingTable,
    MissingTargetTable,
    NonStringProperty,
    ReservedPropertyName,
    TomlParseFailure,
    UnexpectedKey,
    UnexpectedNestedTable,
    UnknownTarget,
    UnsupportedValueType,
)
from .manifest_loader import (
    find_manifest,
    get_fel4_config,
    get_full_manifest,
    infer_manifest_location_from_env,
    parse_manifest,
    parse_profile_variable,
)
from .manifest_parse import from_document, parse_header, parse_target_table
from .manifest_resolve import merge_layer, resolve
from .manifest_types import (
    BUILD_PROFILES,
    KNOWN_PLATFORMS,
    TARGET_PLATFORMS,
    BuildProfile,
    FullManifest,
    Header,
    PropertyLayer,
    ResolvedConfig,
    ScalarKind,
    ScalarValue,
    TargetTable,
    freeze_layer,
    parse_build_profile,
)
from .manifest_validate import validate_header


__all__ = [  # noqa: RUF022
    # manifest_errors
    "ConfigError",
    "ConflictingPropertyType",
    "EmptyPath",
    "FileReadFailure",
    "InvalidBuildProfile",
    "InvalidPlatformForTarget",
    "InvalidProfileVariable",
    "InvalidScalarValue",
    "ManifestDiscoveryError",
    "MissingEnvVar",
    "MissingPlatformSubtable",
    "MissingRequiredProperty",
    "MissingTable",
    "MissingTargetTable",
    "NonStringProperty",
    "ReservedPropertyName",
    "TomlParseFailure",
    "UnexpectedKey",
    "UnexpectedNestedTable",
    "UnknownTarget",
    "UnsupportedValueType",
    # manifest_loader
    "find_manifest",
    "get_fel4_config",
    "get_full_manifest",
    "infer_manifest_location_from_env",
    "parse_manifest",
    "parse_profile_variable",
    # manifest_parse
    "from_document",
    "parse_header",
    "parse_target_table",
    # manifest_resolve
    "merge_layer",
    "resolve",
    # manifest_types
    "BUILD_PROFILES",
    "KNOWN_PLATFORMS",
    "TARGET_PLATFORMS",
    "BuildProfile",
    "FullManifest",
    "Header",
    "PropertyLayer",
    "ResolvedConfig",
    "ScalarKind",
    "ScalarValue",
    "TargetTable",
    "freeze_layer",
    "parse_build_profile",
    # manifest_validate
    "validate_header",
]
