# src/fel4_config/__init__.py

"""fel4-config — Resolve layered fel4 manifests into flat build properties.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use from build scripts.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                  → CLI entrypoint
    - from_document()         → Parsed TOML tree → FullManifest
    - resolve()               → FullManifest + profile → ResolvedConfig
    - get_fel4_config()       → Load, parse and resolve a manifest file
    - configure_cmake_build() → ResolvedConfig → seL4 kernel CMake definitions
"""

from .cli import main
from .cmake import (
    CMakeBuild,
    CMakeConfigurationError,
    MissingRequiredEnvVar,
    TargetMismatch,
    cmake_definition,
    cmake_definitions,
    configure_cmake_build,
    configure_cmake_build_from_env,
)
from .constants import (
    DEFAULT_BUILD_PROFILE,
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_ENV_MANIFEST_PATH,
    DEFAULT_ENV_PROFILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_STRICT_MANIFEST,
)
from .logs import getAppLogger
from .manifest import (
    BUILD_PROFILES,
    KNOWN_PLATFORMS,
    TARGET_PLATFORMS,
    BuildProfile,
    ConfigError,
    ConflictingPropertyType,
    EmptyPath,
    FileReadFailure,
    FullManifest,
    Header,
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
    PropertyLayer,
    ReservedPropertyName,
    ResolvedConfig,
    ScalarKind,
    ScalarValue,
    TargetTable,
    TomlParseFailure,
    UnexpectedKey,
    UnexpectedNestedTable,
    UnknownTarget,
    UnsupportedValueType,
    find_manifest,
    from_document,
    get_fel4_config,
    get_full_manifest,
    infer_manifest_location_from_env,
    parse_build_profile,
    parse_manifest,
    parse_profile_variable,
    resolve,
    validate_header,
)
from .meta import (
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_MANIFEST,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
    get_metadata,
)


__all__ = [  # noqa: RUF022
    # cli
    "main",
    # cmake
    "CMakeBuild",
    "CMakeConfigurationError",
    "MissingRequiredEnvVar",
    "TargetMismatch",
    "cmake_definition",
    "cmake_definitions",
    "configure_cmake_build",
    "configure_cmake_build_from_env",
    # constants
    "DEFAULT_BUILD_PROFILE",
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_ENV_MANIFEST_PATH",
    "DEFAULT_ENV_PROFILE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MANIFEST_NAME",
    "DEFAULT_STRICT_MANIFEST",
    # logs
    "getAppLogger",
    # manifest
    "BUILD_PROFILES",
    "KNOWN_PLATFORMS",
    "TARGET_PLATFORMS",
    "BuildProfile",
    "ConfigError",
    "ConflictingPropertyType",
    "EmptyPath",
    "FileReadFailure",
    "FullManifest",
    "Header",
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
    "PropertyLayer",
    "ReservedPropertyName",
    "ResolvedConfig",
    "ScalarKind",
    "ScalarValue",
    "TargetTable",
    "TomlParseFailure",
    "UnexpectedKey",
    "UnexpectedNestedTable",
    "UnknownTarget",
    "UnsupportedValueType",
    "find_manifest",
    "from_document",
    "get_fel4_config",
    "get_full_manifest",
    "infer_manifest_location_from_env",
    "parse_build_profile",
    "parse_manifest",
    "parse_profile_variable",
    "resolve",
    "validate_header",
    # meta
    "Metadata",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_MANIFEST",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "get_metadata",
]
