# src/fel4_config/manifest/manifest_errors.py
"""Everything that can go wrong while reading or resolving a fel4 manifest.

Every error subclasses ValueError so callers that only care about
"bad manifest" can catch one type. Each class keeps its context as
attributes for programmatic use; str() gives the user-facing message.
"""

from collections.abc import Iterable


def _options(values: Iterable[str]) -> str:
    return ", ".join(repr(v) for v in sorted(values))


class ConfigError(ValueError):
    """Base class for fel4 manifest errors."""


# --- header ------------------------------------------------------------------


class UnknownTarget(ConfigError):
    def __init__(self, target: str, known: Iterable[str]) -> None:
        self.target = target
        self.known = sorted(known)
        xmsg = (
            f"The target {target!r} is not supported; "
            f"expected one of {_options(self.known)}"
        )
        super().__init__(xmsg)


class InvalidPlatformForTarget(ConfigError):
    def __init__(self, target: str, platform: str, valid: Iterable[str]) -> None:
        self.target = target
        self.platform = platform
        self.valid = sorted(valid)
        xmsg = (
            f"The platform {platform!r} cannot be used with target {target!r}; "
            f"expected one of {_options(self.valid)}"
        )
        super().__init__(xmsg)


class EmptyPath(ConfigError):
    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        xmsg = f"The {property_name} property must be a non-empty path"
        super().__init__(xmsg)


class MissingTable(ConfigError):
    def __init__(self, table: str) -> None:
        self.table = table
        xmsg = f"The fel4 manifest is missing the [{table}] table"
        super().__init__(xmsg)


class MissingRequiredProperty(ConfigError):
    def __init__(self, table: str, property_name: str) -> None:
        self.table = table
        self.property_name = property_name
        xmsg = (
            f"The [{table}] table requires the {property_name} property, "
            "but it is absent"
        )
        super().__init__(xmsg)


class NonStringProperty(ConfigError):
    def __init__(self, property_name: str, found: str) -> None:
        self.property_name = property_name
        self.found = found
        xmsg = f"The {property_name} property should be a string, not {found}"
        super().__init__(xmsg)


# --- document structure ------------------------------------------------------


class UnexpectedNestedTable(ConfigError):
    def __init__(self, path: str) -> None:
        self.path = path
        xmsg = f"The fel4 manifest contains an unexpected table or array: {path}"
        super().__init__(xmsg)


class UnexpectedKey(ConfigError):
    def __init__(self, path: str) -> None:
        self.path = path
        xmsg = f"The fel4 manifest contains an unknown key: {path}"
        super().__init__(xmsg)


class UnsupportedValueType(ConfigError):
    def __init__(self, path: str, found: str) -> None:
        self.path = path
        self.found = found
        xmsg = (
            f"The property {path} has an unsupported value type ({found}); "
            "only booleans, 64-bit integers and strings are allowed"
        )
        super().__init__(xmsg)


class InvalidScalarValue(ConfigError):
    def __init__(self, kind: str, value: object, reason: str) -> None:
        self.kind = kind
        self.value = value
        self.reason = reason
        xmsg = f"Cannot build a {kind} property value from {value!r}: {reason}"
        super().__init__(xmsg)


class ReservedPropertyName(ConfigError):
    def __init__(self, path: str, reserved: str) -> None:
        self.path = path
        self.reserved = reserved
        xmsg = (
            f"The property {path} collides with the reserved subtable name "
            f"{reserved!r}; declare it inside a table instead"
        )
        super().__init__(xmsg)


# --- resolution --------------------------------------------------------------


class MissingTargetTable(ConfigError):
    def __init__(self, target: str) -> None:
        self.target = target
        xmsg = f"The fel4 manifest has no [{target}] table for the selected target"
        super().__init__(xmsg)


class MissingPlatformSubtable(ConfigError):
    def __init__(self, target: str, platform: str) -> None:
        self.target = target
        self.platform = platform
        xmsg = (
            f"The fel4 manifest has no [{target}.{platform}] table "
            "for the selected platform"
        )
        super().__init__(xmsg)


class ConflictingPropertyType(ConfigError):
    def __init__(self, name: str, first_kind: str, second_kind: str) -> None:
        self.name = name
        self.first_kind = first_kind
        self.second_kind = second_kind
        xmsg = (
            f"The property {name} is declared as {first_kind} and later "
            f"overridden as {second_kind}; overrides must keep the same type"
        )
        super().__init__(xmsg)


class InvalidBuildProfile(ConfigError):
    def __init__(self, profile: object, valid: Iterable[str]) -> None:
        self.profile = profile
        self.valid = sorted(valid)
        xmsg = (
            f"The build profile {profile!r} is not supported; "
            f"expected one of {_options(self.valid)}"
        )
        super().__init__(xmsg)


# --- loading -----------------------------------------------------------------


class FileReadFailure(ConfigError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        xmsg = f"Unable to read the fel4 manifest file {path}: {reason}"
        super().__init__(xmsg)


class TomlParseFailure(ConfigError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        xmsg = f"The fel4 manifest {source} is unparseable as toml: {reason}"
        super().__init__(xmsg)


class ManifestDiscoveryError(ValueError):
    """Base class for failures locating a manifest from the environment."""


class MissingEnvVar(ManifestDiscoveryError):
    def __init__(self, name: str) -> None:
        self.name = name
        xmsg = f"Required environment variable {name} was absent"
        super().__init__(xmsg)


class InvalidProfileVariable(ManifestDiscoveryError):
    def __init__(self, name: str, value: str, valid: Iterable[str]) -> None:
        self.name = name
        self.value = value
        self.valid = sorted(valid)
        xmsg = (
            f"The {name} environment variable holds {value!r}, which is not a "
            f"build profile; expected one of {_options(self.valid)}"
        )
        super().__init__(xmsg)
