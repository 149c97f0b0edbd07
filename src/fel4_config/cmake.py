# src/fel4_config/cmake.py
"""Translate a resolved fel4 config into seL4 kernel CMake definitions.

Nothing here runs CMake. The result is a CMakeBuild value that a build
script turns into a command line with `to_args()`.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .constants import (
    ARM_CROSS_COMPILER_PREFIX,
    DEFAULT_CMAKE_GENERATOR,
    DEFAULT_ENV_CARGO_MANIFEST_DIR,
    DEFAULT_ENV_CARGO_TARGET,
    DEFAULT_KERNEL_SUBDIR,
)
from .logs import getAppLogger
from .manifest import ResolvedConfig, ScalarValue


# --- errors -----------------------------------------------------------------


class CMakeConfigurationError(ValueError):
    """Base class for failures preparing a CMake configuration."""


class MissingRequiredEnvVar(CMakeConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        xmsg = f"Missing the required {name} environment variable"
        super().__init__(xmsg)


class TargetMismatch(CMakeConfigurationError):
    def __init__(self, cargo_target: str, manifest_target: str) -> None:
        self.cargo_target = cargo_target
        self.manifest_target = manifest_target
        xmsg = (
            f"Cargo is attempting to build for the {cargo_target} target, "
            f"however fel4.toml has declared the target to be {manifest_target}"
        )
        super().__init__(xmsg)


# --- types ------------------------------------------------------------------


@dataclass
class CMakeBuild:
    """Cache definitions and generator for one seL4 kernel configure step."""

    defines: dict[str, str] = field(default_factory=dict)
    generator: str = DEFAULT_CMAKE_GENERATOR

    def define(self, name: str, value: str | Path) -> None:
        self.defines[name] = str(value)

    def to_args(self) -> list[str]:
        """Render as CMake command-line arguments."""
        args = ["-G", self.generator]
        args.extend(f"-D{name}={value}" for name, value in self.defines.items())
        return args


# --- definitions ------------------------------------------------------------


def cmake_definition(name: str, value: ScalarValue) -> tuple[str, str]:
    """Return the (key, value) CMake definition for one property.

    Booleans become typed `NAME:BOOL` entries set to ON/OFF.
    """
    if value.kind == "boolean":
        return f"{name}:BOOL", "ON" if value.value else "OFF"
    return name, str(value.value)


def cmake_definitions(properties: Mapping[str, ScalarValue]) -> dict[str, str]:
    return dict(cmake_definition(name, value) for name, value in properties.items())


def configure_cmake_build(
    config: ResolvedConfig,
    manifest_dir: str | Path,
    cargo_target: str,
) -> CMakeBuild:
    """Build the seL4 kernel CMake configuration for `config`.

    Assumes the seL4 kernel lives at `<manifest_dir>/deps/seL4_kernel`.
    """
    logger = getAppLogger()
    if cargo_target != config.target:
        raise TargetMismatch(cargo_target, config.target)

    kernel_path = Path(manifest_dir).joinpath(*DEFAULT_KERNEL_SUBDIR)
    build = CMakeBuild()

    # CMAKE_TOOLCHAIN_FILE is resolved immediately by CMake
    build.define("CMAKE_TOOLCHAIN_FILE", kernel_path / "gcc.cmake")
    build.define("KERNEL_PATH", kernel_path)

    for name, value in cmake_definitions(config.properties).items():
        build.define(name, value)

    # The inferred arm toolchain lacks hardware floating point support
    if config.target == "arm-sel4-fel4":
        build.define("CROSS_COMPILER_PREFIX", ARM_CROSS_COMPILER_PREFIX)

    # seL4 sets its own flags; keep CMake from inheriting any
    build.define("CMAKE_C_FLAGS", "")
    build.define("CMAKE_CXX_FLAGS", "")

    logger.trace(
        f"[configure_cmake_build] {len(build.defines)} definitions for {config.target}"
    )
    return build


def configure_cmake_build_from_env(
    config: ResolvedConfig,
    environ: Mapping[str, str] | None = None,
) -> CMakeBuild:
    """Like configure_cmake_build(), reading CARGO_MANIFEST_DIR and TARGET."""
    env = os.environ if environ is None else environ

    manifest_dir = env.get(DEFAULT_ENV_CARGO_MANIFEST_DIR)
    if manifest_dir is None:
        raise MissingRequiredEnvVar(DEFAULT_ENV_CARGO_MANIFEST_DIR)
    cargo_target = env.get(DEFAULT_ENV_CARGO_TARGET)
    if cargo_target is None:
        raise MissingRequiredEnvVar(DEFAULT_ENV_CARGO_TARGET)

    return configure_cmake_build(config, manifest_dir, cargo_target)
