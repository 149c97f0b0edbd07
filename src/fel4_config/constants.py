# src/fel4_config/constants.py
"""Central constants used across the project."""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_MANIFEST_PATH: str = "FEL4_MANIFEST_PATH"
DEFAULT_ENV_PROFILE: str = "PROFILE"  # set by cargo for build scripts
DEFAULT_ENV_CARGO_MANIFEST_DIR: str = "CARGO_MANIFEST_DIR"
DEFAULT_ENV_CARGO_TARGET: str = "TARGET"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_OUTPUT_FORMAT: str = "json"

# --- manifest defaults ---
DEFAULT_MANIFEST_NAME: str = "fel4.toml"
DEFAULT_BUILD_PROFILE: str = "debug"
DEFAULT_STRICT_MANIFEST: bool = False

# --- cmake defaults ---
DEFAULT_KERNEL_SUBDIR: tuple[str, ...] = ("deps", "seL4_kernel")
DEFAULT_CMAKE_GENERATOR: str = "Ninja"
ARM_CROSS_COMPILER_PREFIX: str = "arm-linux-gnueabihf-"

# --- cli ---
OUTPUT_FORMATS: tuple[str, ...] = ("json", "cmake")
LEVEL_ORDER: list[str] = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",  # disables all logging
]
