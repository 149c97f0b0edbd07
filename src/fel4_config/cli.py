# src/fel4_config/cli.py

import argparse
import json
import os
import platform
import sys
from difflib import get_close_matches
from pathlib import Path

from .cmake import cmake_definitions, configure_cmake_build
from .constants import (
    DEFAULT_BUILD_PROFILE,
    DEFAULT_ENV_MANIFEST_PATH,
    DEFAULT_ENV_PROFILE,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_STRICT_MANIFEST,
    LEVEL_ORDER,
    OUTPUT_FORMATS,
)
from .logs import getAppLogger
from .manifest import (
    BUILD_PROFILES,
    ResolvedConfig,
    find_manifest,
    get_full_manifest,
    parse_profile_variable,
    resolve,
)
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT, get_metadata


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        # Build known option strings: ["-v", "--verbose", "--log-level", ...]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # Argparse message for bad flags is typically
        # "unrecognized arguments: --profle ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description=(
            "Resolve a fel4 manifest into the flat property set for its "
            "selected target, platform and build profile."
        ),
    )

    parser.add_argument(
        "-m",
        "--manifest",
        help=(
            f"Path to the fel4 manifest (default: ${DEFAULT_ENV_MANIFEST_PATH}, "
            f"else the nearest {DEFAULT_MANIFEST_NAME} in this or a parent directory)."
        ),
    )
    parser.add_argument(
        "-p",
        "--profile",
        choices=BUILD_PROFILES,
        default=None,
        help=(
            f"Build profile to resolve (default: ${DEFAULT_ENV_PROFILE}, "
            f"else {DEFAULT_BUILD_PROFILE})."
        ),
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format for the resolved configuration.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=DEFAULT_STRICT_MANIFEST,
        help="Treat unknown keys in the manifest as errors instead of warnings.",
    )

    # --- CMake output ---
    parser.add_argument(
        "--cargo-target",
        help=(
            "Cargo target being built; with --format cmake, emit the full seL4 "
            "kernel configuration and check it matches the manifest target."
        ),
    )
    parser.add_argument(
        "--manifest-dir",
        help=(
            "Crate directory containing deps/seL4_kernel "
            "(default: the manifest's directory)."
        ),
    )

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


# --------------------------------------------------------------------------- #
# Main entry helpers
# --------------------------------------------------------------------------- #


def _initialize_logger(args: argparse.Namespace) -> None:
    """Initialize logger with CLI args, env vars, and defaults."""
    logger = getAppLogger()
    log_level = logger.determineLogLevel(args=args)
    logger.setLevel(log_level)
    logger.trace("[BOOT] log-level initialized: %s", logger.effectiveLevelName)

    logger.debug(
        "Runtime: Python %s (%s)\n    %s",
        platform.python_version(),
        platform.python_implementation(),
        sys.version.replace("\n", " "),
    )


def _resolve_from_args(args: argparse.Namespace) -> tuple[Path, ResolvedConfig] | None:
    """Locate, load and resolve the manifest selected by CLI and environment.

    Returns None if no manifest could be found (already logged).
    """
    logger = getAppLogger()

    explicit = args.manifest or os.environ.get(DEFAULT_ENV_MANIFEST_PATH)
    manifest_path = find_manifest(Path.cwd().resolve(), explicit)
    if manifest_path is None:
        return None
    logger.debug("Using manifest: %s", manifest_path)

    env_profile = os.environ.get(DEFAULT_ENV_PROFILE)
    if args.profile:
        profile = args.profile
    elif env_profile:
        profile = parse_profile_variable(env_profile)
    else:
        profile = DEFAULT_BUILD_PROFILE

    full = get_full_manifest(manifest_path, strict=args.strict)
    return manifest_path, resolve(full, profile)


def _render(
    config: ResolvedConfig,
    args: argparse.Namespace,
    manifest_path: Path,
) -> str:
    if args.format == "json":
        return json.dumps(config.as_dict(), indent=2)

    # --- cmake ---
    if args.cargo_target:
        manifest_dir = args.manifest_dir or manifest_path.parent
        build = configure_cmake_build(config, manifest_dir, args.cargo_target)
        return "\n".join(build.to_args())
    return "\n".join(
        f"-D{name}={value}"
        for name, value in cmake_definitions(config.properties).items()
    )


def main(argv: list[str] | None = None) -> int:
    logger = getAppLogger()

    parser = _setup_parser()
    args = parser.parse_args(argv)

    try:
        # --- Early runtime init (use CLI + env + defaults) ---
        _initialize_logger(args)

        # --- Version flag ---
        if args.version:
            print(f"{PROGRAM_DISPLAY} {get_metadata()}")  # noqa: T201
            return 0

        result = _resolve_from_args(args)
        if result is None:
            return 1
        manifest_path, config = result

        print(_render(config, args, manifest_path))  # noqa: T201

    except (FileNotFoundError, ValueError) as e:
        # controlled termination: manifest, discovery and cmake errors
        logger.reportFailure(e)
        return 1

    except Exception as e:  # noqa: BLE001
        logger.reportInternalError(e)
        return 1

    else:
        return 0
