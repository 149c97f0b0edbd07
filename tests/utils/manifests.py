# tests/utils/manifests.py
"""Shared test helpers for constructing manifest documents and models."""

from pathlib import Path
from typing import Any

import fel4_config.manifest.manifest_types as mod_types


X86_TARGET = "x86_64-sel4-fel4"
ARM_TARGET = "arm-sel4-fel4"

# Trimmed-down copy of the default fel4.toml shipped with fel4 projects
EXEMPLAR_TOML = """\
[fel4]
target = "x86_64-sel4-fel4"
platform = "pc99"
artifact-path = "artifacts"
target-specs-path = "targets"

[x86_64-sel4-fel4]
BuildWithCommonSimulationSettings = true
KernelOptimisation = "-O2"
KernelVerificationBuild = false
KernelBenchmarks = "none"
KernelFastpath = true
LibSel4FunctionAttributes = "public"
KernelNumDomains = 1
HardwareDebugAPI = false
KernelFWholeProgram = false
KernelResetChunkBits = 8
KernelNumPriorities = 256
KernelStackBits = 12
KernelTimeSlice = 5
KernelTimerTickMS = 2
KernelArch = "x86"
KernelX86Sel4Arch = "x86_64"
KernelMaxNumNodes = 1
KernelRetypeFanOutLimit = 256
KernelRootCNodeSizeBits = 19
KernelFPU = "FXSAVE"
KernelHugePage = true
KernelIOMMU = false
KernelIRQController = "IOAPIC"
KernelLAPICMode = "XAPIC"
KernelSyscall = "syscall"
KernelXSaveSize = 576
LinkPageSize = 4096

[x86_64-sel4-fel4.pc99]
KernelX86MicroArch = "nehalem"
LibPlatSupportX86ConsoleDevice = "com1"

[x86_64-sel4-fel4.debug]
KernelDebugBuild = true
KernelPrinting = true
KernelColourPrinting = true
KernelUserStackTraceLength = 16

[x86_64-sel4-fel4.release]
KernelDebugBuild = false
KernelPrinting = false

[arm-sel4-fel4]
BuildWithCommonSimulationSettings = true
KernelOptimisation = "-O2"
KernelArch = "arm"
KernelArmSel4Arch = "aarch32"
KernelIPCBufferLocation = "threadID_register"
KernelMaxNumNodes = 1
KernelNumDomains = 1

[arm-sel4-fel4.sabre]
KernelARMPlatform = "sabre"
ElfloaderImage = "elf"
ElfloaderMode = "secure supervisor"
ElfloaderErrata764369 = true

[arm-sel4-fel4.debug]
KernelDebugBuild = true
KernelPrinting = true

[arm-sel4-fel4.release]
KernelDebugBuild = false
KernelPrinting = false
"""


# ---------------------------------------------------------------------------
# Factories for raw documents
# ---------------------------------------------------------------------------


def make_header_table(
    *,
    target: str = X86_TARGET,
    platform: str = "pc99",
    artifact_path: str = "artifacts",
    target_specs_path: str = "targets",
) -> dict[str, Any]:
    """Return a raw [fel4] table as the TOML parser would produce it."""
    return {
        "target": target,
        "platform": platform,
        "artifact-path": artifact_path,
        "target-specs-path": target_specs_path,
    }


def make_document(
    target_table: dict[str, Any] | None = None,
    *,
    target: str = X86_TARGET,
    platform: str = "pc99",
    **header_overrides: str,
) -> dict[str, Any]:
    """Return a raw document with a header and (optionally) one target table."""
    doc: dict[str, Any] = {
        "fel4": make_header_table(target=target, platform=platform, **header_overrides)
    }
    if target_table is not None:
        doc[target] = target_table
    return doc


# ---------------------------------------------------------------------------
# Factories for typed models
# ---------------------------------------------------------------------------


def make_header(
    *,
    target: str = X86_TARGET,
    platform: str = "pc99",
    artifact_path: str = "artifacts",
    target_specs_path: str = "targets",
) -> mod_types.Header:
    return mod_types.Header(
        target=target,
        platform=platform,
        artifact_path=artifact_path,
        target_specs_path=target_specs_path,
    )


def make_manifest(  # noqa: PLR0913
    base: mod_types.Properties | None = None,
    *,
    platform_layer: mod_types.Properties | None = None,
    debug: mod_types.Properties | None = None,
    release: mod_types.Properties | None = None,
    header: mod_types.Header | None = None,
    include_platform: bool = True,
) -> mod_types.FullManifest:
    """Return a FullManifest with a single target table for the header's target."""
    header = header or make_header()
    platforms = {header.platform: platform_layer or {}} if include_platform else {}
    table = mod_types.TargetTable(
        target=header.target,
        base_properties=base or {},
        platform_subtables=platforms,
        debug_properties=debug or {},
        release_properties=release or {},
    )
    return mod_types.FullManifest(header=header, targets={header.target: table})


def write_manifest(directory: Path, text: str, name: str = "fel4.toml") -> Path:
    """Write manifest text to `directory/name` and return its path."""
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path
