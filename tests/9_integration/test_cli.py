# tests/9_integration/test_cli.py
"""End-to-end tests for the fel4-config command line."""

import json
import logging
from pathlib import Path

import pytest

import fel4_config.cli as mod_cli
from fel4_config.logs import getAppLogger
from fel4_config.meta import PROGRAM_DISPLAY
from tests.utils import ARM_TARGET, EXEMPLAR_TOML, X86_TARGET, write_manifest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run every test from an empty directory without cargo variables."""
    monkeypatch.delenv("FEL4_MANIFEST_PATH", raising=False)
    monkeypatch.delenv("PROFILE", raising=False)
    monkeypatch.delenv("FEL4_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


def test_cli_json_output(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)

    # --- execute ---
    code = mod_cli.main([])

    # --- verify ---
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["target"] == X86_TARGET
    assert data["platform"] == "pc99"
    assert data["artifact_path"] == "artifacts"
    assert data["target_specs_path"] == "targets"
    assert data["profile"] == "debug"
    assert data["properties"]["KernelDebugBuild"] is True
    assert data["properties"]["KernelNumPriorities"] == 256  # noqa: PLR2004
    assert data["properties"]["KernelX86MicroArch"] == "nehalem"
    assert list(data["properties"]) == sorted(data["properties"])


def test_cli_release_profile(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)

    # --- execute ---
    code = mod_cli.main(["--profile", "release"])

    # --- verify ---
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["profile"] == "release"
    assert data["properties"]["KernelDebugBuild"] is False
    assert "KernelColourPrinting" not in data["properties"]


def test_cli_reads_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    crate = tmp_path / "crate"
    crate.mkdir()
    path = write_manifest(crate, EXEMPLAR_TOML)
    monkeypatch.setenv("FEL4_MANIFEST_PATH", str(path))
    monkeypatch.setenv("PROFILE", "release")

    # --- execute ---
    code = mod_cli.main([])

    # --- verify ---
    assert code == 0
    assert json.loads(capsys.readouterr().out)["profile"] == "release"


def test_cli_flags_override_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    path = write_manifest(tmp_path, EXEMPLAR_TOML, name="other.toml")
    monkeypatch.setenv("FEL4_MANIFEST_PATH", str(tmp_path / "missing.toml"))
    monkeypatch.setenv("PROFILE", "release")

    # --- execute ---
    code = mod_cli.main(["--manifest", str(path), "--profile", "debug"])

    # --- verify ---
    assert code == 0
    assert json.loads(capsys.readouterr().out)["profile"] == "debug"


def test_cli_cmake_definitions(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)

    # --- execute ---
    code = mod_cli.main(["--format", "cmake"])

    # --- verify ---
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert "-DKernelDebugBuild:BOOL=ON" in lines
    assert "-DKernelArch=x86" in lines
    assert "-DKernelNumDomains=1" in lines
    assert not any(line.startswith("-DKERNEL_PATH=") for line in lines)


def test_cli_cmake_full_build(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)

    # --- execute ---
    code = mod_cli.main(
        ["--format", "cmake", "--cargo-target", X86_TARGET, "--manifest-dir", "k"]
    )

    # --- verify ---
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["-G", "Ninja"]
    assert f"-DKERNEL_PATH={Path('k') / 'deps' / 'seL4_kernel'}" in lines
    assert "-DCMAKE_C_FLAGS=" in lines


def test_cli_cmake_target_mismatch(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)

    # --- execute ---
    code = mod_cli.main(["--format", "cmake", "--cargo-target", ARM_TARGET])

    # --- verify ---
    assert code == 1
    assert capsys.readouterr().out == ""


def test_cli_missing_manifest(capsys: pytest.CaptureFixture[str]) -> None:
    # --- execute ---
    code = mod_cli.main([])

    # --- verify ---
    assert code == 1
    assert capsys.readouterr().out == ""


def test_cli_explicit_manifest_not_found(tmp_path: Path) -> None:
    # --- execute and verify ---
    assert mod_cli.main(["--manifest", str(tmp_path / "nope.toml")]) == 1


def test_cli_invalid_manifest(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    # --- setup ---
    text = EXEMPLAR_TOML.replace('platform = "pc99"', 'platform = "nehalem2"')
    write_manifest(tmp_path, text)

    # --- execute ---
    code = mod_cli.main([])

    # --- verify ---
    assert code == 1
    assert capsys.readouterr().out == ""
    assert "InvalidPlatformForTarget" in caplog.text
    assert "nehalem2" in caplog.text


def test_cli_invalid_env_profile(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)
    monkeypatch.setenv("PROFILE", "bench")

    # --- execute ---
    code = mod_cli.main([])

    # --- verify ---
    assert code == 1
    assert "InvalidProfileVariable" in caplog.text


def test_cli_strict(tmp_path: Path) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML + '\n[extra]\nkey = "value"\n')

    # --- execute and verify ---
    assert mod_cli.main([]) == 0
    assert mod_cli.main(["--strict"]) == 1


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    # --- execute ---
    code = mod_cli.main(["--version"])

    # --- verify ---
    assert code == 0
    assert capsys.readouterr().out.startswith(PROGRAM_DISPLAY)


def test_cli_unknown_flag() -> None:
    # --- execute and verify ---
    with pytest.raises(SystemExit) as exc_info:
        mod_cli.main(["--no-such-flag"])
    assert exc_info.value.code == 2


def test_cli_log_level_from_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("FEL4_LOG_LEVEL", "warning")

    # --- execute ---
    code = mod_cli.main([])

    # --- verify ---
    assert code == 0
    assert getAppLogger().getEffectiveLevel() == logging.WARNING


def test_cli_log_level_flag_beats_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    # --- setup ---
    write_manifest(tmp_path, EXEMPLAR_TOML)
    monkeypatch.setenv("FEL4_LOG_LEVEL", "warning")

    # --- execute ---
    code = mod_cli.main(["--log-level", "error"])

    # --- verify ---
    assert code == 0
    assert getAppLogger().getEffectiveLevel() == logging.ERROR
