# src/fel4_config/utils/utils_files.py


from pathlib import Path
from types import ModuleType
from typing import Any


def _toml_module() -> ModuleType:
    """Return the TOML parser module for this interpreter.

    Uses:
    - `tomllib` (Python 3.11+ standard library)
    - `tomli` (required for Python 3.10 - installed as a dependency)
    """
    try:
        import tomllib  # noqa: PLC0415
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef,unused-ignore] # noqa: PLC0415

    return tomllib


def loads_toml(text: str) -> dict[str, Any]:
    """Parse TOML text into a plain dict tree.

    Raises:
        ValueError: If the text is not valid TOML
    """
    toml = _toml_module()
    try:
        return toml.loads(text)  # type: ignore[no-any-return]
    except toml.TOMLDecodeError as e:
        xmsg = f"Invalid TOML: {e}"
        raise ValueError(xmsg) from e


def load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be parsed
    """
    if not path.exists():
        xmsg = f"TOML file not found: {path}"
        raise FileNotFoundError(xmsg)

    toml = _toml_module()
    with path.open("rb") as f:
        try:
            return toml.load(f)  # type: ignore[no-any-return]
        except toml.TOMLDecodeError as e:
            xmsg = f"Invalid TOML in {path.name}: {e}"
            raise ValueError(xmsg) from e
