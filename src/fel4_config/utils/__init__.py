# src/fel4_config/utils/__init__.py

from .utils_files import load_toml, loads_toml
from .utils_types import cast_hint, literal_to_set, schema_from_typeddict


__all__ = [  # noqa: RUF022
    # utils_files
    "load_toml",
    "loads_toml",
    # utils_types
    "cast_hint",
    "literal_to_set",
    "schema_from_typeddict",
]
