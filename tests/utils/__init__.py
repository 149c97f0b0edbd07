# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL
from .manifests import (
    ARM_TARGET,
    EXEMPLAR_TOML,
    X86_TARGET,
    make_document,
    make_header,
    make_header_table,
    make_manifest,
    write_manifest,
)


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    # manifests
    "ARM_TARGET",
    "EXEMPLAR_TOML",
    "X86_TARGET",
    "make_document",
    "make_header",
    "make_header_table",
    "make_manifest",
    "write_manifest",
]
