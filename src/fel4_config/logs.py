# src/fel4_config/logs.py

import logging
from typing import cast

from apathetic_logging import (
    Logger,
    registerDefaultLogLevel,
    registerLogger,
    registerLogLevelEnvVars,
)

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_MANIFEST, PROGRAM_PACKAGE


class AppLogger(Logger):
    """fel4-config logger.

    Adds the failure reporting shared by the CLI and by build scripts
    that call the library directly.
    """

    def reportFailure(self, exc: BaseException) -> None:  # noqa: N802
        """Report a manifest, discovery or CMake failure.

        The error kind is part of the message so build logs stay greppable.
        A traceback is only attached at debug verbosity.
        """
        self.errorIfNotDebug(
            "%s error (%s): %s", PROGRAM_MANIFEST, type(exc).__name__, exc
        )

    def reportInternalError(self, exc: BaseException) -> None:  # noqa: N802
        self.criticalIfNotDebug("Unexpected internal error: %s", exc)


# --- Logger initialization ---------------------------------------------------

# Must run before any logger is created.
logging.setLoggerClass(AppLogger)

# Registers TRACE, TEST and SILENT
AppLogger.extendLoggingModule()

# FEL4_LOG_LEVEL wins over the generic LOG_LEVEL
registerLogLevelEnvVars(
    [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]
)
registerDefaultLogLevel(DEFAULT_LOG_LEVEL)
registerLogger(PROGRAM_PACKAGE)

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))


# --- Convenience utils ---------------------------------------------------------


def getAppLogger() -> AppLogger:  # noqa: N802
    """Return the fel4_config logger."""
    return _APP_LOGGER
