"""Logging setup for xbquery.

Logging is configured once, on first use, from `settings.LOG_LEVEL`.
Modules obtain a `Logger` through `get_logger(__name__)`; backends use
`Logger(self.__class__.__name__)`.
"""

import logging
from typing import Optional

from xbquery.settings import settings as api_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO"); unknown names fall back to INFO
    """
    global _configured
    if _configured:
        return
    lvl = logging.getLevelName(level.upper())
    logging.basicConfig(level=lvl if isinstance(lvl, int) else logging.INFO, format=_FORMAT)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a module/class logger, configuring global logging if needed."""
    return Logger(name or __name__)


class Logger:
    """Thin wrapper over a standard logger that triggers one-time setup.

    Query building only reports auto-filtered conditions and generated
    artifacts (DEBUG) and ignored options (WARNING).
    """

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or __name__)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)
