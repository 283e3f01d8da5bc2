"""Logging setup shared by all realm_codegen modules.

Loggers live under the ``realm_codegen`` namespace so applications can tune
them as a group. Console output goes through rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACE = "realm_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``realm_codegen``.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def setup_logging(level: str | int = "WARNING", use_rich: bool = True) -> None:
    """Configure the package logger.

    Args:
        level: Level name (``"DEBUG"``, ``"INFO"``...) or numeric level.
        use_rich: Render records with ``RichHandler`` on stderr; plain
            ``StreamHandler`` otherwise.
    """
    global _configured

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(level)
        return

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    handler.setLevel(level)
    logger.addHandler(handler)
    _configured = True
