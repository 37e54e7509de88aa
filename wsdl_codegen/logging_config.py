"""Logging setup for wsdl_codegen.

Every module obtains its logger through :func:`get_logger`; applications that
want console output call :func:`setup_logging` once.
"""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "wsdl_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.INFO, show_path: bool = False) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Args:
        level: Logging level name or number.
        show_path: Whether rich should print the emitting source path.

    Returns:
        The configured package logger.
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(show_path=show_path, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger
