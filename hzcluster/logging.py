"""Loggers of the cluster configuration builders.

Each builder logs to its own component logger under ``hzcluster``
(``hzcluster.factory``, ``hzcluster.join``, ``hzcluster.discovery``), unless
the caller hands it a logger of its own. No handler is installed unless
:func:`configure_logging` is called.

Example:
    >>> configure_logging(level=logging.DEBUG)
    >>> set_level(logging.WARNING, "discovery")
"""

import logging
from typing import Optional


HZCLUSTER_ROOT_LOGGER = "hzcluster"


def get_logger(component: str = "") -> logging.Logger:
    """Get the logger of a builder component, or the root logger if empty."""
    if component:
        return logging.getLogger(f"{HZCLUSTER_ROOT_LOGGER}.{component}")
    return logging.getLogger(HZCLUSTER_ROOT_LOGGER)


def configure_logging(
    level: int = logging.INFO,
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Send builder diagnostics to a handler.

    A handler is only attached when the root ``hzcluster`` logger has none,
    so repeated calls just change the level.

    Args:
        level: Logging level, e.g. ``logging.DEBUG`` to see which discovery
            provider was chosen and how the join configuration looks.
        format_string: Format of the records.
        handler: Handler to attach. Defaults to a ``StreamHandler``.

    Returns:
        The root ``hzcluster`` logger.
    """
    logger = get_logger()
    logger.setLevel(level)

    if not logger.handlers:
        handler = handler or logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    return logger


def set_level(level: int, component: str = "") -> None:
    """Set the level of one builder component, or of all of them if empty."""
    get_logger(component).setLevel(level)
