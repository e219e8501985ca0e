"""
Logging Configuration

yapgeom modules log through ``logging.getLogger(__name__)`` only.  The
package logger carries a ``NullHandler`` (see ``yapgeom/__init__.py``),
so nothing is printed until an application opts in with
``setup_logging()``.
"""
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "yapgeom"

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _installed(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, "yapgeom_handler", False)]


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None,
                  fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Send yapgeom's diagnostics to ``stream`` (stderr by default) and,
    optionally, to ``log_file``.

    Calling this again replaces the handlers installed by the previous
    call; handlers added by the application are left alone.

    Returns:
        The 'yapgeom' package logger.
    """
    logger = reset_logging()
    logger.setLevel(level)

    formatter = logging.Formatter(fmt, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        h.yapgeom_handler = True
        logger.addHandler(h)

    logger.debug("yapgeom logging enabled at %s", logging.getLevelName(level))
    return logger


def reset_logging() -> logging.Logger:
    """Remove the handlers installed by ``setup_logging()``."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in _installed(logger):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    return logger
