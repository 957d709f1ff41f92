"""Logging setup for drivers embedding adoc2confluence.

The rendering modules log through ``logging.getLogger(__name__)`` and only
report fall-through decisions (a dropped code language, an unresolved
cross-reference, an unknown anchor type) at DEBUG level. A publishing
driver that wants to see them calls :func:`configure_logging` once before
rendering. Only the ``adoc2confluence`` logger tree is touched; the root
logger and any handler the driver installed itself are left alone.

"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "adoc2confluence"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"

# Set on handlers installed here, so reconfiguring never removes foreign ones
_OWNED_HANDLER_FLAG = "_adoc2confluence_owned"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _owned_handlers(target_logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in target_logger.handlers if getattr(handler, _OWNED_HANDLER_FLAG, False)]


def _install(target_logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_HANDLER_FLAG, True)
    target_logger.addHandler(handler)


def reset_logging(logger_name: str = PACKAGE_LOGGER_NAME) -> logging.Logger:
    """Remove the handlers installed by :func:`configure_logging`.

    Owned handlers are closed, propagation to the root logger is restored
    and the logger level goes back to NOTSET.

    Returns
    -------
    logging.Logger
        The reset logger
    """
    target_logger = logging.getLogger(logger_name)
    for handler in _owned_handlers(target_logger):
        target_logger.removeHandler(handler)
        handler.close()
    target_logger.setLevel(logging.NOTSET)
    target_logger.propagate = True
    return target_logger


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Send the library's log records to a console stream and optional file.

    Calling it again replaces the handlers of the previous call. While they
    are attached the logger stops propagating, so records are not printed a
    second time by handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (``"DEBUG"``); unknown names
        select INFO
    log_file : str, optional
        Path of a file receiving the same records, opened in append mode
    trace_mode : bool, default False
        Prefix records with a timestamp and the emitting module
    stream : text stream, optional
        Console stream, ``sys.stderr`` by default
    logger_name : str, default "adoc2confluence"
        Logger to configure, e.g. ``"adoc2confluence.languages"`` to follow
        a single module

    Returns
    -------
    logging.Logger
        The configured logger

    Examples
    --------
        >>> import io
        >>> buffer = io.StringIO()
        >>> log = configure_logging("debug", stream=buffer)
        >>> logging.getLogger("adoc2confluence.languages").debug("dropped %s", "rust")
        >>> buffer.getvalue()
        'DEBUG: dropped rust\\n'
        >>> _ = reset_logging()

    """
    level = _resolve_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    target_logger = reset_logging(logger_name)
    target_logger.setLevel(level)
    target_logger.propagate = False

    _install(target_logger, logging.StreamHandler(stream or sys.stderr), level, formatter)

    if log_file:
        try:
            _install(target_logger, logging.FileHandler(log_file, mode="a", encoding="utf-8"), level, formatter)
        except OSError as e:
            target_logger.warning("Could not open log file %s: %s", log_file, e)
        else:
            target_logger.debug("Also logging to %s", log_file)

    return target_logger
