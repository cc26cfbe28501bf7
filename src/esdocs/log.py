"""
esdocs Log — Connection Diagnostics Wiring
==========================================

Routes connection diagnostics to a stream (stderr by default), each line
prefixed with ``ELASTIC``. Two sources feed it:

    elastic_transport   node failures, retries, sniff errors (WARNING)
    esdocs              startup failures such as an unanswered ping
"""

import logging
import sys
from typing import Optional, TextIO


TRANSPORT_LOGGER = "elastic_transport"
PACKAGE_LOGGER = "esdocs"
ERROR_LOG_FORMAT = "ELASTIC %(asctime)s %(message)s"


class _ErrorLogHandler(logging.StreamHandler):
    """Marker subclass so repeated configuration can find its own handler."""


def _find_handler(logger: logging.Logger) -> Optional[_ErrorLogHandler]:
    for handler in logger.handlers:
        if isinstance(handler, _ErrorLogHandler):
            return handler
    return None


def configure_error_log(
    stream: Optional[TextIO] = None,
    level: int = logging.WARNING
) -> logging.Handler:
    """
    Attach the diagnostics handler to the transport and package loggers.

    The transport reports node failures and retries at WARNING, so that is
    the default threshold. Calling this more than once reuses the existing
    handler; only its stream and level are updated.

    Args:
        stream: Target stream (default: ``sys.stderr``)
        level: Minimum level written to the stream

    Returns:
        The installed handler
    """
    target = stream if stream is not None else sys.stderr
    loggers = [logging.getLogger(TRANSPORT_LOGGER), logging.getLogger(PACKAGE_LOGGER)]

    handler = _find_handler(loggers[0])
    if handler is None:
        handler = _ErrorLogHandler(target)
        handler.setFormatter(logging.Formatter(ERROR_LOG_FORMAT))
    else:
        handler.setStream(target)
    handler.setLevel(level)

    for logger in loggers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return handler
