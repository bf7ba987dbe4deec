"""Logging configuration for the ZTE SMS client."""

import logging
import sys

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("zte-sms")

_MASK = "********"


class PasswordFilter(logging.Filter):
    """Replace secrets in log records with asterisks."""

    def __init__(self, *secrets: str):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def add(self, secret: str) -> None:
        """Also mask *secret*, e.g. a password hash derived mid-run."""
        if secret and secret not in self.secrets:
            self.secrets.append(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        message = record.getMessage()
        for secret in self.secrets:
            message = message.replace(secret, _MASK)
        record.msg = message
        record.args = ()
        return True


# Verbose request tracing from the transport, shown only with --debug
_TRANSPORT_LOGGERS = ("urllib3",)

_LEVEL_COLORS = {
    "DEBUG":   "cyan",
    "INFO":    "green",
    "WARNING": "yellow",
    "ERROR":   "red",
}


def _build_handler(stream) -> logging.Handler:
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler(stream)
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s %(name)s [%(levelname)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors=_LEVEL_COLORS,
        ))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(name)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S"
        ))
    return handler


def setup_logging(debug: bool = False, stream=None) -> logging.Handler:
    """
    Send diagnostics to *stream* (stderr by default).

    stdout is kept for the inbox listing so it can be piped.  With *debug*
    the urllib3 connection log is attached to the same handler.
    """
    handler = _build_handler(stream if stream is not None else sys.stderr)

    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.addHandler(handler)
    log.propagate = False

    for name in _TRANSPORT_LOGGERS:
        transport = logging.getLogger(name)
        transport.handlers.clear()
        if debug:
            transport.setLevel(logging.DEBUG)
            transport.addHandler(handler)
        else:
            transport.setLevel(logging.WARNING)
    return handler
