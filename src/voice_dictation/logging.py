import logging
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

# Transport libraries log every request at INFO; only their problems are kept.
QUIET_LOGGERS = ("httpx", "httpcore")


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    return handler


def setup_logging(level: str = "INFO"):
    """
    Sends every dictation log record to stdout as one JSON object per line.

    Recording and transcription events attach their context through
    ``extra={...}``, which ends up as top-level keys of the JSON object.
    trace_id and span_id are filled in by ddtrace when the CLI has patched
    the process. Calling this again replaces the previous handler rather
    than stacking a second one.

    Args:
        level: Log level name for the dictation core, e.g. "DEBUG".

    Returns:
        logging.Logger: The root logger.
    """
    handler = _json_handler()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers = [handler]

    for name in QUIET_LOGGERS:
        quiet_logger = logging.getLogger(name)
        quiet_logger.setLevel(logging.WARNING)
        quiet_logger.handlers = [handler]
        quiet_logger.propagate = False

    return root_logger
