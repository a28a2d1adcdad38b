"""
Logging setup for the API.

JSON lines in production (JSON_LOGS=true), plain text during development.
"""

import logging
import sys
from typing import Any, Dict, Optional, TextIO
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

JSON_FORMAT = '%(timestamp)s %(level)s %(logger)s %(module)s %(funcName)s %(message)s'
TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that drown out request logs at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    Adds timestamp, level, logger and call site to every JSON record.
    Warnings and above also carry the source line and path.
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record.update(
            timestamp=datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            level=record.levelname,
            logger=record.name,
            module=record.module,
            function=record.funcName,
        )
        if record.levelno >= logging.WARNING:
            log_record.update(line=record.lineno, pathname=record.pathname)


def setup_logging(log_level: str = "INFO", json_logs: bool = True, stream: Optional[TextIO] = None) -> None:
    """
    Replace the root logger's handlers with a single console handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines when True, human-readable text when False
        stream: Where to write; defaults to stdout
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    if json_logs:
        handler.setFormatter(CustomJsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
