"""
logs.py - Structured logging helpers.

dyna_sort never installs handlers itself; applications that want
its DEBUG records as JSON call configure_logging().
"""

import json
import logging

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_ATTRS = frozenset({
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
    'message', 'taskName',
})


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.include_extra:
            for key, value in record.__dict__.items():
                if key not in _RESERVED_ATTRS:
                    log_data[key] = value

        return json.dumps(log_data, default=repr)


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: str = None
) -> logging.Logger:
    """
    Configure the dyna_sort logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting
        log_file: Optional log file path

    Returns:
        The configured "dyna_sort" logger
    """
    logger = logging.getLogger("dyna_sort")
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    if json_format:
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger
