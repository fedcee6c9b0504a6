# jsonrpc_core/core/logging.py

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonrpc_core.core.config import Settings, settings as default_settings
from jsonrpc_core.core.exceptions import ConfigurationError

LIBRARY_LOGGER = "jsonrpc_core"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging

    Every record is stamped with the APP_NAME, VERSION and ENVIRONMENT of
    the settings it was built with.
    """

    def __init__(self, config: Optional[Settings] = None):
        super().__init__()
        config = config or default_settings
        self.service = {
            "name": config.APP_NAME,
            "version": config.VERSION,
            "environment": config.ENVIRONMENT,
        }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Request context attached via logger.*(..., extra={"rpc": {...}})
        if hasattr(record, "rpc"):
            log_data["rpc"] = record.rpc

        return json.dumps(log_data, default=str)


class SimpleFormatter(logging.Formatter):
    """Simple human-readable formatter for development"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as readable text"""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname
        name = record.name
        message = record.getMessage()

        log_line = f"[{timestamp}] {level:8s} | {name:20s} | {message}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    Configure logging for the jsonrpc_core logger tree

    Uses JSON output when LOG_FORMAT is "json" and the simple formatter when
    it is "simple". Only the library logger is touched, so host applications
    keep control of the root logger.

    Args:
        config: Settings to read LOG_LEVEL/LOG_FORMAT from (defaults to the
            module-level settings)

    Returns:
        The configured library logger

    Raises:
        ConfigurationError: If LOG_LEVEL or LOG_FORMAT is not recognised
    """
    config = config or default_settings

    log_level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(log_level, int):
        raise ConfigurationError(
            f"Unknown LOG_LEVEL: {config.LOG_LEVEL}",
            details={"LOG_LEVEL": config.LOG_LEVEL}
        )

    log_format = config.LOG_FORMAT.lower()
    if log_format == "json":
        formatter: logging.Formatter = JSONFormatter(config)
    elif log_format == "simple":
        formatter = SimpleFormatter()
    else:
        raise ConfigurationError(
            f"Unknown LOG_FORMAT: {config.LOG_FORMAT}",
            details={"LOG_FORMAT": config.LOG_FORMAT}
        )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(log_level)
    library_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    library_logger.addHandler(console_handler)

    library_logger.debug(
        f"Logging configured: level={config.LOG_LEVEL}, format={config.LOG_FORMAT}"
    )
    return library_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
