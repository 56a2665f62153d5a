"""
Error Logging Service

Logging setup and error reporting for the application:
- Console logging at the configured level
- Optional rotating log files (when LOG_DIR is set and writable)
- Structured error reports with request context and traceback

Usage:
    from app.services.error_logging import error_logger

    try:
        # some code
    except Exception as e:
        error_id = error_logger.log_error(e, request=request)
"""

import logging
import traceback
import json
import sys
import uuid
from datetime import datetime, timezone
from typing import Optional, Any, Dict
from pathlib import Path
from logging.handlers import RotatingFileHandler

from app.core.config import settings


LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
DETAILED_LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Create specific error logger
logger = logging.getLogger("error_logging")


def _file_handler(path: Path, level: int, fmt: str, backup_count: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def configure_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> Optional[Path]:
    """
    Configure the root logger.

    Always installs a console handler. When log_dir is given and writable,
    also writes errors.log (ERROR and above) and app_detailed.log (all
    levels), both rotated at 10 MB.

    Args:
        log_dir: Directory for log files (defaults to settings.LOG_DIR)
        level: Root log level name (defaults to settings.LOG_LEVEL)

    Returns:
        The log directory if file logging is enabled, None otherwise
    """
    log_dir = settings.LOG_DIR if log_dir is None else log_dir
    level = (level or settings.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(getattr(h, "_subscription_service", False) for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        console._subscription_service = True
        root_logger.addHandler(console)

    if not log_dir:
        return None

    logs_path = Path(log_dir)
    try:
        logs_path.mkdir(parents=True, exist_ok=True)
        # Test if we can write to the directory
        test_file = logs_path / ".write_test"
        test_file.touch()
        test_file.unlink()
    except (PermissionError, OSError) as e:
        logger.warning("Cannot write to logs directory %s: %s. File logging disabled.", logs_path, e)
        return None

    for handler in (
        _file_handler(logs_path / "errors.log", logging.ERROR, LOG_FORMAT, 10),
        _file_handler(logs_path / "app_detailed.log", logging.DEBUG, DETAILED_LOG_FORMAT, 5),
    ):
        handler._subscription_service = True
        root_logger.addHandler(handler)

    logger.info("File logging enabled in %s", logs_path)
    return logs_path


def truncate_string(s: str, max_length: int = 10000) -> str:
    """Truncate string to max length."""
    if len(s) > max_length:
        return s[:max_length] + f"... [TRUNCATED, total {len(s)} chars]"
    return s


class ErrorLogger:
    """
    Writes error reports to the log.
    """

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
    ) -> uuid.UUID:
        """
        Log an error with full context.

        Args:
            error: The exception that occurred
            request: FastAPI Request object (optional)
            severity: debug, info, warning, error, critical
            context: Additional context data

        Returns:
            UUID identifying this error report, for correlating a client
            response with the log entry
        """
        error_id = uuid.uuid4()
        timestamp = datetime.now(timezone.utc)

        error_type = type(error).__name__
        error_message = str(error)

        # Get full traceback
        exc_type, exc_value, exc_tb = sys.exc_info()
        if exc_tb:
            stack_trace = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
        else:
            stack_trace = ''.join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )

        error_buffer_parts = [
            f"=== ERROR LOG {error_id} ===",
            f"Timestamp: {timestamp.isoformat()}",
            f"Type: {error_type}",
            f"Message: {error_message}",
            f"Severity: {severity}",
        ]

        request_path = None
        if request is not None:
            try:
                request_path = str(request.url.path)
                client_ip = request.client.host if request.client else None
                error_buffer_parts.extend([
                    "\n=== REQUEST ===",
                    f"Method: {request.method}",
                    f"Path: {request_path}",
                    f"Query: {request.url.query or None}",
                    f"Client IP: {client_ip}",
                    f"User Agent: {request.headers.get('user-agent')}",
                ])
            except Exception as req_err:
                error_buffer_parts.append(f"\n[Failed to extract request info: {req_err}]")

        if context:
            error_buffer_parts.extend([
                "\n=== CONTEXT ===",
                json.dumps(context, indent=2, default=str),
            ])

        error_buffer_parts.extend([
            "\n=== STACK TRACE ===",
            stack_trace,
        ])
        error_buffer = truncate_string("\n".join(error_buffer_parts), 50000)  # Max 50KB

        log_message = f"[{error_id}] {error_type}: {error_message} | Path: {request_path or 'N/A'}"
        log_level = logging.getLevelName(severity.upper())
        if not isinstance(log_level, int):
            log_level = logging.ERROR
        logger.log(log_level, log_message)
        logger.debug(error_buffer)

        return error_id

    def log_warning(self, message: str):
        """Log a warning message."""
        logger.warning(message)


# Singleton instance
error_logger = ErrorLogger()
