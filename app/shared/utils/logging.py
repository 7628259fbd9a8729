# 📄 File: app/shared/utils/logging.py
#
# 🧭 Purpose (Layman Explanation):
# Sets up the app's logging so every message is written as structured JSON with
# the request it belongs to, which makes problems easy to trace later.
#
# 🧪 Purpose (Technical Summary):
# Structured logging built on python-json-logger, with request-scoped context
# variables, a text fallback format for local development and a thin
# StructuredLogger wrapper accepting extra fields.
#
# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking
#
# 🔄 Connected Modules / Calls From:
# app.main (startup), app.api.middleware.logging (request id binding),
# external API clients and database infrastructure (structured events)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}

SERVICE_NAME = 'garden-planner-api'


class ContextualFormatter(logging.Formatter):
    """
    Text formatter that stamps the request id, hostname and service name
    onto every record.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class JSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for structured logging.

    Emits one JSON object per record with a fixed set of base keys; anything
    passed through ``extra`` is merged in by python-json-logger.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('timestamp', False)
        super().__init__('%(levelname)s %(name)s %(message)s', *args, **kwargs)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = log_record.pop('levelname', record.levelname)
        log_record['logger'] = log_record.pop('name', record.name)
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname

        request_id = request_id_var.get('')
        if request_id:
            log_record['request_id'] = request_id


class StructuredLogger:
    """
    Logger wrapper for structured events.

    ``logger.info("message", extra={...})`` and keyword fields both end up
    as top-level keys in the JSON output.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})
        passthrough = {'exc_info', 'stack_info', 'stacklevel'}

        for key, value in kwargs.items():
            if key not in passthrough:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items() if k in passthrough}
        if extra_fields:
            clean_kwargs['extra'] = extra_fields

        self.logger.log(level, message, **clean_kwargs)

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: Optional[int],
        duration_ms: float,
        success: bool,
    ):
        """Log external API call performance."""
        level = logging.INFO if success else logging.WARNING
        self._log(
            level,
            f"API {api_name} {method} {endpoint} - {status_code} - {duration_ms:.2f}ms",
            {
                'event_type': 'external_api_call',
                'api_name': api_name,
                'endpoint': endpoint,
                'method': method,
                'status_code': status_code,
                'duration_ms': round(duration_ms, 2),
                'success': success,
            },
        )


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name, defaults to ``LOG_LEVEL`` from settings
        log_format: ``json`` or ``text``, defaults to ``LOG_FORMAT``
        enable_console: Attach a stdout handler

    Returns:
        The ``startup`` logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Quiet chatty libraries
    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger
    return logger


@contextmanager
def log_context(request_id: str = None):
    """
    Bind a request id to every log record emitted inside the block.

    Args:
        request_id: Request identifier, generated when omitted
    """
    if request_id is None:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield {'request_id': request_id}
    finally:
        request_id_var.reset(token)


__all__ = [
    'request_id_var',
    'ContextualFormatter',
    'JSONFormatter',
    'StructuredLogger',
    'setup_logging',
    'get_logger',
    'log_context',
]
