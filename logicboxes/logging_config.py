"""
Logging configuration for the LogicBoxes SDK.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs for
tracing a single API call across the codec and transport layers.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import EventDict


# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

# Query keys that must never reach a log line
_REDACTED_KEYS = frozenset({"api-key", "passwd"})

# Third-party loggers that write full request URLs, credentials included
_URL_LOGGERS = ("httpx", "httpcore")


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.
    
    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify
        
    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.
    
    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.
        
    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context.
    
    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for the LogicBoxes SDK.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    
    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()
    
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)
    
    for name in _URL_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
    
    processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.ConsoleRenderer(colors=True),
        ])
    
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.
    
    Args:
        name: Logger name (typically __name__ of the module).
        
    Returns:
        Structured logger instance.
    """
    return structlog.get_logger(f"logicboxes.{name}")


def redact_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of query parameters with credential values masked."""
    return {
        key: ("***" if key in _REDACTED_KEYS else value)
        for key, value in params.items()
    }


# Convenience functions for common logging patterns

def log_api_call(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    namespace: str,
    api_name: str,
    status_code: Optional[int],
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a completed reseller API call.
    
    Args:
        logger: Logger instance
        method: HTTP method ("GET" or "POST")
        namespace: API namespace (e.g. "domains", "customers")
        api_name: Endpoint name within the namespace
        status_code: HTTP status returned, or None if no response was received
        duration_ms: Round-trip duration in milliseconds
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_call",
        "method": method,
        "namespace": namespace,
        "api_name": api_name,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    
    log_data.update(kwargs)
    
    if status_code is not None and status_code < 400:
        logger.info("api_call", **log_data)
    else:
        logger.warning("api_call", **log_data)


def log_validation_failure(
    logger: structlog.stdlib.BoundLogger,
    record: str,
    field: str,
    rule: str,
    **kwargs: Any,
) -> None:
    """
    Log a record rejected by the validation gate.
    
    The offending value is never logged.
    
    Args:
        logger: Logger instance
        record: Record type name
        field: Field that failed
        rule: Rule that failed
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "validation_failure",
        "record": record,
        "field": field,
        "rule": rule,
    }
    
    log_data.update(kwargs)
    
    logger.warning("validation_failure", **log_data)
