"""Observability package for knife4j-docs."""

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    get_logger,
    context_fields,
    ContextLogger,
    JSONFormatter,
    ColoredFormatter
)

__all__ = [
    'setup_logging',
    'setup_logging_from_settings',
    'get_logger',
    'context_fields',
    'ContextLogger',
    'JSONFormatter',
    'ColoredFormatter'
]
