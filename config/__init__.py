"""Configuration module for knife4j-docs.

Provides the adapter settings model and its environment loader.
"""

from .settings import (
    AdapterSettings,
    DEFAULT_NAME,
    normalize_prefix
)

__all__ = [
    'AdapterSettings',
    'DEFAULT_NAME',
    'normalize_prefix'
]
