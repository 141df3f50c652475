"""Adapter configuration for knife4j-docs.

Settings are opt-in: ``DocAdapter`` never reads the environment on its own,
callers build an ``AdapterSettings`` (usually via ``from_env``) and pass it
to ``DocAdapter.from_settings``.
"""

import os
import logging
from typing import Optional
from pydantic import BaseModel, Field

from docadapter.adapter import DEFAULT_NAME

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class AdapterSettings(BaseModel):
    """Documentation adapter configuration."""
    name: str = Field(default=DEFAULT_NAME, description="Display name shown in the viewer UI")
    prefix: str = Field(default="", description="Path prefix the viewer UI is mounted under")
    legacy_routes: bool = Field(default=False, description="Serve the tag-grouped legacy endpoints")

    # Asset locations
    ui_asset_root: Optional[str] = Field(default=None, description="Directory holding the viewer UI assets")
    swagger_location: Optional[str] = Field(default=None, description="Local swagger.json advertised in services.json")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Emit JSON log lines")

    @classmethod
    def from_env(cls) -> 'AdapterSettings':
        """Create configuration from environment variables."""
        settings = cls(
            name=os.getenv('KNIFE4J_DOC_NAME', DEFAULT_NAME),
            prefix=normalize_prefix(os.getenv('KNIFE4J_DOC_PREFIX', '')),
            legacy_routes=os.getenv('KNIFE4J_LEGACY_ROUTES', 'false').lower() in _TRUTHY,
            ui_asset_root=os.getenv('KNIFE4J_UI_PATH') or None,
            swagger_location=os.getenv('KNIFE4J_SWAGGER_LOCATION') or None,
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            log_json=os.getenv('LOG_FORMAT', 'text').lower() == 'json',
        )
        logger.debug(f"Loaded adapter settings from environment: prefix={settings.prefix!r}")
        return settings


def normalize_prefix(prefix: str) -> str:
    """Turn ``doc/`` or ``/doc/`` into ``/doc``; ``/`` and blanks become ``""``."""
    prefix = prefix.strip().strip("/")
    return f"/{prefix}" if prefix else ""
