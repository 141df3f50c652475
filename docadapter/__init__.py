"""knife4j-docs: serve an OpenAPI document to the Knife4j viewer UI.

Usage:
    from docadapter import DocAdapter
    adapter = DocAdapter(app.openapi(), name="Orders API")
    app.add_middleware(adapter.serve_starlette("/doc"))
"""

from .adapter import (
    DEFAULT_NAME,
    NOT_HANDLED,
    DocAdapter,
    Handled,
    NotHandled,
    Outcome,
)
from .assets import get_swagger_location, get_ui_asset_root, load_document
from .errors import ConfigurationError, DocAdapterError, DocumentLoadError

__version__ = "0.1.0"

__all__ = [
    # Adapter
    "DocAdapter",
    "Handled",
    "NotHandled",
    "NOT_HANDLED",
    "Outcome",
    "DEFAULT_NAME",
    # Assets
    "get_ui_asset_root",
    "get_swagger_location",
    "load_document",
    # Errors
    "DocAdapterError",
    "ConfigurationError",
    "DocumentLoadError",
]
