"""HTTP framework integrations for knife4j-docs."""

from .wsgi import DocAdapterWSGIMiddleware
from .asgi import DocAdapterMiddleware, setup_doc_adapter

__all__ = [
    "DocAdapterWSGIMiddleware",
    "DocAdapterMiddleware",
    "setup_doc_adapter"
]
