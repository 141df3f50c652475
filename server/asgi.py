"""Starlette/FastAPI middleware serving the Knife4j documentation endpoints."""

import logging
from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from docadapter.adapter import DocAdapter, Handled
from observability.logging import get_logger

logger = logging.getLogger(__name__)


class DocAdapterMiddleware(BaseHTTPMiddleware):
    """Answer adapter routes from ``DocAdapter.classify``; pass the rest to ``call_next``."""

    def __init__(self, app, adapter: DocAdapter, prefix: str = "", legacy: bool = False):
        super().__init__(app)
        self.adapter = adapter
        self.prefix = prefix
        self.legacy = legacy
        self.logger = get_logger(__name__, prefix=prefix, middleware=type(self).__name__)

    async def dispatch(self, request: Request, call_next):
        outcome = self.adapter.classify(
            request.url.path,
            request.query_params,
            prefix=self.prefix,
            legacy=self.legacy,
        )
        if isinstance(outcome, Handled):
            self.logger.debug("Answered documentation request", extra={"path": request.url.path, "status": outcome.status})
            return JSONResponse(outcome.body, status_code=outcome.status)

        return await call_next(request)


def setup_doc_adapter(
    app: FastAPI,
    adapter: DocAdapter,
    prefix: str = "",
    legacy: bool = False,
) -> None:
    """Register the documentation middleware on a FastAPI application."""
    app.add_middleware(DocAdapterMiddleware, adapter=adapter, prefix=prefix, legacy=legacy)
    logger.info(f"Knife4j documentation endpoints configured (prefix='{prefix}', legacy={legacy})")
