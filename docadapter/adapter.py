"""Request classification for the Knife4j documentation endpoints.

``DocAdapter.classify`` is the single place that decides whether a request
belongs to the adapter. The framework middlewares in ``server`` only
translate its ``Outcome`` into their own response calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .assets import get_swagger_location
from .document import (
    ALL_GROUPS,
    SWAGGER_VERSION,
    build_group_resources,
    copy_document,
    filter_by_tag,
    with_group_urls,
)
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_NAME = "API接口文档"

SERVICES_PATH = "/services.json"
SWAGGER_CONFIG_PATH = "/v3/api-docs/swagger-config"
SWAGGER_RESOURCES_PATH = "/swagger-resources"
API_DOCS_PREFIX = "/api-docs/"


@dataclass(frozen=True)
class Handled:
    """The adapter answers the request with ``body`` as JSON."""
    body: Any
    status: int = 200


@dataclass(frozen=True)
class NotHandled:
    """The request is not for the adapter; continue down the chain."""


NOT_HANDLED = NotHandled()

_EMPTY = object()

Outcome = Union[Handled, NotHandled]


class DocAdapter:
    """Expose an OpenAPI document through the endpoints Knife4j expects.

    Args:
        document: OpenAPI document produced by an external generator
        name: Display name of the service in the viewer UI
        swagger_location: Local ``swagger.json`` path advertised in the
            service descriptor; defaults to ``<cwd>/static/swagger.json``
    """

    def __init__(
        self,
        document: Any = _EMPTY,
        name: str = DEFAULT_NAME,
        swagger_location: Optional[str] = None,
    ):
        # An explicit None is kept so that classify() can report it.
        self._document = {} if document is _EMPTY else document
        self.name = name
        self.swagger_location = get_swagger_location(swagger_location)

    @classmethod
    def from_settings(cls, settings, document: Optional[Dict[str, Any]] = None) -> 'DocAdapter':
        """Build an adapter from ``config.AdapterSettings``."""
        return cls(
            document if document is not None else {},
            name=settings.name,
            swagger_location=settings.swagger_location,
        )

    def get_document(self) -> Any:
        """Return the wrapped document (a reference, not a copy)."""
        return self._document

    def replace_document(self, document: Dict[str, Any]) -> None:
        """Swap in a regenerated document for subsequent requests."""
        self._document = document
        logger.info(f"OpenAPI document replaced for '{self.name}'", extra={"doc_name": self.name})

    def services(self, prefix: str = "") -> List[Dict[str, str]]:
        """Service-discovery manifest read by the viewer UI."""
        return [
            {
                "name": self.name,
                "url": f"{prefix}/swagger.json",
                "location": self.swagger_location,
                "swaggerVersion": SWAGGER_VERSION,
            }
        ]

    def _validated_document(self) -> Mapping[str, Any]:
        document = self._document
        if not isinstance(document, Mapping):
            raise ConfigurationError()
        return document

    def classify(
        self,
        path: str,
        query: Optional[Mapping[str, str]] = None,
        prefix: str = "",
        legacy: bool = False,
    ) -> Outcome:
        """Decide whether ``path`` is an adapter endpoint and build its body.

        Args:
            path: Exact request path without query string
            query: Query parameters, only read by the legacy group filter
            prefix: Mount prefix of the viewer UI, e.g. ``/doc``
            legacy: Also answer the tag-grouped legacy endpoints

        Returns:
            ``Handled`` with the JSON body and status, or ``NOT_HANDLED``
        """
        try:
            document = self._validated_document()
        except ConfigurationError as e:
            logger.error(
                "DocAdapter: OpenAPI document is invalid or undefined",
                extra={"path": path, "prefix": prefix, "document_type": type(self._document).__name__},
            )
            return Handled(e.to_dict(), status=500)

        if path == SERVICES_PATH:
            logger.debug("Serving service manifest", extra={"path": path, "prefix": prefix, "doc_name": self.name})
            return Handled(self.services(prefix))

        if path == f"{prefix}/swagger.json":
            logger.debug("Serving OpenAPI document", extra={"path": path, "prefix": prefix})
            return Handled(copy_document(document))

        if legacy:
            return self._classify_legacy(document, path, query or {}, prefix)

        return NOT_HANDLED

    def _classify_legacy(
        self,
        document: Mapping[str, Any],
        path: str,
        query: Mapping[str, str],
        prefix: str,
    ) -> Outcome:
        if path == SWAGGER_CONFIG_PATH:
            logger.debug("Serving swagger-config with tag groups", extra={"path": path, "prefix": prefix})
            return Handled(with_group_urls(document, prefix))

        if path == SWAGGER_RESOURCES_PATH:
            logger.debug("Serving tag group resources", extra={"path": path, "prefix": prefix})
            return Handled(build_group_resources(document, prefix))

        if path.startswith(API_DOCS_PREFIX):
            group_name = query.get("groupName") or ALL_GROUPS
            logger.debug(f"Serving group '{group_name}'", extra={"path": path, "prefix": prefix, "group": group_name})
            return Handled(filter_by_tag(document, group_name))

        return NOT_HANDLED

    def serve_wsgi(self, app: Callable, prefix: str = "", legacy: bool = False):
        """Wrap a WSGI application (e.g. ``flask_app.wsgi_app``).

        Example::

            flask_app.wsgi_app = adapter.serve_wsgi(flask_app.wsgi_app, "/doc")
        """
        from server.wsgi import DocAdapterWSGIMiddleware

        return DocAdapterWSGIMiddleware(app, self, prefix=prefix, legacy=legacy)

    def serve_starlette(self, prefix: str = "", legacy: bool = False):
        """Middleware factory for ``Starlette``/``FastAPI`` applications.

        Example::

            app.add_middleware(adapter.serve_starlette("/doc"))
        """
        from server.asgi import DocAdapterMiddleware

        adapter = self

        def factory(app):
            return DocAdapterMiddleware(app, adapter=adapter, prefix=prefix, legacy=legacy)

        return factory
