"""WSGI middleware serving the Knife4j documentation endpoints.

Wraps any WSGI application (Flask, Django, bare WSGI). Requests the adapter
answers never reach the wrapped application; every other request is passed
through untouched.
"""

import json
from http import HTTPStatus
from typing import Any, Callable, Dict, Iterable
from urllib.parse import parse_qs

from docadapter.adapter import DocAdapter, Handled
from observability.logging import get_logger


def encode_json(body: Any) -> bytes:
    """Serialize a response body as UTF-8 JSON, keeping non-ASCII tags readable."""
    return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def status_line(status: int) -> str:
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return f"{status} UNKNOWN"


class DocAdapterWSGIMiddleware:
    """WSGI middleware that answers adapter routes and delegates the rest."""

    def __init__(self, app: Callable, adapter: DocAdapter, prefix: str = "", legacy: bool = False):
        self.app = app
        self.adapter = adapter
        self.prefix = prefix
        self.legacy = legacy
        self.logger = get_logger(__name__, prefix=prefix, middleware=type(self).__name__)

    def __call__(self, environ: Dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        # PEP 3333 hands PATH_INFO over as latin-1 decoded bytes
        path = environ.get("PATH_INFO", "").encode("latin-1", "replace").decode("utf-8", "replace")
        query = self._parse_query(environ.get("QUERY_STRING", ""))

        outcome = self.adapter.classify(path, query, prefix=self.prefix, legacy=self.legacy)
        if not isinstance(outcome, Handled):
            return self.app(environ, start_response)

        payload = encode_json(outcome.body)
        self.logger.debug("Answered documentation request", extra={"path": path, "status": outcome.status})
        headers = [
            ("Content-Type", "application/json; charset=utf-8"),
            ("Content-Length", str(len(payload))),
        ]
        start_response(status_line(outcome.status), headers)
        return [payload]

    @staticmethod
    def _parse_query(query_string: str) -> Dict[str, str]:
        # Last value wins for repeated keys, matching Starlette
        parsed = parse_qs(query_string, keep_blank_values=True)
        return {key: values[-1] for key, values in parsed.items() if values}
