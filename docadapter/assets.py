"""Filesystem locations of bundled assets and OpenAPI document loading.

The package only bundles a placeholder ``static`` directory (an
``index.html`` pointing here and an empty ``swagger.json``). The Knife4j UI
dist itself is not shipped: download it and point ``KNIFE4J_UI_PATH`` (or
``AdapterSettings.ui_asset_root``) at the directory holding its
``doc.html``/``index.html``.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import DocumentLoadError

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent
_BUNDLED_STATIC_DIR = _PACKAGE_DIR / "static"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JSONCompatibleLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps unquoted dates and timestamps as strings.

    ``2024-01-15`` in an ``info.version`` or ``example`` field must come back
    as it was written, since the document is served as JSON.
    """


JSONCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def get_ui_asset_root(override: Optional[str] = None) -> str:
    """Absolute path of the viewer UI assets, for mounting as static files.

    Args:
        override: Directory to use instead of the bundled one. Falls back to
            the ``KNIFE4J_UI_PATH`` environment variable, then to the
            package's ``static`` directory.
    """
    root = override or os.getenv("KNIFE4J_UI_PATH")
    if root:
        return str(Path(root).expanduser().resolve())
    return str(_BUNDLED_STATIC_DIR)


def get_swagger_location(override: Optional[str] = None) -> str:
    """Path of the local ``swagger.json`` asset advertised in ``services.json``."""
    if override:
        return str(Path(override).expanduser().resolve())
    return str(Path.cwd() / "static" / "swagger.json")


def load_document(path: str | Path) -> Dict[str, Any]:
    """Load an OpenAPI document from a JSON or YAML file.

    Args:
        path: File exported by an OpenAPI generator. ``.json`` files are
            parsed as JSON, anything else as YAML.

    Returns:
        Parsed document

    Raises:
        DocumentLoadError: If the file is missing, malformed, or does not
            hold a mapping at the top level
    """
    spec_path = Path(path)
    if not spec_path.exists():
        raise DocumentLoadError(f"OpenAPI document not found at {spec_path}")

    logger.info("Loading OpenAPI document from %s", spec_path)

    try:
        with open(spec_path, "r", encoding="utf-8") as f:
            if spec_path.suffix.lower() == ".json":
                document = json.load(f)
            else:
                document = yaml.load(f, Loader=JSONCompatibleLoader)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"OpenAPI document at {spec_path} is malformed: {e}") from e

    if not isinstance(document, dict):
        raise DocumentLoadError(
            f"OpenAPI document at {spec_path} must be a mapping, got {type(document).__name__}"
        )
    return document
