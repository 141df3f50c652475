"""Pure transforms over OpenAPI documents.

None of the functions here modify the document they are given. Anything
that reshapes the document works on a deep copy, so concurrent requests
for different tag groups never see each other's filters.
"""

import copy
from typing import Any, Dict, Iterator, List, Mapping, Tuple

ALL_GROUPS = "全部"
SWAGGER_VERSION = "3.0.0"


def copy_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a deep copy of the document as a plain dict."""
    return copy.deepcopy(dict(document))


def iter_operations(document: Mapping[str, Any]) -> Iterator[Tuple[str, str, Mapping[str, Any]]]:
    """Yield ``(path, method, operation)`` for every well-formed operation.

    Malformed entries (``paths`` or a path item that is not a mapping) are
    skipped instead of raising.
    """
    paths = document.get("paths")
    if not isinstance(paths, Mapping):
        return

    for path, path_item in paths.items():
        if not isinstance(path_item, Mapping):
            continue
        for method, operation in path_item.items():
            if isinstance(operation, Mapping):
                yield path, method, operation


def operation_tags(operation: Mapping[str, Any]) -> List[str]:
    """Tags of an operation, empty when missing or not a list."""
    tags = operation.get("tags")
    if not isinstance(tags, (list, tuple)):
        return []
    return [tag for tag in tags if isinstance(tag, str)]


def collect_tags(document: Mapping[str, Any]) -> List[str]:
    """Distinct tags across all operations, in first-discovery order."""
    seen: Dict[str, None] = {}
    for _, _, operation in iter_operations(document):
        for tag in operation_tags(operation):
            seen.setdefault(tag, None)
    return list(seen)


def group_resource(name: str, prefix: str = "") -> Dict[str, str]:
    return {
        "name": name,
        "url": f"{prefix}/api-docs/{name}",
        "swaggerVersion": SWAGGER_VERSION,
        "servicePath": "",
    }


def build_group_resources(document: Mapping[str, Any], prefix: str = "") -> List[Dict[str, str]]:
    """Build the tag-group list used by the legacy discovery endpoints.

    The first entry always selects the whole document; one entry follows
    per distinct tag.
    """
    groups = [group_resource(ALL_GROUPS, prefix)]
    groups.extend(group_resource(tag, prefix) for tag in collect_tags(document))
    return groups


def with_group_urls(document: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Copy of the document with the group list attached under ``urls``."""
    result = copy_document(document)
    result["urls"] = build_group_resources(document, prefix)
    return result


def filter_by_tag(document: Mapping[str, Any], tag: str) -> Dict[str, Any]:
    """Copy of the document keeping only operations tagged with ``tag``.

    Matching is an exact string comparison. Path entries left without any
    operation are omitted from the result.
    """
    result = copy_document(document)
    if tag == ALL_GROUPS:
        return result

    filtered: Dict[str, Dict[str, Any]] = {}
    for path, method, operation in iter_operations(result):
        if tag in operation_tags(operation):
            filtered.setdefault(path, {})[method] = operation

    result["paths"] = filtered
    return result
