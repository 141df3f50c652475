"""Unit tests for the pure OpenAPI document transforms."""

import copy
from concurrent.futures import ThreadPoolExecutor

import pytest

from docadapter.document import (
    ALL_GROUPS,
    build_group_resources,
    collect_tags,
    copy_document,
    filter_by_tag,
    iter_operations,
    operation_tags,
    with_group_urls,
)


class TestCollectTags:
    """Tag discovery across paths and methods."""

    def test_distinct_tags_in_discovery_order(self, tagged_document):
        assert collect_tags(tagged_document) == ["X", "Y"]

    def test_document_without_paths(self):
        assert collect_tags({"openapi": "3.0.0"}) == []

    @pytest.mark.parametrize("paths", [None, [], "not-a-mapping", 42])
    def test_malformed_paths_treated_as_empty(self, paths):
        assert collect_tags({"paths": paths}) == []

    def test_malformed_entries_are_skipped(self):
        document = {
            "paths": {
                "/bad": "oops",
                "/params": {"parameters": [{"name": "id"}], "get": {"tags": "X"}},
                "/ok": {"get": {"tags": ["Z", 3]}},
            }
        }
        assert collect_tags(document) == ["Z"]

    def test_operation_tags_default_empty(self):
        assert operation_tags({}) == []
        assert operation_tags({"tags": None}) == []


def test_iter_operations_yields_every_operation(tagged_document):
    found = [(path, method) for path, method, _ in iter_operations(tagged_document)]
    assert found == [("/a", "get"), ("/b", "post"), ("/c", "get"), ("/c", "delete")]


def test_copy_document_is_deep(tagged_document):
    result = copy_document(tagged_document)
    result["paths"]["/a"]["get"]["tags"].append("Z")
    assert tagged_document["paths"]["/a"]["get"]["tags"] == ["X"]


class TestGroupResources:
    """Legacy tag-group list."""

    def test_all_group_comes_first(self, tagged_document):
        groups = build_group_resources(tagged_document, "/doc")
        assert groups[0] == {
            "name": ALL_GROUPS,
            "url": "/doc/api-docs/全部",
            "swaggerVersion": "3.0.0",
            "servicePath": "",
        }
        assert [g["name"] for g in groups] == [ALL_GROUPS, "X", "Y"]
        assert groups[1]["url"] == "/doc/api-docs/X"

    def test_empty_document_has_only_all_group(self):
        assert [g["name"] for g in build_group_resources({})] == [ALL_GROUPS]

    def test_with_group_urls_leaves_source_untouched(self, tagged_document):
        original = copy.deepcopy(tagged_document)
        result = with_group_urls(tagged_document)
        assert "urls" not in tagged_document
        assert tagged_document == original
        assert len(result["urls"]) == 3
        assert result["paths"] == original["paths"]


class TestFilterByTag:
    """Per-tag filtering of ``paths``."""

    def test_keeps_only_matching_operations(self, tagged_document):
        result = filter_by_tag(tagged_document, "X")
        assert list(result["paths"]) == ["/a", "/c"]
        assert list(result["paths"]["/c"]) == ["get"]

    def test_paths_without_matches_are_omitted(self, tagged_document):
        result = filter_by_tag(tagged_document, "Y")
        assert "/a" not in result["paths"]
        assert list(result["paths"]["/c"]) == ["get", "delete"]

    def test_unknown_tag_gives_empty_paths(self, tagged_document):
        assert filter_by_tag(tagged_document, "nope")["paths"] == {}

    def test_match_is_exact(self, tagged_document):
        assert filter_by_tag(tagged_document, "x")["paths"] == {}

    def test_all_group_returns_whole_document(self, tagged_document):
        assert filter_by_tag(tagged_document, ALL_GROUPS) == tagged_document

    def test_other_fields_pass_through(self, tagged_document):
        result = filter_by_tag(tagged_document, "X")
        assert result["components"] == tagged_document["components"]
        assert result["info"] == tagged_document["info"]

    def test_source_document_is_not_mutated(self, tagged_document):
        original = copy.deepcopy(tagged_document)
        filter_by_tag(tagged_document, "X")
        filter_by_tag(tagged_document, "Y")
        assert tagged_document == original


def test_concurrent_filters_do_not_interfere(tagged_document):
    original = copy.deepcopy(tagged_document)
    expected = {
        "X": {"/a": ["get"], "/c": ["get"]},
        "Y": {"/b": ["post"], "/c": ["get", "delete"]},
        "nope": {},
    }
    tags = list(expected) * 50

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda tag: (tag, filter_by_tag(tagged_document, tag)), tags))

    for tag, result in results:
        assert {path: list(item) for path, item in result["paths"].items()} == expected[tag]
    assert tagged_document == original
