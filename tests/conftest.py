"""Shared fixtures for knife4j-docs tests."""

import pytest


@pytest.fixture
def tagged_document():
    """OpenAPI document with operations spread over two tags."""
    return {
        "openapi": "3.0.0",
        "info": {"title": "测试API", "version": "1.0.0"},
        "paths": {
            "/a": {
                "get": {
                    "tags": ["X"],
                    "summary": "Get A",
                    "responses": {"200": {"description": "ok"}},
                }
            },
            "/b": {
                "post": {
                    "tags": ["Y"],
                    "summary": "Create B",
                    "responses": {"201": {"description": "created"}},
                }
            },
            "/c": {
                "get": {"tags": ["X", "Y"], "summary": "Get C"},
                "delete": {"tags": ["Y"], "summary": "Delete C"},
            },
        },
        "components": {"schemas": {"Item": {"type": "object"}}},
    }
