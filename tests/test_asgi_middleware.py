"""Tests for the Starlette/FastAPI middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docadapter import DocAdapter
from server import DocAdapterMiddleware, setup_doc_adapter


def make_app(adapter, prefix="", legacy=False):
    app = FastAPI()

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    setup_doc_adapter(app, adapter, prefix=prefix, legacy=legacy)
    return app


class TestDocAdapterMiddleware:
    """FastAPI application with the documentation middleware installed."""

    @pytest.fixture
    def client(self, tagged_document):
        return TestClient(make_app(DocAdapter(tagged_document), prefix="/doc"))

    def test_services_json(self, client):
        response = client.get("/services.json")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        services = response.json()
        assert len(services) == 1
        assert services[0]["name"] == "API接口文档"
        assert services[0]["url"] == "/doc/swagger.json"

    def test_swagger_json(self, client, tagged_document):
        response = client.get("/doc/swagger.json")
        assert response.status_code == 200
        assert response.json() == tagged_document

    def test_repeated_requests_are_byte_identical(self, client):
        assert client.get("/doc/swagger.json").content == client.get("/doc/swagger.json").content

    def test_unhandled_path_reaches_route(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_wrong_prefix_is_not_handled(self, client):
        assert client.get("/swagger.json").status_code == 404
        assert client.get("/doc/swagger.json/").status_code == 404

    def test_invalid_document(self):
        client = TestClient(make_app(DocAdapter(None)))
        for path in ("/services.json", "/swagger.json", "/health"):
            response = client.get(path)
            assert response.status_code == 500
            assert response.json()["error"] == "Swagger configuration is not available"

    def test_default_adapter(self):
        client = TestClient(make_app(DocAdapter()))
        assert client.get("/swagger.json").json() == {}

    def test_document_replacement(self, tagged_document):
        adapter = DocAdapter(tagged_document)
        client = TestClient(make_app(adapter))
        adapter.replace_document({"openapi": "3.1.0"})
        assert client.get("/swagger.json").json() == {"openapi": "3.1.0"}


class TestLegacyRoutes:
    @pytest.fixture
    def client(self, tagged_document):
        return TestClient(make_app(DocAdapter(tagged_document), prefix="/doc", legacy=True))

    def test_swagger_config(self, client):
        body = client.get("/v3/api-docs/swagger-config").json()
        assert [u["url"] for u in body["urls"]] == [
            "/doc/api-docs/全部",
            "/doc/api-docs/X",
            "/doc/api-docs/Y",
        ]

    def test_swagger_resources(self, client):
        groups = client.get("/swagger-resources").json()
        assert [g["name"] for g in groups] == ["全部", "X", "Y"]

    def test_group_filter(self, client):
        body = client.get("/api-docs/X", params={"groupName": "X"}).json()
        assert set(body["paths"]) == {"/a", "/c"}

    def test_all_group(self, client):
        body = client.get("/api-docs/全部", params={"groupName": "全部"}).json()
        assert set(body["paths"]) == {"/a", "/b", "/c"}

    def test_filters_do_not_leak_between_requests(self, client, tagged_document):
        client.get("/api-docs/X", params={"groupName": "X"})
        client.get("/v3/api-docs/swagger-config")
        assert client.get("/doc/swagger.json").json() == tagged_document


def test_serve_starlette_factory(tagged_document):
    app = FastAPI()
    adapter = DocAdapter(tagged_document)
    app.add_middleware(adapter.serve_starlette("/docs"))
    client = TestClient(app)
    assert client.get("/docs/swagger.json").json() == tagged_document
    assert client.get("/services.json").json()[0]["url"] == "/docs/swagger.json"


def test_middleware_class_registration(tagged_document):
    app = FastAPI()
    app.add_middleware(DocAdapterMiddleware, adapter=DocAdapter(tagged_document))
    assert TestClient(app).get("/swagger.json").status_code == 200
