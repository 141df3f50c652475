#!/usr/bin/env python3
"""
Example Flask application exposing a YAML OpenAPI document to Knife4j.

    OPENAPI_FILE=openapi.yaml python examples/flask_app.py
"""

import os

from flask import Flask, jsonify, send_from_directory

from config import AdapterSettings
from docadapter import DocAdapter, get_ui_asset_root, load_document
from observability import setup_logging_from_settings, get_logger

settings = AdapterSettings.from_env()
setup_logging_from_settings(settings)
logger = get_logger(__name__)

spec_file = os.getenv("OPENAPI_FILE")
document = load_document(spec_file) if spec_file else {
    "openapi": "3.0.0",
    "info": {"title": "Flask测试API", "version": "1.0.0"},
    "paths": {
        "/test": {
            "get": {
                "tags": ["测试"],
                "summary": "测试接口",
                "responses": {"200": {"description": "成功返回问候信息"}},
            }
        }
    },
}

app = Flask(__name__)
adapter = DocAdapter.from_settings(settings, document)
app.wsgi_app = adapter.serve_wsgi(app.wsgi_app, prefix=settings.prefix, legacy=settings.legacy_routes)

ui_root = get_ui_asset_root(settings.ui_asset_root)


@app.route("/test")
def test():
    return jsonify({"message": "你好！"})


@app.route(f"{settings.prefix}/<path:filename>")
def knife4j_assets(filename):
    return send_from_directory(ui_root, filename)


if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", "3002")))
