#!/usr/bin/env python3
"""
Example FastAPI application exposing its OpenAPI document to Knife4j.

The viewer UI is served from /doc; the adapter answers /services.json and
/doc/swagger.json ahead of the static files.

Run with:
    uvicorn examples.fastapi_app:app --port 3001
"""

import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config import AdapterSettings
from docadapter import DocAdapter, get_ui_asset_root
from observability import setup_logging_from_settings, get_logger
from server import setup_doc_adapter

settings = AdapterSettings.from_env()
if not settings.prefix:
    settings.prefix = "/doc"

setup_logging_from_settings(settings)
logger = get_logger(__name__)

app = FastAPI(
    title="FastAPI测试API",
    version="1.0.0",
    description="一个简单的FastAPI测试服务",
)


@app.get("/test", tags=["测试"], summary="测试接口")
async def test():
    """返回简单的问候信息"""
    return {"message": "你好！"}


@app.get("/getSwaggerSpec", tags=["Swagger"], summary="获取Swagger规范")
async def get_swagger_spec():
    """返回完整的Swagger规范对象"""
    return {"swaggerSpec": adapter.get_document()}


adapter = DocAdapter.from_settings(settings, app.openapi())
setup_doc_adapter(app, adapter, prefix=settings.prefix, legacy=settings.legacy_routes)

ui_root = get_ui_asset_root(settings.ui_asset_root)
app.mount(settings.prefix, StaticFiles(directory=ui_root, html=True), name="knife4j")

logger.info(f"Knife4j documentation at {settings.prefix} (assets: {ui_root})")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3001")))
