import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from app.api.routes.parse import router as parse_router
from app.core.config import get_settings

logging.getLogger("app").setLevel(get_settings().log_level)

app = FastAPI(
    title="Registry Extract Parser",
    description="Deterministic parsing service that turns state registry extracts (legal entities, individual entrepreneurs, farm enterprise heads) into structured records",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "registry-extract-parser", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Registry Extract Parser API",
        version="0.1.0",
        description="Registry extract parsing API with schema-driven section and field extraction",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
