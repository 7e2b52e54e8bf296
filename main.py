from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.middleware.trustedhost import TrustedHostMiddleware
from dotenv import load_dotenv
from api.schedule import router as schedule_router
from api.routing import router as routing_router
from api.healthcheck import router as healthcheck_router
from utils.logger import configure_logging
import os
import logging
import secrets

load_dotenv()
configure_logging()
logger = logging.getLogger(__name__)


def _env_list(name: str) -> list:
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


# env
API_KEY = os.getenv("API_KEY")
API_KEY_HEADER = "x-api-key"
CORS_ALLOW_ORIGINS = _env_list("CORS_ALLOW_ORIGINS")
ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS") or ["*"]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", "0"))  # 0 = no limit

# Paths served without an API key
PUBLIC_PATHS = ("/openapi.json", "/redoc", "/docs", "/api/health/check")

app = FastAPI(title="Shift & Route Planner", version="0.1.0")

if os.getenv("ENABLE_CORS") == "true":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
app.add_middleware(TrustedHostMiddleware, allowed_hosts=ALLOWED_HOSTS)


def _is_public(path: str) -> bool:
    return path in PUBLIC_PATHS or path.startswith("/docs/")


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """Reject requests whose declared body exceeds MAX_BODY_BYTES."""
    length = request.headers.get("content-length")
    if MAX_BODY_BYTES > 0 and length and length.isdigit() and int(length) > MAX_BODY_BYTES:
        return JSONResponse(status_code=413, content={"detail": "Payload too large"})
    return await call_next(request)


@app.middleware("http")
async def api_key_guard(request: Request, call_next):
    """Require the API key header on every non-public path when API_KEY is set."""
    if request.method == "OPTIONS" or _is_public(request.url.path):
        return await call_next(request)

    if not API_KEY:
        logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
        return await call_next(request)

    client_key = request.headers.get(API_KEY_HEADER)
    if not client_key or not secrets.compare_digest(str(client_key), str(API_KEY)):
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})
    return await call_next(request)


def custom_openapi():
    """OpenAPI schema with the API key declared on every operation except the health check."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description="Shift scheduling and vehicle routing API",
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})["ApiKeyAuth"] = {
        "type": "apiKey",
        "in": "header",
        "name": API_KEY_HEADER,
        "description": "Enter your API key",
    }
    for path, methods in schema.get("paths", {}).items():
        security = [] if _is_public(path) else [{"ApiKeyAuth": []}]
        for op in methods.values():
            op.setdefault("security", security)

    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi

# Register routers
app.include_router(schedule_router, prefix="/api")
app.include_router(routing_router, prefix="/api")
app.include_router(healthcheck_router, prefix="/api")
