"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.productos.api.http.app_data import (
    ApplicationDependencies,
    build_application_dependencies,
)
from src.productos.api.http.routers.health import router as health_router
from src.productos.api.http.routers.productos import router as productos_router
from src.productos.api.utils.app_startup import configure_logging
from src.productos.core.errors import (
    InvalidArgumentError,
    ProductoNotFoundError,
    StorageError,
)
from src.productos.runtime.config.config_data import ConfigData
from src.productos.runtime.context import get_config

configure_logging()


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, hsts: bool = False):
        super().__init__(app)
        self.hsts = hsts

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        if self.hsts:
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return response


# --- Error mapping ---
def _error(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"message": message}, headers=headers
    )


def _validation_message(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Solicitud inválida: " + "; ".join(details)


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.warning("Bad request: {}", exc.message)
    return _error(400, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _validation_message(exc)
    logger.warning("Bad request: {}", message)
    return _error(400, message)


async def not_found_handler(request: Request, exc: ProductoNotFoundError) -> JSONResponse:
    logger.info("Not found: {}", exc.message)
    return _error(404, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Routing errors raised by the framework itself (unknown path, wrong method)."""
    return _error(exc.status_code, str(exc.detail), headers=exc.headers)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.opt(exception=exc).error("Storage failure: {}", exc.message)
    return _error(500, f"Error interno del servidor: {exc.message}")


# --- Lifecycle hooks ---
async def startup(
    app: FastAPI, config: ConfigData, dependencies: ApplicationDependencies | None
) -> None:
    logger.info("Starting up application in {} environment", config.app.environment)

    app.state.owns_dependencies = dependencies is None
    if dependencies is None:
        dependencies = build_application_dependencies(config)
    app.state.app_dependencies = dependencies


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    if getattr(app.state, "owns_dependencies", False):
        app_dependencies: ApplicationDependencies = app.state.app_dependencies
        app_dependencies.storage_service.close()


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the FastAPI application.

    The configuration current at call time is captured; storage, repository
    and service are wired from it once, in the lifespan. Pass `dependencies`
    to reuse an already wired set instead.
    """
    config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app, config, dependencies)
        try:
            yield
        finally:
            await shutdown(app)

    app = FastAPI(
        title="Gestión de productos",
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )

    app.add_middleware(
        SecurityHeadersMiddleware, hsts=config.app.environment == "production"
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )

    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ProductoNotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # --- Request logging middleware ---
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        xff = request.headers.get("x-forwarded-for")
        client_ip = (
            xff.split(",")[0].strip()
            if xff
            else request.client.host
            if request.client
            else "unknown"
        )

        base_ctx = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_ip,
        }

        start = time.perf_counter()

        with logger.contextualize(**base_ctx):
            try:
                logger.info("request.start")
                response = await call_next(request)

                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 1),
                ).info("request.end")

                response.headers.setdefault("X-Request-ID", request_id)
                return response

            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return JSONResponse(
                    status_code=500,
                    content={"message": f"Error interno del servidor: {exc}"},
                    headers={"X-Request-ID": request_id},
                )

    app.include_router(health_router)
    app.include_router(productos_router)

    return app


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]
