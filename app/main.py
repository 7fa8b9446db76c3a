import logging
import uvicorn
from fastapi import FastAPI, Request, HTTPException, Response, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import get_settings
from app.core.logging import setup_logging
from app.core.database import initialize_database
from app.core.exceptions import NotFoundError
from app.api.contato import router as contato_router
from app.api.ops import router as ops_router

settings = get_settings()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    setup_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
        ## Agenda API

        Contact book with create, read, update, delete and search-by-name
        operations over a single `Contato` resource.
        """,
        version="1.0.0",
        openapi_tags=[
            {
                "name": "contato",
                "description": "Contact CRUD and search by name"
            },
            {
                "name": "infra",
                "description": "Infrastructure and health check endpoints"
            }
        ]
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(contato_router)
    app.include_router(ops_router)

    # Healthcheck
    @app.get("/health", tags=["infra"])
    async def health():
        return {"status": "ok", "env": settings.ENV}

    # Missing resources answer 404 with no body
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    # Anything else unhandled (storage faults included) is logged and answered with a generic 500
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception", extra={
                "method": request.method,
                "path": request.url.path,
            }
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal Server Error",
                "path": request.url.path,
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        if exc.status_code >= 500:
            logger.error(
                "HTTP %s at %s %s: %s",
                exc.status_code,
                request.method,
                request.url.path,
                exc.detail,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "path": request.url.path,
            },
            headers=exc.headers,
        )

    # Schema is normally migrated before the service starts; AUTO_MIGRATE does it here instead
    @app.on_event("startup")
    async def startup_event():
        if settings.AUTO_MIGRATE:
            await initialize_database()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
