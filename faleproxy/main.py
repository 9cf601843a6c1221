import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from faleproxy.api.routes import router
from faleproxy.core.config import settings
from faleproxy.core.errors import RelayError, ValidationError
from faleproxy.core.logging_cfg import configure_logger

LOG = logging.getLogger("faleproxy.server")

STATIC_DIR = Path(__file__).resolve().parent / "static"
INDEX_PATH = STATIC_DIR / "index.html"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Configure logging on startup, note shutdown.
    """
    configure_logger(settings.LOG_LEVEL)
    LOG.info("server.startup", extra={"extra": {"host": settings.HOST, "port": settings.PORT}})

    yield

    LOG.info("server.shutdown")

async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unreadable bodies get the same answer as a missing url
    return await relay_error_handler(request, ValidationError())

def create_app() -> FastAPI:
    app = FastAPI(
        title="Faleproxy",
        description="Fetches a web page and replaces Yale with Fale in its text",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )

    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the single-page client exactly as stored"""
        return FileResponse(INDEX_PATH, media_type="text/html")

    app.include_router(router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app

app = create_app()

def run() -> None:
    """Start the server on the configured host and port."""
    import uvicorn

    print(f"Faleproxy server running at http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
