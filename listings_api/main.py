from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog import get_logger
from listings_api.config import settings
from listings_api.dependencies.store import build_store
from listings_api.log import configure_logging
from listings_api.routers import properties
from listings_api.stores.base import PropertyStore

logger = get_logger()

def create_app(store: PropertyStore | None = None) -> FastAPI:
    """Build the API. ``store`` replaces the configured record store, e.g. in tests."""
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Property Listings API")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    if store is not None:
        app.state.store = store

    @app.on_event("startup")
    async def startup_event():
        if getattr(app.state, "store", None) is None:
            app.state.store = build_store(settings)
        logger.info("Server is running", url=f"http://localhost:{settings.PORT}")
        logger.info("Ready to accept requests for the Property Listing application.")

    # Error bodies are always {"error": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected malformed request body", path=request.url.path, errors=str(exc.errors()))
        return JSONResponse(status_code=400, content={"error": properties.MISSING_FIELDS_ERROR})

    app.include_router(properties.router)

    @app.get("/health")
    async def root_health():
        return "ok"

    return app

app = create_app()
