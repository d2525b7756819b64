"""
Provider Directory Search Service
Main FastAPI application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import sys

from provider_search import __version__
from provider_search.config import get_settings
from provider_search.exceptions import ProviderSearchException, MalformedRequest
from provider_search.router.search import router as search_router
from provider_search.services.response_assembler import CORS_HEADERS, error_response

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "info") -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup: missing configuration raises ConfigurationMissing and aborts
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Provider search service starting up...")
    logger.info(f"Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")
    logger.info(f"Supabase URL: {settings.supabase_url}")
    logger.info(f"Embedding model: {settings.embedding_model}")
    logger.info(f"Provider table: {settings.providers_table}, ranking RPC: {settings.match_function}")
    logger.info("Startup complete!")

    yield

    # Shutdown
    logger.info("Provider search service shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Provider Directory Search",
    description="Semantic and filter-based search over a directory of AI service providers",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


class PermissiveCORSMiddleware(CORSMiddleware):
    """CORS for any origin; preflights get an empty 200 with the fixed CORS headers"""

    def preflight_response(self, request_headers) -> Response:
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


# CORS middleware: any origin; the bearer credential is opaque, no cookies
app.add_middleware(
    PermissiveCORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(search_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Provider Directory Search",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "provider-search",
        "version": __version__
    }


@app.get("/v1/health")
async def v1_health_check():
    """V1 health check endpoint"""
    return {
        "status": "ok",
        "service": "provider-search"
    }


@app.exception_handler(ProviderSearchException)
async def provider_search_exception_handler(request: Request, exc: ProviderSearchException):
    """Render core errors as {error, kind}"""
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Body that fails shape validation is a MalformedRequest, not a 422"""
    errors = [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    fields = ", ".join(".".join(err["loc"][1:]) or "body" for err in errors)
    logger.warning(f"Malformed search request: {errors}")
    return error_response(
        MalformedRequest(f"Invalid request: {fields}", details={"errors": errors})
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    settings = get_settings()
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": str(exc) if settings.debug else "An error occurred",
            "kind": "InternalError"
        },
        headers=CORS_HEADERS
    )


def run() -> None:
    """Console entry point"""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "provider_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )


if __name__ == "__main__":
    run()
