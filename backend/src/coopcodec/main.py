"""
FastAPI application entry point.

Exposes the identifier codecs and dividend arithmetic over HTTP:
- API routes for OGM, IBAN, national ID, VAT, EPC QR and dividends
- CORS configuration for frontend access
- Error handling and logging
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from coopcodec import __version__
from coopcodec.api.routes import dividends, epc, health, identifiers, ogm
from coopcodec.api.schemas import ErrorResponse
from coopcodec.config import get_settings
from coopcodec.domain.errors import CodecError

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    
    Nothing to open or close; startup only reports the configuration.
    """
    settings = get_settings()
    
    logger.info(f"Starting coopcodec v{__version__}")
    logger.info(f"OGM prefix: {settings.ogm_prefix}")
    logger.info(f"Default withholding tax: {settings.default_withholding_tax_rate}")
    if not settings.has_epc_beneficiary:
        logger.warning("EPC beneficiary not configured; QR requests must pass bank details")
    logger.info(f"Debug mode: {settings.debug}")
    
    yield  # Application runs here
    
    logger.info("Shutting down coopcodec")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()
    
    app = FastAPI(
        title="coopcodec API",
        description=(
            "Belgian financial identifier codecs.\n\n"
            "Structured communications (OGM), IBAN, national ID and VAT "
            "validation, EPC QR payment payloads and dividend calculation."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    
    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register routers
    app.include_router(health.router)
    app.include_router(ogm.router, prefix="/api/v1")
    app.include_router(identifiers.router, prefix="/api/v1")
    app.include_router(epc.router, prefix="/api/v1")
    app.include_router(dividends.router, prefix="/api/v1")
    
    @app.exception_handler(CodecError)
    async def codec_exception_handler(request: Request, exc: CodecError):
        """Bad caller input to a generator or builder."""
        logger.warning(f"Rejected {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error="Bad Request",
                detail=exc.message,
                code=exc.code,
            ).model_dump(),
        )
    
    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all exception handler for unhandled errors."""
        logger.exception(f"Unhandled error: {exc}")
        
        # Don't expose internal errors in production
        if settings.debug:
            detail = str(exc)
        else:
            detail = "An internal error occurred"
        
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                detail=detail,
            ).model_dump(exclude_none=True),
        )
    
    return app


# Create the application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "coopcodec.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
