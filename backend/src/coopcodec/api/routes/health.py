"""
Health check endpoint.

Provides system health status for monitoring and load balancers.
"""

from fastapi import APIRouter

from coopcodec import __version__
from coopcodec.api.schemas import HealthResponse
from coopcodec.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check system health.
    
    There are no downstream dependencies; a response means the codecs
    are loaded and configuration is valid.
    """
    settings = get_settings()
    
    return HealthResponse(
        status="healthy",
        version=__version__,
        ogm_prefix=settings.ogm_prefix,
    )
