"""
Structured communication (OGM) endpoints.

Generation, validation and extraction from bank-statement references.
Generator errors are turned into 400 responses by the application.
"""

import logging

from fastapi import APIRouter

from coopcodec.api.schemas import (
    ErrorResponse,
    ExtractOgmRequest,
    FormattedResponse,
    GenerateOgmRequest,
    IdentifierRequest,
    NextOgmRequest,
    OgmExtractResponse,
    OgmResponse,
)
from coopcodec.config import get_settings
from coopcodec.domain.ogm import (
    decompose_ogm_code,
    extract_ogm_code,
    format_ogm_code,
    generate_ogm_code,
    parse_ogm_code,
    validate_ogm_code,
)
from coopcodec.services.payments import PaymentReferenceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ogm", tags=["ogm"])


def _describe(code: str) -> OgmResponse:
    parts = decompose_ogm_code(code)
    return OgmResponse(
        code=format_ogm_code(code),
        raw=parse_ogm_code(code),
        valid=parts is not None,
        prefix=parts.prefix if parts else None,
        sequence=parts.sequence if parts else None,
        check_digit=parts.check_digit if parts else None,
    )


@router.post(
    "/generate",
    response_model=OgmResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate(request: GenerateOgmRequest) -> OgmResponse:
    """Generate the structured communication for a prefix and sequence."""
    prefix = request.prefix or get_settings().ogm_prefix
    code = generate_ogm_code(prefix, request.sequence)
    return _describe(code)


@router.post(
    "/next",
    response_model=OgmResponse,
    responses={400: {"model": ErrorResponse}},
)
async def next_code(request: NextOgmRequest) -> OgmResponse:
    """Issue the code following the last one issued for the cooperative."""
    settings = get_settings()
    service = PaymentReferenceService(ogm_prefix=request.prefix or settings.ogm_prefix)
    return _describe(service.issue_reference(request.last_code))


@router.post("/validate", response_model=OgmResponse)
async def validate(request: IdentifierRequest) -> OgmResponse:
    """Validate a code given in display form or as bare digits."""
    return _describe(request.value)


@router.post("/extract", response_model=OgmExtractResponse)
async def extract(request: ExtractOgmRequest) -> OgmExtractResponse:
    """Find a structured communication inside bank-statement reference text."""
    code = extract_ogm_code(request.text)
    if code is None:
        logger.debug("No OGM code in reference text")
        return OgmExtractResponse()
    return OgmExtractResponse(code=code, valid=validate_ogm_code(code))


@router.get("/{code:path}/format", response_model=FormattedResponse)
async def format_code(code: str) -> FormattedResponse:
    """
    Display form of a code, checksum not verified.
    
    Input that does not reduce to 12 digits is echoed back unchanged.
    """
    return FormattedResponse(input=code, formatted=format_ogm_code(code))
