"""
IBAN, national ID and VAT number endpoints.

Every endpoint answers with the display form and a validity flag; invalid
input is a normal 200 response, never an error.
"""

from fastapi import APIRouter

from coopcodec.api.schemas import IdentifierRequest, IdentifierResponse, NationalIdResponse
from coopcodec.domain.iban import format_iban, validate_iban
from coopcodec.domain.national_id import (
    format_national_id,
    national_id_century,
)
from coopcodec.domain.vat import format_vat_number, validate_vat_number

router = APIRouter(tags=["identifiers"])


@router.post("/iban/validate", response_model=IdentifierResponse)
async def check_iban(request: IdentifierRequest) -> IdentifierResponse:
    """Validate an IBAN with the MOD97-10 checksum."""
    return IdentifierResponse(
        input=request.value,
        formatted=format_iban(request.value),
        valid=validate_iban(request.value),
    )


@router.post("/national-id/validate", response_model=NationalIdResponse)
async def check_national_id(request: IdentifierRequest) -> NationalIdResponse:
    """Validate a Belgian national register number."""
    century = national_id_century(request.value)
    return NationalIdResponse(
        input=request.value,
        formatted=format_national_id(request.value),
        valid=century is not None,
        century=century,
    )


@router.post("/vat/validate", response_model=IdentifierResponse)
async def check_vat(request: IdentifierRequest) -> IdentifierResponse:
    """Check the structure of a Belgian VAT number."""
    return IdentifierResponse(
        input=request.value,
        formatted=format_vat_number(request.value),
        valid=validate_vat_number(request.value),
    )
