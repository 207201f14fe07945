"""
EPC QR payment endpoints.

Builds the SEPA Credit Transfer payload and renders it as a PNG QR code.
Components are not validated here; callers validate IBAN and OGM first
when correctness matters.
"""

import logging

from fastapi import APIRouter, HTTPException, Response, status

from coopcodec.api.schemas import EpcPayloadRequest, EpcPayloadResponse, ErrorResponse
from coopcodec.config import get_settings
from coopcodec.domain.epc import build_epc_payload
from coopcodec.domain.models import EpcPaymentRequest
from coopcodec.services.qr import render_epc_qr

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/epc", tags=["epc"])


def _payment(request: EpcPayloadRequest) -> EpcPaymentRequest:
    """Fill missing beneficiary fields from configuration."""
    settings = get_settings()
    bic = request.bic or settings.epc_bic
    beneficiary_name = request.beneficiary_name or settings.epc_beneficiary_name
    iban = request.iban or settings.epc_iban
    
    missing = [
        name for name, value in (
            ("bic", bic),
            ("beneficiary_name", beneficiary_name),
            ("iban", iban),
        )
        if not value
    ]
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing beneficiary fields: {', '.join(missing)}",
        )
    
    return EpcPaymentRequest(
        bic=bic,
        beneficiary_name=beneficiary_name,
        iban=iban,
        amount=request.amount,
        reference=request.reference,
        unstructured=request.unstructured,
    )


@router.post(
    "/payload",
    response_model=EpcPayloadResponse,
    responses={400: {"model": ErrorResponse}},
)
async def epc_payload(request: EpcPayloadRequest) -> EpcPayloadResponse:
    """Build the 11-line EPC QR text payload."""
    payload = build_epc_payload(_payment(request))
    return EpcPayloadResponse(payload=payload, lines=payload.split("\n"))


@router.post(
    "/qr",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}},
        400: {"model": ErrorResponse},
    },
)
async def epc_qr(request: EpcPayloadRequest) -> Response:
    """Render the EPC QR payload as a PNG image."""
    settings = get_settings()
    payload = build_epc_payload(_payment(request))
    image = render_epc_qr(
        payload,
        box_size=settings.qr_box_size,
        border=settings.qr_border,
    )
    logger.info(f"Rendered EPC QR for amount {request.amount} ({len(image)} bytes)")
    return Response(content=image, media_type="image/png")
