"""
Pydantic schemas for API request/response validation.

These schemas define the contract between frontend and backend.
All monetary values use strings in responses to avoid floating point issues.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class GenerateOgmRequest(BaseModel):
    """Request to generate a structured communication."""
    prefix: str | None = Field(
        default=None,
        description="3-digit cooperative prefix (defaults to configured prefix)",
    )
    sequence: int = Field(..., description="Payment sequence number")


class NextOgmRequest(BaseModel):
    """Request the code following the last issued one."""
    last_code: str | None = Field(
        default=None,
        description="Most recently issued code, omitted for the first payment",
    )
    prefix: str | None = None


class IdentifierRequest(BaseModel):
    """A single identifier to validate and format."""
    value: str = Field(..., max_length=64)


class ExtractOgmRequest(BaseModel):
    """Free bank-statement reference text."""
    text: str = Field(..., max_length=1024)


class EpcPayloadRequest(BaseModel):
    """SEPA Credit Transfer parameters for an EPC QR code."""
    bic: str | None = Field(default=None, description="Defaults to configured BIC")
    beneficiary_name: str | None = Field(default=None, description="Defaults to configured name")
    iban: str | None = Field(default=None, description="Defaults to configured IBAN")
    amount: Decimal = Field(..., description="Amount in EUR")
    reference: str | None = Field(default=None, description="Structured reference (OGM)")
    unstructured: str | None = Field(default=None, description="Unstructured remittance info")


class DividendSplitRequest(BaseModel):
    """Dividend on a share value."""
    share_value: Decimal = Field(..., ge=0)
    dividend_rate: Decimal = Field(..., ge=0, le=1, description="Fraction, 0.05 = 5%")
    withholding_tax_rate: Decimal | None = Field(
        default=None,
        ge=0,
        le=1,
        description="Fraction, defaults to the configured rate",
    )


class HoldingRequest(BaseModel):
    """Shares of one class held by a shareholder."""
    share_class_id: str
    share_class_name: str
    quantity: int = Field(..., ge=0)
    price_per_share: Decimal = Field(..., ge=0)
    dividend_rate_override: Decimal | None = Field(default=None, ge=0, le=1)
    paid_on: date | None = None


class DividendPayoutRequest(BaseModel):
    """Payout of one shareholder for a period."""
    dividend_percentage: Decimal = Field(..., ge=0, le=100, description="2.5 = 2.5%")
    withholding_tax_percentage: Decimal | None = Field(default=None, ge=0, le=100)
    ex_dividend_date: date | None = Field(
        default=None,
        description="Only holdings paid before this date count (all count if omitted)",
    )
    holdings: list[HoldingRequest]


# =============================================================================
# Response Schemas
# =============================================================================

class OgmResponse(BaseModel):
    """A structured communication with its parts."""
    code: str
    raw: str
    valid: bool
    prefix: str | None = None
    sequence: int | None = None
    check_digit: int | None = None


class OgmExtractResponse(BaseModel):
    """OGM code found in free text."""
    code: str | None = None
    valid: bool = False


class FormattedResponse(BaseModel):
    """Display form of an identifier, without validation."""
    input: str
    formatted: str


class IdentifierResponse(FormattedResponse):
    """Validation and display form of an identifier."""
    valid: bool


class NationalIdResponse(IdentifierResponse):
    """National ID result with the century of the matching formula."""
    century: int | None = None


class EpcPayloadResponse(BaseModel):
    """EPC QR payload text split into its fixed lines."""
    payload: str
    lines: list[str]


class DividendSplitResponse(BaseModel):
    """Gross, tax and net amounts."""
    gross: str
    tax: str
    net: str


class DividendLineResponse(BaseModel):
    """Calculation detail for one holding."""
    share_class_id: str
    share_class_name: str
    quantity: int
    price_per_share: str
    total_value: str
    dividend_rate: str
    dividend_amount: str


class DividendPayoutResponse(DividendSplitResponse):
    """Shareholder payout with calculation details."""
    lines: list[DividendLineResponse] = []


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    ogm_prefix: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str | None = None
    code: str | None = None
