"""
EPC QR payload (European Payments Council, version 002) for SEPA Credit
Transfers, commonly known as "GiroCode".

The payload is always 11 newline-joined lines; optional fields become
empty lines so every value keeps its fixed position.

Building is kept separate from validating: preview and reconciliation
flows construct payloads from components that are not validated yet.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import InvalidAmountError
from .iban import normalize_iban
from .models import EXACT_CONTEXT, EpcPaymentRequest


SERVICE_TAG = "BCD"
VERSION = "002"
CHARACTER_SET = "1"  # UTF-8
IDENTIFICATION = "SCT"  # SEPA Credit Transfer
CURRENCY = "EUR"

MAX_BENEFICIARY_NAME = 70

_CENT = Decimal("0.01")


def format_epc_amount(amount: Decimal | float | int) -> str:
    """
    Machine amount: currency code + fixed 2-decimal point, no grouping.
    
    10.5 -> "EUR10.50". The sign is passed through as given.
    
    Raises:
        InvalidAmountError: If amount is not a finite number
    """
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Invalid payment amount: {amount!r}")
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(
            f"Invalid payment amount: {amount!r}",
            details={"amount": repr(amount)},
        ) from None
    if not value.is_finite():
        raise InvalidAmountError(
            f"Payment amount must be finite, got {amount!r}",
            details={"amount": repr(amount)},
        )
    cents = value.quantize(_CENT, rounding=ROUND_HALF_UP, context=EXACT_CONTEXT)
    return f"{CURRENCY}{cents}"


def build_epc_payload(payment: EpcPaymentRequest) -> str:
    """
    Serialize payment parameters into the EPC QR text payload.
    
    No validation of BIC, IBAN or amount sign is done here; only an amount
    that is not a number at all is rejected.
    
    Args:
        payment: Payment parameters
        
    Returns:
        Multi-line string to encode in a QR code
        
    Raises:
        InvalidAmountError: If the amount cannot be formatted
    """
    lines = [
        SERVICE_TAG,
        VERSION,
        CHARACTER_SET,
        IDENTIFICATION,
        normalize_iban(payment.bic),  # same whitespace/case rules as IBAN
        payment.beneficiary_name[:MAX_BENEFICIARY_NAME],
        normalize_iban(payment.iban),
        format_epc_amount(payment.amount),
        "",  # Purpose code
        payment.reference or "",
        payment.unstructured or "",
    ]
    return "\n".join(lines)
