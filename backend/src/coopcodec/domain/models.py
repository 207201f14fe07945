"""
Value types for identifiers, payment payloads and dividend results.

Every type is immutable and carries no identity beyond its content: it is
constructed from caller-supplied primitives, validated or formatted, and
discarded.

Design Decisions:
- Frozen dataclasses for immutable, typed domain objects
- Decimal for all monetary values to avoid floating-point errors
- Invariants checked in __post_init__ so a broken value cannot exist
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal
from enum import Enum


OGM_MAX_SEQUENCE = 9_999_999

# Unbounded precision for money arithmetic. Only multiplication, addition,
# subtraction and quantize run under it (never division), so results stay
# exact at any magnitude instead of overflowing the default 28 digits.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)


class ShareStatus(Enum):
    """Lifecycle status of a share holding."""
    PENDING = "pending"
    ACTIVE = "active"
    SOLD = "sold"


@dataclass(frozen=True)
class OgmCode:
    """
    Belgian structured communication (gestructureerde mededeling).
    
    Ten digit base (3-digit prefix + 7-digit sequence) followed by a
    2-digit check value in the range 1..97.
    """
    prefix: str
    sequence: int
    check_digit: int

    def __post_init__(self) -> None:
        """Validate the parts."""
        if len(self.prefix) != 3 or not self.prefix.isascii() or not self.prefix.isdigit():
            raise ValueError(f"Invalid OGM prefix: {self.prefix!r}")
        if not 0 <= self.sequence <= OGM_MAX_SEQUENCE:
            raise ValueError(f"OGM sequence out of range: {self.sequence}")
        if not 1 <= self.check_digit <= 97:
            raise ValueError(f"OGM check digit out of range: {self.check_digit}")

    @property
    def base(self) -> str:
        """The 10-digit base the check value is computed over."""
        return f"{self.prefix}{self.sequence:07d}"

    @property
    def raw(self) -> str:
        """12 digits without any formatting."""
        return f"{self.base}{self.check_digit:02d}"

    @property
    def formatted(self) -> str:
        """Display form: +++XXX/XXXX/XXXXX+++"""
        raw = self.raw
        return f"+++{raw[:3]}/{raw[3:7]}/{raw[7:]}+++"

    def __str__(self) -> str:
        return self.formatted


@dataclass(frozen=True)
class EpcPaymentRequest:
    """
    Parameters of a SEPA Credit Transfer for an EPC QR payload.
    
    Nothing here is validated: the builder is a pure formatter and callers
    decide whether the components must be valid first.
    """
    bic: str
    beneficiary_name: str
    iban: str
    amount: Decimal | float | int
    reference: str | None = None  # Structured reference (OGM)
    unstructured: str | None = None  # Free remittance text


@dataclass(frozen=True)
class DividendSplit:
    """Gross dividend, withholding tax and net amount, each to the cent."""
    gross: Decimal
    tax: Decimal
    net: Decimal

    def __post_init__(self) -> None:
        """Net must be exactly gross minus tax."""
        if self.net != EXACT_CONTEXT.subtract(self.gross, self.tax):
            raise ValueError(
                f"Inconsistent dividend split: {self.gross} - {self.tax} != {self.net}"
            )


@dataclass(frozen=True)
class ShareHolding:
    """
    Shares of one class held by a shareholder.
    
    A share class may override the period's dividend rate.
    """
    share_class_id: str
    share_class_name: str
    quantity: int
    price_per_share: Decimal
    dividend_rate_override: Decimal | None = None
    status: ShareStatus = ShareStatus.ACTIVE
    paid_on: date | None = None

    @property
    def value(self) -> Decimal:
        """Total purchase value of the holding."""
        return self.quantity * self.price_per_share


@dataclass(frozen=True)
class DividendLine:
    """Calculation detail for a single holding within a payout."""
    share_class_id: str
    share_class_name: str
    quantity: int
    price_per_share: Decimal
    total_value: Decimal
    dividend_rate: Decimal
    dividend_amount: Decimal


@dataclass(frozen=True)
class DividendPayout:
    """Dividend owed to one shareholder for a period."""
    gross: Decimal
    tax: Decimal
    net: Decimal
    lines: tuple[DividendLine, ...] = field(default_factory=tuple)

    @property
    def split(self) -> DividendSplit:
        return DividendSplit(gross=self.gross, tax=self.tax, net=self.net)
