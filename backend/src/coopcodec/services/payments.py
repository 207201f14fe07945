"""
Payment reference issuance for share purchases.

Each purchase paid by bank transfer gets the next structured
communication for the cooperative plus an EPC QR payload the
shareholder can scan in a banking app.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from coopcodec.config import Settings
from coopcodec.domain.epc import build_epc_payload
from coopcodec.domain.errors import CodecError
from coopcodec.domain.models import EpcPaymentRequest
from coopcodec.domain.ogm import generate_ogm_code, next_ogm_sequence

logger = logging.getLogger(__name__)


class BeneficiaryNotConfiguredError(CodecError):
    """No default bank account is configured for payment QR codes."""
    code = "beneficiary_not_configured"


@dataclass(frozen=True)
class PaymentInstructions:
    """Everything a shareholder needs to pay by bank transfer."""
    ogm_code: str
    amount: Decimal
    epc_payload: str


class PaymentReferenceService:
    """
    Issues structured communications and builds payment instructions.
    
    Example:
        service = PaymentReferenceService.from_settings(get_settings())
        code = service.issue_reference(last_code="+++001/0000/04221+++")
        instructions = service.instructions(Decimal("250.00"), code)
    """
    
    def __init__(
        self,
        ogm_prefix: str,
        bic: str | None = None,
        beneficiary_name: str | None = None,
        iban: str | None = None,
    ) -> None:
        """
        Initialize payment reference service.
        
        Args:
            ogm_prefix: 3-digit cooperative prefix
            bic: BIC of the receiving account (optional)
            beneficiary_name: Name shown to the payer (optional)
            iban: Receiving IBAN (optional)
        """
        self.ogm_prefix = ogm_prefix
        self.bic = bic
        self.beneficiary_name = beneficiary_name
        self.iban = iban
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentReferenceService":
        return cls(
            ogm_prefix=settings.ogm_prefix,
            bic=settings.epc_bic,
            beneficiary_name=settings.epc_beneficiary_name,
            iban=settings.epc_iban,
        )
    
    def issue_reference(self, last_code: str | None = None) -> str:
        """
        Generate the code following the most recently issued one.
        
        Args:
            last_code: Last structured communication issued for this
                cooperative, or None for the first payment
                
        Raises:
            MalformedOgmError: If last_code holds no readable sequence
            InvalidSequenceError: If the 7-digit sequence space is exhausted
        """
        sequence = next_ogm_sequence(last_code)
        code = generate_ogm_code(self.ogm_prefix, sequence)
        logger.info(f"Issued OGM {code} (sequence {sequence})")
        return code
    
    def instructions(
        self,
        amount: Decimal,
        ogm_code: str,
        unstructured: str | None = None,
    ) -> PaymentInstructions:
        """
        Build payment instructions for an issued code.
        
        Raises:
            BeneficiaryNotConfiguredError: If bank details are missing
        """
        if not (self.bic and self.beneficiary_name and self.iban):
            raise BeneficiaryNotConfiguredError(
                "EPC beneficiary is not configured (set EPC_BIC, "
                "EPC_BENEFICIARY_NAME and EPC_IBAN)"
            )
        
        payload = build_epc_payload(
            EpcPaymentRequest(
                bic=self.bic,
                beneficiary_name=self.beneficiary_name,
                iban=self.iban,
                amount=amount,
                reference=ogm_code,
                unstructured=unstructured,
            )
        )
        return PaymentInstructions(ogm_code=ogm_code, amount=amount, epc_payload=payload)
