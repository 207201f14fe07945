"""
Services package - Orchestration on top of the pure domain codecs.

Includes QR image rendering, payment reference issuance and dividend runs.
"""

from .dividends import DividendPeriod, DividendRunService
from .payments import PaymentInstructions, PaymentReferenceService
from .qr import render_epc_qr

__all__ = [
    "DividendPeriod",
    "DividendRunService",
    "PaymentInstructions",
    "PaymentReferenceService",
    "render_epc_qr",
]
