"""
coopcodec - Belgian financial identifier codecs for cooperative shareholding.

Structured payment references (OGM), IBAN, national ID, VAT numbers,
EPC QR payloads and dividend tax-split arithmetic.
"""

__version__ = "0.1.0"
