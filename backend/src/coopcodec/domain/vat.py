"""
Belgian VAT (enterprise) number formatting and structural validation.

Only the structure is checked: 10 digits, the first one 0 or 1.
No modulo 97 check is applied.
"""

import re

from .checksum import is_digits


# Whitespace, dots and the letters of the "BE" country prefix
_STRIP = re.compile(r"[\s.BE]")


def _clean(vat: str) -> str:
    return _STRIP.sub("", vat)


def format_vat_number(vat: str) -> str:
    """
    Format a VAT number for display.
    
    Input: "0123456789" -> Output: "BE 0123.456.789"
    Returns the input unchanged if it is not 10 digits once cleaned.
    """
    cleaned = _clean(vat)
    if not is_digits(cleaned, 10):
        return vat
    return f"BE {cleaned[:4]}.{cleaned[4:7]}.{cleaned[7:]}"


def validate_vat_number(vat: str) -> bool:
    """Validate a VAT number (basic format check)."""
    cleaned = _clean(vat)
    if not is_digits(cleaned, 10):
        return False
    return cleaned[0] in "01"
