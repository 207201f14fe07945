"""
IBAN display formatting and ISO 7064 MOD97-10 validation.

Only the universal checksum and the generic envelope (2 letters, 2 check
digits, 4-30 alphanumerics) are enforced. No per-country length or BBAN
structure table is applied.
"""

import re

from .checksum import mod97


_WHITESPACE = re.compile(r"\s")

_IBAN_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{4,30}")


def normalize_iban(iban: str) -> str:
    """Electronic form: no whitespace, uppercase."""
    return _WHITESPACE.sub("", iban).upper()


def format_iban(iban: str) -> str:
    """
    Format an IBAN for display.
    
    Input: "be68539007547034" -> Output: "BE68 5390 0754 7034"
    Always succeeds; performs no validation.
    """
    cleaned = normalize_iban(iban)
    return " ".join(cleaned[i:i + 4] for i in range(0, len(cleaned), 4))


def _to_numeric(iban: str) -> str:
    """Move the first 4 characters to the end and expand letters (A=10 ... Z=35)."""
    rearranged = iban[4:] + iban[:4]
    return "".join(
        str(ord(ch) - ord("A") + 10) if ch.isalpha() else ch
        for ch in rearranged
    )


def validate_iban(iban: str) -> bool:
    """
    Validate an IBAN using the ISO 7064 MOD97-10 checksum.
    
    Spaces and letter case are ignored. Any country is accepted as long
    as the envelope and checksum are correct.
    """
    cleaned = normalize_iban(iban)
    if not _IBAN_PATTERN.fullmatch(cleaned):
        return False
    return mod97(_to_numeric(cleaned)) == 1
