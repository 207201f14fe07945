"""
Belgian national register number (rijksregisternummer).

Eleven digits: YYMMDD birth date, 3-digit serial, 2-digit check. The check
is ``97 - (first 9 digits mod 97)``; for people born in 2000 or later a
``2`` is prefixed to the 9 digits before reducing.

The birth year embedded in the number is not used to pick a formula:
a number is valid when either formula matches.
"""

import re

from .checksum import MODULUS, is_digits


_SEPARATORS = re.compile(r"[\s.\-]")


def _clean(national_id: str) -> str:
    return _SEPARATORS.sub("", national_id)


def _expected_checks(digits: str) -> tuple[int, int]:
    """Check values under the pre-2000 and post-2000 formulas."""
    base = digits[:9]
    return (
        MODULUS - int(base) % MODULUS,
        MODULUS - int("2" + base) % MODULUS,
    )


def format_national_id(national_id: str) -> str:
    """
    Format a national ID for display.
    
    Input: "90020112345" -> Output: "90.02.01-123.45"
    Returns the input unchanged if it is not 11 digits once separators are removed.
    """
    cleaned = _clean(national_id)
    if not is_digits(cleaned, 11):
        return national_id
    return f"{cleaned[:2]}.{cleaned[2:4]}.{cleaned[4:6]}-{cleaned[6:9]}.{cleaned[9:]}"


def validate_national_id(national_id: str) -> bool:
    """Validate a national ID with the modulo 97 check (either century)."""
    return national_id_century(national_id) is not None


def national_id_century(national_id: str) -> int | None:
    """
    Century implied by the matching checksum formula.
    
    Returns 1900 when the pre-2000 formula matches (also when both do),
    2000 when only the post-2000 formula matches, None when invalid.
    """
    cleaned = _clean(national_id)
    if not is_digits(cleaned, 11):
        return None
    
    check = int(cleaned[9:])
    before_2000, from_2000 = _expected_checks(cleaned)
    if check == before_2000:
        return 1900
    if check == from_2000:
        return 2000
    return None
