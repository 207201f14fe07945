"""
Belgian structured communication (OGM / gestructureerde mededeling) codec.

Layout: +++PPP/SSSS/SSSSS+++ where PPP is the cooperative prefix, the next
seven digits are the payment sequence and the final two digits are the
check value ``base mod 97`` (97 when the remainder is 0).

Design Decisions:
- generate_ogm_code raises on bad caller input instead of truncating
- validate_ogm_code never raises: malformed text is simply invalid
- format/parse only move separators around and never check the checksum
"""

import re

from .checksum import is_digits, ogm_check_value
from .errors import InvalidPrefixError, InvalidSequenceError, MalformedOgmError
from .models import OGM_MAX_SEQUENCE, OgmCode


# Characters stripped before interpreting a code
_SEPARATORS = re.compile(r"[+/\s]")

# Display form as it appears inside bank statement references
_DISPLAY_PATTERN = re.compile(r"\+\+\+[0-9]{3}/[0-9]{4}/[0-9]{5}\+\+\+")


def compute_ogm_check_digit(base: str) -> int:
    """
    Compute the check value for a 10-digit base.
    
    Raises:
        ValueError: If ``base`` is not 10 decimal digits
    """
    if not is_digits(base, 10):
        raise ValueError(f"OGM base must be 10 digits, got {base!r}")
    return ogm_check_value(int(base))


def generate_ogm_code(prefix: str, sequence: int) -> str:
    """
    Generate a structured communication for a cooperative payment.
    
    Args:
        prefix: 3-digit cooperative prefix (e.g. "001")
        sequence: Payment sequence number, 0 <= sequence < 10,000,000
        
    Returns:
        Canonical display text, e.g. "+++001/0000/04221+++"
        
    Raises:
        InvalidPrefixError: If prefix is not exactly 3 digits
        InvalidSequenceError: If sequence is not an int or needs more than 7 digits
    """
    if not isinstance(prefix, str) or not is_digits(prefix, 3):
        raise InvalidPrefixError(
            f"OGM prefix must be exactly 3 digits, got {prefix!r}",
            details={"prefix": prefix},
        )
    # bool is an int subclass but never a meaningful sequence
    if not isinstance(sequence, int) or isinstance(sequence, bool):
        raise InvalidSequenceError(
            f"OGM sequence must be an integer, got {type(sequence).__name__}",
            details={"sequence": repr(sequence)},
        )
    if not 0 <= sequence <= OGM_MAX_SEQUENCE:
        raise InvalidSequenceError(
            f"OGM sequence {sequence} does not fit in 7 digits",
            details={"sequence": sequence, "max": OGM_MAX_SEQUENCE},
        )
    
    base = f"{prefix}{sequence:07d}"
    code = OgmCode(prefix=prefix, sequence=sequence, check_digit=ogm_check_value(int(base)))
    return code.formatted


def parse_ogm_code(text: str) -> str:
    """
    Strip OGM formatting and return the remaining characters.
    
    No validation: "+++001/0000/04221+++" -> "001000004221", and
    garbage in gives garbage out (minus separators).
    """
    return _SEPARATORS.sub("", text)


def format_ogm_code(raw: str) -> str:
    """
    Format a raw 12-digit code for display.
    
    Input: "123456789012" -> Output: "+++123/4567/89012+++"
    Returns the input unchanged if it is not 12 digits once separators
    are removed. Does not check the checksum.
    """
    cleaned = parse_ogm_code(raw)
    if not is_digits(cleaned, 12):
        return raw
    return f"+++{cleaned[:3]}/{cleaned[3:7]}/{cleaned[7:]}+++"


def validate_ogm_code(text: str) -> bool:
    """
    Validate a structured communication.
    
    Accepts the display form or bare digits; spaces, '+' and '/' are ignored.
    """
    cleaned = parse_ogm_code(text)
    if not is_digits(cleaned, 12):
        return False
    
    base, check = cleaned[:10], int(cleaned[10:])
    return check == ogm_check_value(int(base))


def decompose_ogm_code(text: str) -> OgmCode | None:
    """
    Split a valid code into prefix, sequence and check value.
    
    Returns None if the text is not a valid structured communication.
    """
    if not validate_ogm_code(text):
        return None
    
    cleaned = parse_ogm_code(text)
    return OgmCode(
        prefix=cleaned[:3],
        sequence=int(cleaned[3:10]),
        check_digit=int(cleaned[10:]),
    )


def next_ogm_sequence(last_code: str | None) -> int:
    """
    Sequence number following the most recently issued code.
    
    Starts at 1 when nothing has been issued yet. Only the digits are
    read; the checksum of the stored code is not re-checked.
    
    Raises:
        MalformedOgmError: If the stored code does not hold 12 digits
    """
    if not last_code:
        return 1
    
    cleaned = parse_ogm_code(last_code)
    if not is_digits(cleaned, 12):
        raise MalformedOgmError(
            f"Cannot read sequence from stored OGM code {last_code!r}",
            details={"code": last_code},
        )
    return int(cleaned[3:10]) + 1


def extract_ogm_code(text: str | None) -> str | None:
    """
    Find the first display-form OGM code inside free text.
    
    Bank statement references often embed the code among other words,
    e.g. "Aankoop aandelen +++001/0000/04221+++ Jan". The match is
    returned as found; validity is checked separately by the caller.
    """
    if not text:
        return None
    match = _DISPLAY_PATTERN.search(text)
    return match.group(0) if match else None
