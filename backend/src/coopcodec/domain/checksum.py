"""
Modulo 97 arithmetic shared by the OGM, IBAN and national ID codecs.

IBAN numbers expand to 40+ digits once letters are substituted, so the
reduction works on blocks of at most 9 digits: the running remainder
(at most 2 digits) is prepended to the next 7 digits and reduced again.
"""

MODULUS = 97

# remainder (<= 2 digits) + block must stay within 9 digits
_BLOCK_WIDTH = 7


def mod97(digits: str) -> int:
    """
    Reduce a decimal digit string modulo 97.
    
    Args:
        digits: Non-empty string of ASCII decimal digits
        
    Returns:
        Remainder in the range 0..96
        
    Raises:
        ValueError: If the string is empty or contains anything but digits
    """
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"Expected a decimal digit string, got {digits!r}")
    
    remainder = 0
    for start in range(0, len(digits), _BLOCK_WIDTH):
        block = f"{remainder}{digits[start:start + _BLOCK_WIDTH]}"
        remainder = int(block) % MODULUS
    return remainder


def ogm_check_value(base: int) -> int:
    """
    Check value for an OGM base.
    
    The checksum alphabet is 1..97: a remainder of 0 is written as 97.
    """
    remainder = base % MODULUS
    return remainder or MODULUS


def is_digits(value: str, length: int) -> bool:
    """True if ``value`` is exactly ``length`` ASCII decimal digits."""
    return len(value) == length and value.isascii() and value.isdigit()
