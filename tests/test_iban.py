"""Validate IBAN formatting and MOD97-10 validation."""

import pytest

from coopcodec.domain.iban import format_iban, normalize_iban, validate_iban


VALID_IBANS = [
    "BE68539007547034",
    "GB82WEST12345698765432",
    "NL91ABNA0417164300",
    "DE89370400440532013000",
]


class TestValidateIban:
    """Checksum and envelope rules."""

    @pytest.mark.parametrize("iban", VALID_IBANS)
    def test_valid(self, iban):
        assert validate_iban(iban) is True

    def test_spaces_and_case_are_ignored(self):
        assert validate_iban("BE68 5390 0754 7034")
        assert validate_iban("be68539007547034")
        assert validate_iban(" gb82 west 1234 5698 7654 32 ")

    def test_flipped_last_digit(self):
        assert validate_iban("BE68539007547035") is False

    @pytest.mark.parametrize(
        "iban",
        [
            "",
            "BE68",
            "BE68539",
            "1E68539007547034",
            "BE6X539007547034",
            "BE68-5390-0754-7034",
            "BE68539007547034" + "0" * 30,
        ],
    )
    def test_malformed(self, iban):
        assert validate_iban(iban) is False

    @pytest.mark.parametrize("iban", VALID_IBANS)
    def test_every_single_digit_substitution_is_rejected(self, iban):
        for position, original in enumerate(iban):
            if not original.isdigit():
                continue
            for digit in "0123456789":
                if digit == original:
                    continue
                mutated = iban[:position] + digit + iban[position + 1:]
                assert not validate_iban(mutated), mutated


class TestFormatIban:
    """Display grouping in blocks of four."""

    def test_belgian(self):
        assert format_iban("be68539007547034") == "BE68 5390 0754 7034"

    def test_uneven_length_has_no_trailing_space(self):
        formatted = format_iban("GB82WEST12345698765432")
        assert formatted == "GB82 WEST 1234 5698 7654 32"
        assert not formatted.endswith(" ")

    @pytest.mark.parametrize("iban", VALID_IBANS + ["garbage in", "", "x"])
    def test_idempotent(self, iban):
        assert format_iban(format_iban(iban)) == format_iban(iban)

    def test_no_validation(self):
        assert format_iban("BE00 0000") == "BE00 0000"

    def test_normalize(self):
        assert normalize_iban(" be68 5390\t0754 7034\n") == "BE68539007547034"
