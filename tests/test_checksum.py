"""Validate modulo 97 block reduction."""

import pytest

from coopcodec.domain.checksum import mod97, ogm_check_value


class TestMod97:
    """Chunked reduction must equal plain integer arithmetic."""

    @pytest.mark.parametrize(
        "digits",
        [
            "0",
            "96",
            "97",
            "98",
            "123456789",
            "1234567890123",
            "539007547034111468",
            "3214282912345698765432161182",
            "9" * 60,
            "0000000097",
        ],
    )
    def test_matches_integer_modulo(self, digits):
        assert mod97(digits) == int(digits) % 97

    @pytest.mark.parametrize("digits", ["", "12a4", "12 34", "١٢"])
    def test_rejects_non_digits(self, digits):
        with pytest.raises(ValueError):
            mod97(digits)


class TestOgmCheckValue:
    """The OGM alphabet is 1..97."""

    def test_zero_maps_to_97(self):
        assert ogm_check_value(0) == 97
        assert ogm_check_value(97 * 1234) == 97

    def test_nonzero_remainder(self):
        assert ogm_check_value(10_000_042) == 21
        assert ogm_check_value(98) == 1
