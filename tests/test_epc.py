"""Validate EPC QR payload construction."""

from decimal import Decimal

import pytest

from coopcodec.domain.epc import build_epc_payload, format_epc_amount
from coopcodec.domain.errors import InvalidAmountError
from coopcodec.domain.models import EpcPaymentRequest


def _payment(**overrides) -> EpcPaymentRequest:
    values = {
        "bic": "BBRUBEBB",
        "beneficiary_name": "Test Coop",
        "iban": "BE68539007547034",
        "amount": 10.5,
    }
    values.update(overrides)
    return EpcPaymentRequest(**values)


class TestBuildEpcPayload:
    """Fixed 11-line layout."""

    def test_minimal_payment(self):
        lines = build_epc_payload(_payment()).split("\n")

        assert lines == [
            "BCD",
            "002",
            "1",
            "SCT",
            "BBRUBEBB",
            "Test Coop",
            "BE68539007547034",
            "EUR10.50",
            "",
            "",
            "",
        ]

    def test_structured_reference(self):
        payload = build_epc_payload(_payment(reference="+++001/0000/04221+++"))
        lines = payload.split("\n")

        assert len(lines) == 11
        assert lines[9] == "+++001/0000/04221+++"
        assert lines[10] == ""

    def test_unstructured_remittance(self):
        lines = build_epc_payload(_payment(unstructured="Aandelen A")).split("\n")
        assert lines[9] == ""
        assert lines[10] == "Aandelen A"

    def test_bic_and_iban_normalized(self):
        lines = build_epc_payload(
            _payment(bic="bbru be bb", iban="be68 5390 0754 7034")
        ).split("\n")
        assert lines[4] == "BBRUBEBB"
        assert lines[6] == "BE68539007547034"

    def test_beneficiary_name_truncated(self):
        lines = build_epc_payload(_payment(beneficiary_name="X" * 100)).split("\n")
        assert lines[5] == "X" * 70

    def test_no_validation_of_components(self):
        payload = build_epc_payload(
            _payment(iban="NOT AN IBAN", amount=-5, reference="whatever")
        )
        lines = payload.split("\n")
        assert lines[6] == "NOTANIBAN"
        assert lines[7] == "EUR-5.00"
        assert lines[9] == "whatever"


class TestFormatEpcAmount:
    """Machine amount formatting."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (10.5, "EUR10.50"),
            (0, "EUR0.00"),
            (1234567, "EUR1234567.00"),
            (Decimal("99.999"), "EUR100.00"),
            (0.005, "EUR0.01"),
            (1.005, "EUR1.01"),
            (Decimal("1e30"), "EUR1" + "0" * 30 + ".00"),
            (Decimal("250"), "EUR250.00"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_epc_amount(amount) == expected

    @pytest.mark.parametrize("amount", ["abc", float("nan"), float("inf"), None, True])
    def test_not_a_number(self, amount):
        with pytest.raises(InvalidAmountError):
            format_epc_amount(amount)

    def test_large_amount_keeps_every_digit(self):
        assert format_epc_amount(Decimal("123456789012345678901234567890.125")) == (
            "EUR123456789012345678901234567890.13"
        )
        payload = build_epc_payload(_payment(amount=Decimal("1e30")))
        assert payload.split("\n")[7] == "EUR1" + "0" * 30 + ".00"

    def test_builder_propagates_amount_error(self):
        with pytest.raises(InvalidAmountError):
            build_epc_payload(_payment(amount="ten"))
