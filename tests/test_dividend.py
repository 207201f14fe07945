"""Validate dividend split, payout and eligibility arithmetic."""

from datetime import date
from decimal import Decimal

import pytest

from coopcodec.domain.dividend import (
    calculate_dividend,
    calculate_payout,
    eligible_holdings,
    percentage_to_rate,
)
from coopcodec.domain.models import DividendSplit, ShareHolding, ShareStatus


class TestCalculateDividend:
    """Gross, tax and net rounding."""

    def test_reference_scenario(self):
        split = calculate_dividend(100, 0.05, 0.30)
        assert split == DividendSplit(
            gross=Decimal("5.00"),
            tax=Decimal("1.50"),
            net=Decimal("3.50"),
        )

    def test_net_is_difference_of_rounded_values(self):
        # gross 1.005 -> 1.01, tax 0.3015 -> 0.30; rounding net directly would give 0.70
        split = calculate_dividend(Decimal("20.10"), Decimal("0.05"), Decimal("0.30"))
        assert split.gross == Decimal("1.01")
        assert split.tax == Decimal("0.30")
        assert split.net == Decimal("0.71")

    def test_half_rounds_away_from_zero(self):
        split = calculate_dividend(Decimal("2.5"), Decimal("0.05"), 0)
        assert split.gross == Decimal("0.13")

    def test_float_inputs_use_their_decimal_text(self):
        assert calculate_dividend(0.1, 0.3, 0) == calculate_dividend(
            Decimal("0.1"), Decimal("0.3"), 0
        )

    @pytest.mark.parametrize("share_value", [0, 1, Decimal("99.99"), Decimal("1234.56"), 100000])
    @pytest.mark.parametrize("dividend_rate", [0, Decimal("0.025"), Decimal("0.05"), Decimal("0.1")])
    @pytest.mark.parametrize("tax_rate", [0, Decimal("0.15"), Decimal("0.30"), 1])
    def test_identity(self, share_value, dividend_rate, tax_rate):
        split = calculate_dividend(share_value, dividend_rate, tax_rate)
        assert split.net == split.gross - split.tax
        assert split.net <= split.gross
        for amount in (split.gross, split.tax, split.net):
            assert amount.as_tuple().exponent == -2

    def test_large_share_value_is_exact(self):
        split = calculate_dividend(Decimal("1e30"), 0.05, 0.3)
        assert split.gross == Decimal("5E+28")
        assert split.tax == Decimal("1.5E+28")
        assert split.net == Decimal("3.5E+28")
        assert str(split.net) == "35" + "0" * 27 + ".00"

    def test_split_rejects_inconsistent_values(self):
        with pytest.raises(ValueError):
            DividendSplit(gross=Decimal("5.00"), tax=Decimal("1.50"), net=Decimal("3.49"))


class TestPercentageToRate:
    """Admin input conversion."""

    def test_percentage(self):
        assert percentage_to_rate(2.5) == Decimal("0.025")
        assert percentage_to_rate(Decimal("30")) == Decimal("0.30")

    def test_missing_uses_default(self):
        assert percentage_to_rate(None, default=Decimal("0.30")) == Decimal("0.30")
        assert percentage_to_rate(0, default=Decimal("0.30")) == Decimal("0.30")

    def test_zero_without_default(self):
        assert percentage_to_rate(0) == Decimal("0")

    def test_missing_without_default(self):
        with pytest.raises(ValueError):
            percentage_to_rate(None)

    @pytest.mark.parametrize("percentage", [-1, Decimal("100.01"), 250])
    def test_out_of_range(self, percentage):
        with pytest.raises(ValueError):
            percentage_to_rate(percentage)


def _holding(**overrides) -> ShareHolding:
    values = {
        "share_class_id": "A",
        "share_class_name": "Aandeel A",
        "quantity": 10,
        "price_per_share": Decimal("250"),
        "paid_on": date(2024, 3, 1),
    }
    values.update(overrides)
    return ShareHolding(**values)


class TestEligibleHoldings:
    """Ownership before the ex-dividend date."""

    def test_filters(self):
        ex_date = date(2024, 12, 31)
        paid_before = _holding()
        paid_on_ex_date = _holding(paid_on=ex_date)
        unpaid = _holding(paid_on=None)
        pending = _holding(status=ShareStatus.PENDING)
        sold = _holding(status=ShareStatus.SOLD)

        result = eligible_holdings(
            [paid_before, paid_on_ex_date, unpaid, pending, sold], ex_date
        )
        assert result == [paid_before]


class TestCalculatePayout:
    """Per-shareholder aggregation."""

    def test_class_override_and_tax_on_sum(self):
        holdings = [
            _holding(),  # 2500.00 at 2.5% -> 62.50
            _holding(
                share_class_id="B",
                share_class_name="Aandeel B",
                quantity=4,
                price_per_share=Decimal("125.50"),
                dividend_rate_override=Decimal("0.04"),
            ),  # 502.00 at 4% -> 20.08
        ]

        payout = calculate_payout(holdings, Decimal("0.025"), Decimal("0.30"))

        assert payout.gross == Decimal("82.58")
        assert payout.tax == Decimal("24.77")
        assert payout.net == Decimal("57.81")
        assert [line.dividend_rate for line in payout.lines] == [Decimal("0.025"), Decimal("0.04")]
        assert [line.dividend_amount for line in payout.lines] == [Decimal("62.50"), Decimal("20.08")]
        assert payout.lines[1].total_value == Decimal("502.00")
        assert payout.split.net == payout.net

    def test_zero_override_uses_period_rate(self):
        payout = calculate_payout(
            [_holding(dividend_rate_override=Decimal("0"))],
            Decimal("0.025"),
            Decimal("0.30"),
        )
        assert payout.lines[0].dividend_rate == Decimal("0.025")
        assert payout.gross == Decimal("62.50")

    def test_large_holdings_are_exact(self):
        holdings = [
            _holding(quantity=10**24, price_per_share=Decimal("250.10")),
            _holding(quantity=1, price_per_share=Decimal("0.20")),
        ]
        payout = calculate_payout(holdings, Decimal("0.1"), Decimal("0.30"))
        # 25010 * 10**21 + 0.02, tax 7503 * 10**21 + 0.006
        assert payout.gross == Decimal("25010" + "0" * 21 + ".02")
        assert payout.tax == Decimal("7503" + "0" * 21 + ".01")
        assert payout.net == Decimal("17507" + "0" * 21 + ".01")

    def test_no_holdings(self):
        payout = calculate_payout([], Decimal("0.025"), Decimal("0.30"))
        assert payout.gross == payout.tax == payout.net == Decimal("0")
        assert payout.lines == ()
