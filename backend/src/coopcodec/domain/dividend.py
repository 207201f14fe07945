"""
Dividend arithmetic: gross, withholding tax and net amounts.

Rounding rule: gross and tax are each rounded to the cent (half away from
zero) and net is the difference of the rounded values, so
``net == gross - tax`` always holds to the cent.

Design Decisions:
- Decimal throughout; floats are converted through str() so 0.05 means 0.05
- Payout tax is computed on the summed gross, not summed per holding
- Rates are fractions (0.30); percentages from admin input are converted once
"""

from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .models import (
    EXACT_CONTEXT,
    DividendLine,
    DividendPayout,
    DividendSplit,
    ShareHolding,
    ShareStatus,
)


CENT = Decimal("0.01")

# Belgian roerende voorheffing on cooperative dividends
DEFAULT_WITHHOLDING_TAX_RATE = Decimal("0.30")

Number = Decimal | float | int


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    """Round half away from zero to 2 decimals."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP, context=EXACT_CONTEXT)


def calculate_dividend(
    share_value: Number,
    dividend_rate: Number,
    withholding_tax_rate: Number,
) -> DividendSplit:
    """
    Calculate dividend amounts for a share value.
    
    Args:
        share_value: Total value of the shares
        dividend_rate: Dividend rate as a fraction (0.05 = 5%)
        withholding_tax_rate: Withholding tax as a fraction (0.30 = 30%)
        
    Returns:
        DividendSplit with gross, tax and net rounded to the cent
        
    Example:
        >>> calculate_dividend(100, 0.05, 0.30)
        DividendSplit(gross=Decimal('5.00'), tax=Decimal('1.50'), net=Decimal('3.50'))
    """
    with localcontext(EXACT_CONTEXT):
        gross = to_decimal(share_value) * to_decimal(dividend_rate)
        tax = gross * to_decimal(withholding_tax_rate)
        
        rounded_gross = round_cents(gross)
        rounded_tax = round_cents(tax)
        net = rounded_gross - rounded_tax
    return DividendSplit(gross=rounded_gross, tax=rounded_tax, net=net)


def percentage_to_rate(
    percentage: Number | None,
    default: Decimal | None = None,
) -> Decimal:
    """
    Convert a percentage (2.5 = 2.5%) to a fraction (0.025).
    
    A missing or zero percentage falls back to ``default`` when one is
    given, matching how withholding tax defaults to 30% for new periods.
    
    Raises:
        ValueError: If the percentage is missing without default, or outside 0-100
    """
    if not percentage:
        if default is not None:
            return default
        if percentage is None:
            raise ValueError("Percentage is required")
        return Decimal("0")
    
    value = to_decimal(percentage)
    if not Decimal("0") <= value <= Decimal("100"):
        raise ValueError(f"Percentage must be between 0 and 100, got {percentage}")
    return value / 100


def eligible_holdings(
    holdings: Iterable[ShareHolding],
    ex_dividend_date: date,
) -> list[ShareHolding]:
    """Active holdings paid strictly before the ex-dividend date."""
    return [
        holding for holding in holdings
        if holding.status == ShareStatus.ACTIVE
        and holding.paid_on is not None
        and holding.paid_on < ex_dividend_date
    ]


def calculate_payout(
    holdings: Iterable[ShareHolding],
    dividend_rate: Number,
    withholding_tax_rate: Number,
) -> DividendPayout:
    """
    Calculate one shareholder's payout over all of their holdings.
    
    Each holding earns the period rate unless its share class overrides
    it with a non-zero rate; an override of zero counts as unset. The
    payout gross is the sum of the per-holding rounded dividends;
    withholding tax is applied once to that sum.
    """
    period_rate = to_decimal(dividend_rate)
    tax_rate = to_decimal(withholding_tax_rate)
    
    lines: list[DividendLine] = []
    with localcontext(EXACT_CONTEXT):
        for holding in holdings:
            rate = (
                to_decimal(holding.dividend_rate_override)
                if holding.dividend_rate_override
                else period_rate
            )
            split = calculate_dividend(holding.value, rate, tax_rate)
            lines.append(
                DividendLine(
                    share_class_id=holding.share_class_id,
                    share_class_name=holding.share_class_name,
                    quantity=holding.quantity,
                    price_per_share=holding.price_per_share,
                    total_value=holding.value,
                    dividend_rate=rate,
                    dividend_amount=split.gross,
                )
            )
        
        gross = sum((line.dividend_amount for line in lines), Decimal("0.00"))
        tax = round_cents(gross * tax_rate)
        net = gross - tax
    return DividendPayout(gross=gross, tax=tax, net=net, lines=tuple(lines))
