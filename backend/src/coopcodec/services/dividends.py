"""
Dividend run for a period: eligibility, per-shareholder payouts, totals.

Holdings are grouped by shareholder, filtered on the ex-dividend date and
passed through the domain payout calculation.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, localcontext

from coopcodec.domain.dividend import (
    DEFAULT_WITHHOLDING_TAX_RATE,
    calculate_payout,
    eligible_holdings,
    percentage_to_rate,
)
from coopcodec.domain.models import EXACT_CONTEXT, DividendPayout, ShareHolding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DividendPeriod:
    """A dividend period with rates expressed as fractions."""
    name: str
    year: int
    dividend_rate: Decimal
    withholding_tax_rate: Decimal
    ex_dividend_date: date
    payment_date: date | None = None
    
    @classmethod
    def from_percentages(
        cls,
        name: str,
        year: int,
        dividend_percentage: Decimal | float,
        ex_dividend_date: date,
        withholding_tax_percentage: Decimal | float | None = None,
        payment_date: date | None = None,
        default_withholding_tax_rate: Decimal = DEFAULT_WITHHOLDING_TAX_RATE,
    ) -> "DividendPeriod":
        """Create a period from admin input (2.5 = 2.5%)."""
        if not 2000 <= year <= 2100:
            raise ValueError(f"Year out of range: {year}")
        return cls(
            name=name,
            year=year,
            dividend_rate=percentage_to_rate(dividend_percentage),
            withholding_tax_rate=percentage_to_rate(
                withholding_tax_percentage, default=default_withholding_tax_rate
            ),
            ex_dividend_date=ex_dividend_date,
            payment_date=payment_date,
        )


@dataclass
class DividendRunResult:
    """Payouts per shareholder with period totals."""
    period: DividendPeriod
    payouts: dict[str, DividendPayout] = field(default_factory=dict)
    
    def _total(self, attribute: str) -> Decimal:
        with localcontext(EXACT_CONTEXT):
            return sum(
                (getattr(p, attribute) for p in self.payouts.values()),
                Decimal("0.00"),
            )
    
    @property
    def total_gross(self) -> Decimal:
        return self._total("gross")
    
    @property
    def total_tax(self) -> Decimal:
        return self._total("tax")
    
    @property
    def total_net(self) -> Decimal:
        return self._total("net")


class DividendRunService:
    """Calculates all payouts of a dividend period."""
    
    def calculate(
        self,
        period: DividendPeriod,
        holdings: Iterable[tuple[str, ShareHolding]],
    ) -> DividendRunResult:
        """
        Calculate payouts for every shareholder with eligible holdings.
        
        Args:
            period: The dividend period
            holdings: (shareholder_id, holding) pairs
            
        Returns:
            DividendRunResult keyed by shareholder id
        """
        by_shareholder: dict[str, list[ShareHolding]] = defaultdict(list)
        for shareholder_id, holding in holdings:
            by_shareholder[shareholder_id].append(holding)
        
        result = DividendRunResult(period=period)
        for shareholder_id, shareholder_holdings in by_shareholder.items():
            eligible = eligible_holdings(shareholder_holdings, period.ex_dividend_date)
            if not eligible:
                continue
            result.payouts[shareholder_id] = calculate_payout(
                eligible,
                period.dividend_rate,
                period.withholding_tax_rate,
            )
        
        logger.info(
            f"Dividend run {period.name}: {len(result.payouts)} shareholders, "
            f"gross {result.total_gross}, tax {result.total_tax}, net {result.total_net}"
        )
        return result
