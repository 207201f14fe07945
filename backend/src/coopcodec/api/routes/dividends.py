"""
Dividend calculation endpoints.

Stateless: the caller supplies share values and holdings; nothing is
stored and no period lifecycle is tracked here.
"""

from fastapi import APIRouter

from coopcodec.api.schemas import (
    DividendLineResponse,
    DividendPayoutRequest,
    DividendPayoutResponse,
    DividendSplitRequest,
    DividendSplitResponse,
)
from coopcodec.config import get_settings
from coopcodec.domain.dividend import (
    calculate_dividend,
    calculate_payout,
    eligible_holdings,
    percentage_to_rate,
)
from coopcodec.domain.models import ShareHolding

router = APIRouter(prefix="/dividends", tags=["dividends"])


@router.post("/split", response_model=DividendSplitResponse)
async def dividend_split(request: DividendSplitRequest) -> DividendSplitResponse:
    """Gross, withholding tax and net dividend on a share value."""
    tax_rate = request.withholding_tax_rate
    if tax_rate is None:
        tax_rate = get_settings().default_withholding_tax_rate
    
    split = calculate_dividend(request.share_value, request.dividend_rate, tax_rate)
    return DividendSplitResponse(
        gross=str(split.gross),
        tax=str(split.tax),
        net=str(split.net),
    )


@router.post("/payout", response_model=DividendPayoutResponse)
async def dividend_payout(request: DividendPayoutRequest) -> DividendPayoutResponse:
    """Payout of one shareholder over all of their holdings."""
    settings = get_settings()
    dividend_rate = percentage_to_rate(request.dividend_percentage)
    tax_rate = percentage_to_rate(
        request.withholding_tax_percentage,
        default=settings.default_withholding_tax_rate,
    )
    
    holdings = [
        ShareHolding(
            share_class_id=h.share_class_id,
            share_class_name=h.share_class_name,
            quantity=h.quantity,
            price_per_share=h.price_per_share,
            dividend_rate_override=h.dividend_rate_override,
            paid_on=h.paid_on,
        )
        for h in request.holdings
    ]
    if request.ex_dividend_date is not None:
        holdings = eligible_holdings(holdings, request.ex_dividend_date)
    
    payout = calculate_payout(holdings, dividend_rate, tax_rate)
    return DividendPayoutResponse(
        gross=str(payout.gross),
        tax=str(payout.tax),
        net=str(payout.net),
        lines=[
            DividendLineResponse(
                share_class_id=line.share_class_id,
                share_class_name=line.share_class_name,
                quantity=line.quantity,
                price_per_share=str(line.price_per_share),
                total_value=str(line.total_value),
                dividend_rate=str(line.dividend_rate),
                dividend_amount=str(line.dividend_amount),
            )
            for line in payout.lines
        ],
    )
