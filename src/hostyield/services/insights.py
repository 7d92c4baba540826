# src/hostyield/services/insights.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from hostyield.adapters.config import config
from hostyield.domain.market import UNIT_TYPE_LABELS
from hostyield.domain.results import CalculationResult

Sentiment = Literal["positive", "neutral", "caution"]
Icon = Literal["trending-up", "wallet", "alert", "check", "lightbulb"]


@dataclass
class InsightBullet:
    icon: Icon
    text: str


@dataclass
class Insight:
    headline: str
    sentiment: Sentiment
    bullet_points: list[InsightBullet] = field(default_factory=list)


def _money(x: float, currency: str) -> str:
    return f"{x:,.0f} {currency}"


def generate_insight(
    result: CalculationResult,
    region_name: str,
    *,
    currency: str | None = None,
) -> Insight:
    """
    Plain-language read of a CalculationResult.

    Read-only: never changes the result.
    """
    currency = currency or config.CURRENCY
    params = result.parameters
    unit_label = UNIT_TYPE_LABELS[params.unit_type]
    roi = result.cash_on_cash_return or 0.0
    cashflow = result.monthly_cash_flow
    occupancy_pct = params.occupancy * 100.0

    # 1. Sentiment & headline
    if cashflow < 0:
        sentiment: Sentiment = "caution"
        headline = "Caution: Negative Cash Flow Projected"
    elif roi > 20:
        sentiment = "positive"
        headline = f"High-Yield Opportunity Detected in {region_name}"
    elif roi > 10:
        sentiment = "positive"
        headline = f"Solid Investment Case for {unit_label}"
    else:
        sentiment = "neutral"
        headline = f"Moderate Returns for this {unit_label}"

    bullets: list[InsightBullet] = []

    # 2. Cash flow & ROI
    if cashflow < 0:
        bullets.append(InsightBullet(
            "alert",
            f"Negative monthly cash flow of {_money(abs(cashflow), currency)}. "
            "You will need to top up expenses.",
        ))
    elif roi > 25:
        bullets.append(InsightBullet(
            "trending-up",
            f"Exceptional {roi:.1f}% Cash-on-Cash Return, outperforming standard market averages.",
        ))
    else:
        bullets.append(InsightBullet(
            "wallet",
            f"Generates {_money(cashflow, currency)} in monthly net passive income.",
        ))

    # 3. Strategy specific
    payback = result.payback_month
    if payback is None:
        bullets.append(InsightBullet(
            "alert",
            f"Initial capital is not recovered within {result.simulated_months // 12} years at current rates.",
        ))
    elif params.strategy == "buy":
        years = payback / 12.0
        if payback > 180:
            bullets.append(InsightBullet(
                "lightbulb",
                f"Long payback period of {years:.1f} years. "
                "Consider this a long-term equity play rather than a cash cow.",
            ))
        else:
            bullets.append(InsightBullet(
                "check",
                f"Full capital recovery estimated in {years:.1f} years via cash flow alone.",
            ))
    else:
        bullets.append(InsightBullet(
            "check",
            f"Breakeven projected at month {payback}. Capital at risk is limited to setup costs.",
        ))

    # 4. Occupancy & market
    if params.occupancy < 0.5:
        bullets.append(InsightBullet(
            "alert",
            f"Low occupancy assumption ({occupancy_pct:.0f}%) significantly impacts viability. "
            "Ensure marketing is strong.",
        ))
    elif roi > 15 and params.occupancy > 0.75:
        bullets.append(InsightBullet(
            "lightbulb",
            f"High occupancy ({occupancy_pct:.0f}%) is driving these returns. Verify demand in {region_name}.",
        ))
    else:
        bullets.append(InsightBullet(
            "lightbulb",
            f"Strategy assumes stable {occupancy_pct:.0f}% occupancy amidst {region_name} market conditions.",
        ))

    return Insight(headline=headline, sentiment=sentiment, bullet_points=bullets)
