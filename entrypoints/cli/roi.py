from __future__ import annotations

import json
from typing import Optional

import typer

from hostyield.adapters.config import config, constants_from_config
from hostyield.adapters.market_smart import SmartMarketProvider
from hostyield.adapters.market_static import StaticMarketProvider
from hostyield.domain.errors import InvalidOverride, UnknownRegion
from hostyield.domain.market import UNIT_TYPE_LABELS
from hostyield.services.insights import generate_insight
from hostyield.services.roi_engine import calculate_for_region
from hostyield.services.validation import prepare_inputs

app = typer.Typer(help="Short-term-rental ROI for buy vs. sublease strategies.")


@app.command("regions")
def regions_cmd() -> None:
    """
    List the bundled market regions.
    """
    for p in StaticMarketProvider().list_regions():
        typer.echo(
            f"{p.id:<16} {p.name:<26} {p.county:<10} "
            f"occ={p.avg_occupancy:.0%} demand={p.demand_score:.1f}"
        )


@app.command("calculate")
def calculate_cmd(
    region: str = typer.Argument(..., help="Region id, e.g. nbo-westlands."),
    unit: str = typer.Option("one_bedroom", help="studio|one_bedroom|two_bedroom|three_bedroom"),
    strategy: str = typer.Option("sublease", help="buy|sublease"),
    tier: str = typer.Option("mid", help="Furnishing tier: budget|mid|premium"),
    occupancy: Optional[float] = typer.Option(None, help="Override occupancy (0-1)."),
    nightly_rate: Optional[float] = typer.Option(None, help="Override nightly rate."),
    monthly_rent: Optional[float] = typer.Option(None, help="Override monthly rent (sublease)."),
    purchase_price: Optional[float] = typer.Option(None, help="Override purchase price (buy)."),
    down_payment: Optional[str] = typer.Option(None, help="Down payment, e.g. 0.2 or 20%."),
    interest_rate: Optional[str] = typer.Option(None, help="Annual mortgage rate, e.g. 14.5%."),
    loan_term_years: Optional[int] = typer.Option(None, help="Loan term in years."),
    clamp: bool = typer.Option(False, help="Clamp occupancy/percentages instead of rejecting."),
    smart: bool = typer.Option(False, help="Use simulated live market data."),
    as_json: bool = typer.Option(False, "--json", help="Dump the full result as JSON."),
) -> None:
    """
    Run the ROI engine for one region and strategy.
    """
    raw = {
        "region_id": region,
        "unit_type": unit,
        "strategy": strategy,
        "furnishing_tier": tier,
        "occupancy": occupancy,
        "nightly_rate": nightly_rate,
        "monthly_rent": monthly_rent,
        "purchase_price": purchase_price,
        "down_payment_pct": down_payment,
        "interest_rate_annual": interest_rate,
        "loan_term_years": loan_term_years,
    }

    provider = StaticMarketProvider()
    if smart:
        provider = SmartMarketProvider(provider, seed=config.SMART_MARKET_SEED)

    try:
        inputs = prepare_inputs(raw, mode="clamp" if clamp else "strict")
        result = calculate_for_region(inputs, provider, constants_from_config(config))
    except (InvalidOverride, UnknownRegion) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    cur = config.CURRENCY
    profile = provider.get(region)
    region_name = profile.name if profile else region

    typer.echo(f"{UNIT_TYPE_LABELS[inputs.unit_type]} in {region_name} ({inputs.strategy})")
    typer.echo(f"Initial investment: {result.initial_investment:,.0f} {cur}")
    typer.echo(f"Monthly revenue: {result.monthly_revenue:,.0f} {cur}")
    typer.echo(f"Monthly expenses: {result.monthly_opex.total:,.0f} {cur}")
    typer.echo(f"Monthly cash flow: {result.monthly_cash_flow:,.0f} {cur}")
    if result.cash_on_cash_return is not None:
        typer.echo(f"Cash-on-cash return: {result.cash_on_cash_return:.1f}%")
    if result.cap_rate is not None:
        typer.echo(f"Cap rate: {result.cap_rate:.1f}%")
    if result.payback_month is None:
        typer.echo("Payback: not reached")
    else:
        typer.echo(f"Payback month: {result.payback_month} (~{result.payback_month / 12:.1f} years)")

    insight = generate_insight(result, region_name, currency=cur)
    typer.echo("")
    typer.echo(insight.headline)
    for b in insight.bullet_points:
        typer.echo(f"  - {b.text}")


if __name__ == "__main__":
    app()
