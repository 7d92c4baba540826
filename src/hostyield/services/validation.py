# src/hostyield/services/validation.py

from __future__ import annotations

from typing import Any, Literal

from pydantic import ValidationError

from hostyield.domain.errors import InvalidOverride
from hostyield.domain.inputs import Overrides, StrategyInputs
from hostyield.domain.market import FURNISHING_TIERS, STRATEGIES, UNIT_TYPES

Mode = Literal["strict", "clamp"]

REQUIRED_FIELDS = ["region_id", "unit_type", "strategy"]

# Labels used by the web form, mapped to internal literals
_UNIT_ALIASES = {
    "studio": "studio",
    "1 bedroom": "one_bedroom",
    "1br": "one_bedroom",
    "2 bedroom": "two_bedroom",
    "2br": "two_bedroom",
    "3 bedroom": "three_bedroom",
    "3br": "three_bedroom",
}
_STRATEGY_ALIASES = {
    "buy": "buy",
    "sublease": "sublease",
    "sublease (rent-to-rent)": "sublease",
    "rent-to-rent": "sublease",
}
_TIER_ALIASES = {
    "budget": "budget",
    "mid": "mid",
    "mid-range": "mid",
    "premium": "premium",
}

PERCENT_FIELDS = {
    "management_fee_pct",
    "maintenance_reserve_pct",
    "down_payment_pct",
    "interest_rate_annual",
}
MONEY_FIELDS = {
    "nightly_rate",
    "monthly_rent",
    "purchase_price",
    "furnishing_cost",
    "cleaning_rate",
    "internet_cost",
    "electricity_cost",
    "water_cost",
    "entertainment_cost",
}


def _to_num(val: Any, field_name: str) -> tuple[float | None, bool]:
    """
    Coerce values like 250000, "250000", "6.5", "6.5%" into float.
    Returns (value, had_percent_sign). Blank strings count as "not set".
    """
    if val is None:
        return None, False
    if isinstance(val, bool):
        raise ValueError(f"Invalid type for {field_name}: bool")
    if isinstance(val, (int, float)):
        return float(val), False
    if isinstance(val, str):
        s = val.strip().replace(",", "")
        if not s:
            return None, False
        had_percent = s.endswith("%")
        if had_percent:
            s = s[:-1].strip()
        try:
            return float(s), had_percent
        except ValueError as err:
            raise ValueError(f"Invalid number for {field_name}: {val!r}") from err
    raise ValueError(f"Invalid type for {field_name}: {type(val)}")


def _normalize_choice(val: Any, aliases: dict[str, str], allowed: tuple[str, ...], field_name: str) -> str:
    key = str(val or "").strip().lower()
    if key in allowed:
        return key
    if key in aliases:
        return aliases[key]
    raise ValueError(f"Invalid {field_name}: {val!r}")


def _normalize_overrides(raw: dict[str, Any], mode: Mode, errors: list[str]) -> dict[str, Any]:
    cleaned: dict[str, Any] = {}
    for name in Overrides.model_fields:
        try:
            v, had_percent = _to_num(raw.get(name), name)
        except ValueError as e:
            errors.append(str(e))
            continue
        if v is None:
            continue

        if had_percent:
            if name not in PERCENT_FIELDS and name != "occupancy":
                errors.append(f"{name} does not accept a percent value (got {raw.get(name)!r})")
                continue
            # "0.5%" is always half a percent
            v /= 100.0
        elif name in PERCENT_FIELDS and v > 1.0:
            # bare 20 instead of 0.20; bare occupancy is never rescaled
            v /= 100.0

        if name in MONEY_FIELDS and v < 0:
            # monetary values are never clamped, even in clamp mode
            errors.append(f"{name} must be >= 0 (got {v})")
            continue

        if mode == "clamp":
            if name == "occupancy" or name in PERCENT_FIELDS:
                v = min(max(v, 0.0), 1.0)

        if name == "loan_term_years":
            if v != int(v):
                errors.append(f"loan_term_years must be a whole number (got {v})")
                continue
            cleaned[name] = int(v)
        else:
            cleaned[name] = v
    return cleaned


def prepare_inputs(raw: dict[str, Any], mode: Mode = "strict") -> StrategyInputs:
    """
    Validate a raw request payload and build StrategyInputs.

    strict: anything out of range raises InvalidOverride.
    clamp:  occupancy and percentages are clamped into [0, 1]; negative money
            is still rejected.

    Overrides may be given flat on the payload or nested under "overrides".
    """
    errors: list[str] = []

    for field in REQUIRED_FIELDS:
        if not raw.get(field):
            errors.append(f"Missing required field: {field}")
    if errors:
        raise InvalidOverride(errors)

    try:
        unit_type = _normalize_choice(raw["unit_type"], _UNIT_ALIASES, UNIT_TYPES, "unit_type")
        strategy = _normalize_choice(raw["strategy"], _STRATEGY_ALIASES, STRATEGIES, "strategy")
        tier = _normalize_choice(
            raw.get("furnishing_tier") or "mid", _TIER_ALIASES, FURNISHING_TIERS, "furnishing_tier"
        )
    except ValueError as e:
        raise InvalidOverride([str(e)]) from e

    override_src = dict(raw)
    nested = raw.get("overrides")
    if isinstance(nested, dict):
        override_src.update(nested)

    overrides = _normalize_overrides(override_src, mode, errors)
    if errors:
        raise InvalidOverride(errors)

    try:
        return StrategyInputs(
            region_id=str(raw["region_id"]).strip(),
            unit_type=unit_type,
            strategy=strategy,
            furnishing_tier=tier,
            overrides=Overrides(**overrides),
        )
    except ValidationError as e:
        raise InvalidOverride(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e
