# src/hostyield/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hostyield.domain.assumptions import EngineConstants


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")
    CURRENCY: str = Field(default="KES")

    # Headline engine defaults (everything else lives on EngineConstants)
    PLATFORM_FEE_PCT: float = Field(default=0.03)
    DEFAULT_MANAGEMENT_FEE_PCT: float = Field(default=0.0)
    DEFAULT_MAINTENANCE_RESERVE_PCT: float = Field(default=0.0)
    DEFAULT_DOWN_PAYMENT_PCT: float = Field(default=0.20)
    DEFAULT_MORTGAGE_RATE: float = Field(default=0.145)
    DEFAULT_LOAN_TERM_YEARS: int = Field(default=15)

    # -----------------------------
    # Projection window
    # -----------------------------
    MIN_DISPLAY_MONTHS: int = Field(default=60)
    MAX_HORIZON_MONTHS: int = Field(default=360)

    # -----------------------------
    # Simulated market data
    # -----------------------------
    SMART_MARKET_SEED: int | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="HOSTYIELD_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "PLATFORM_FEE_PCT",
        "DEFAULT_MANAGEMENT_FEE_PCT",
        "DEFAULT_MAINTENANCE_RESERVE_PCT",
        "DEFAULT_DOWN_PAYMENT_PCT",
        "DEFAULT_MORTGAGE_RATE",
        mode="before",
    )
    @classmethod
    def _to_non_negative_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("rate must be numeric or percent-like") from err
        if f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @field_validator("DEFAULT_LOAN_TERM_YEARS", "MIN_DISPLAY_MONTHS", "MAX_HORIZON_MONTHS", mode="before")
    @classmethod
    def _positive_int(cls, v: Any) -> Any:
        i = int(v)
        if i <= 0:
            raise ValueError("must be > 0")
        return i


config = AppConfig()


def constants_from_config(cfg: AppConfig | None = None) -> EngineConstants:
    """Engine defaults with the environment-tunable values applied."""
    cfg = cfg or config
    return EngineConstants(
        platform_fee_pct=cfg.PLATFORM_FEE_PCT,
        management_fee_pct=cfg.DEFAULT_MANAGEMENT_FEE_PCT,
        maintenance_reserve_pct=cfg.DEFAULT_MAINTENANCE_RESERVE_PCT,
        down_payment_pct=cfg.DEFAULT_DOWN_PAYMENT_PCT,
        mortgage_rate_annual=cfg.DEFAULT_MORTGAGE_RATE,
        loan_term_years=cfg.DEFAULT_LOAN_TERM_YEARS,
        min_display_months=cfg.MIN_DISPLAY_MONTHS,
        max_horizon_months=max(cfg.MAX_HORIZON_MONTHS, cfg.MIN_DISPLAY_MONTHS),
    )
