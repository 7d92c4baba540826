import pytest

from hostyield.domain.errors import InvalidOverride
from hostyield.services.validation import prepare_inputs


def _payload(**extra):
    base = {"region_id": "nbo-westlands", "unit_type": "one_bedroom", "strategy": "sublease"}
    base.update(extra)
    return base


def test_minimal_payload_defaults_to_mid_tier():
    inputs = prepare_inputs(_payload())
    assert inputs.furnishing_tier == "mid"
    assert inputs.overrides.occupancy is None


def test_form_labels_are_normalized():
    inputs = prepare_inputs(
        _payload(unit_type="2 Bedroom", strategy="Sublease (Rent-to-Rent)", furnishing_tier="Mid-Range")
    )
    assert inputs.unit_type == "two_bedroom"
    assert inputs.strategy == "sublease"
    assert inputs.furnishing_tier == "mid"


def test_percent_strings_and_whole_percents_are_normalized():
    inputs = prepare_inputs(
        _payload(strategy="buy", down_payment_pct="25%", interest_rate_annual=13.5, management_fee_pct="0.1")
    )
    assert inputs.overrides.down_payment_pct == pytest.approx(0.25)
    assert inputs.overrides.interest_rate_annual == pytest.approx(0.135)
    assert inputs.overrides.management_fee_pct == pytest.approx(0.1)


def test_percent_suffix_always_divides_by_hundred():
    inputs = prepare_inputs(_payload(strategy="buy", interest_rate_annual="0.5%", down_payment_pct="1%"))
    assert inputs.overrides.interest_rate_annual == pytest.approx(0.005)
    assert inputs.overrides.down_payment_pct == pytest.approx(0.01)


def test_bare_whole_percent_is_still_rescaled():
    inputs = prepare_inputs(_payload(strategy="buy", interest_rate_annual=12))
    assert inputs.overrides.interest_rate_annual == pytest.approx(0.12)


@pytest.mark.parametrize("mode", ["strict", "clamp"])
def test_occupancy_percent_string_is_a_fraction(mode):
    inputs = prepare_inputs(_payload(occupancy="68%"), mode=mode)
    assert inputs.overrides.occupancy == pytest.approx(0.68)


def test_percent_on_money_field_is_rejected():
    with pytest.raises(InvalidOverride) as exc:
        prepare_inputs(_payload(nightly_rate="50%"))
    assert any("nightly_rate" in e for e in exc.value.errors)


def test_nested_overrides_are_accepted():
    inputs = prepare_inputs(_payload(overrides={"occupancy": 0.5, "monthly_rent": "60,000"}))
    assert inputs.overrides.occupancy == 0.5
    assert inputs.overrides.monthly_rent == 60_000.0


def test_blank_strings_mean_not_set():
    inputs = prepare_inputs(_payload(nightly_rate="  "))
    assert inputs.overrides.nightly_rate is None


def test_missing_required_field():
    with pytest.raises(InvalidOverride) as exc:
        prepare_inputs({"region_id": "nbo-westlands", "unit_type": "studio"})
    assert "Missing required field: strategy" in str(exc.value)


def test_unknown_unit_type():
    with pytest.raises(InvalidOverride):
        prepare_inputs(_payload(unit_type="penthouse"))


def test_strict_rejects_out_of_range_occupancy():
    with pytest.raises(InvalidOverride) as exc:
        prepare_inputs(_payload(occupancy=1.2))
    assert "occupancy" in str(exc.value)


def test_clamp_mode_clamps_occupancy():
    assert prepare_inputs(_payload(occupancy=1.2), mode="clamp").overrides.occupancy == 1.0
    assert prepare_inputs(_payload(occupancy=-0.3), mode="clamp").overrides.occupancy == 0.0


@pytest.mark.parametrize("mode", ["strict", "clamp"])
def test_negative_money_is_rejected_in_both_modes(mode):
    with pytest.raises(InvalidOverride) as exc:
        prepare_inputs(_payload(monthly_rent=-1), mode=mode)
    assert "monthly_rent" in str(exc.value)


def test_all_errors_are_reported_together():
    with pytest.raises(InvalidOverride) as exc:
        prepare_inputs(_payload(nightly_rate=-5, water_cost=-1, cleaning_rate="abc"))
    assert len(exc.value.errors) == 3


def test_fractional_loan_term_rejected():
    with pytest.raises(InvalidOverride):
        prepare_inputs(_payload(strategy="buy", loan_term_years=12.5))
