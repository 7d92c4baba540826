from hostyield.services.insights import generate_insight
from hostyield.services.roi_engine import calculate_roi


def test_profitable_sublease_is_positive(make_inputs, westlands):
    r = calculate_roi(make_inputs(), westlands)

    insight = generate_insight(r, westlands.name, currency="KES")

    assert insight.sentiment == "positive"
    assert len(insight.bullet_points) == 3
    assert "month 21" in insight.bullet_points[1].text
    assert "68%" in insight.bullet_points[2].text


def test_negative_cash_flow_is_caution(make_inputs, westlands):
    r = calculate_roi(make_inputs(occupancy=0.2), westlands)

    insight = generate_insight(r, westlands.name, currency="KES")

    assert insight.sentiment == "caution"
    assert insight.bullet_points[0].icon == "alert"
    assert r.simulated_months == 360
    assert "not recovered within 30 years" in insight.bullet_points[1].text
    assert "Low occupancy" in insight.bullet_points[2].text


def test_long_buy_payback_is_flagged(make_inputs, westlands):
    r = calculate_roi(make_inputs(strategy="buy", down_payment_pct=0.0), westlands)
    assert r.payback_month is not None and r.payback_month > 180

    insight = generate_insight(r, westlands.name)

    assert "long-term equity play" in insight.bullet_points[1].text


def test_insight_does_not_mutate_result(make_inputs, westlands):
    r = calculate_roi(make_inputs(), westlands)
    before = r.to_dict()
    generate_insight(r, westlands.name)
    assert r.to_dict() == before
