import json

from impact_findings import DISCLAIMER, build_impact_findings, build_impact_summary, methodology_notes
from lighthouse import PerformanceMetrics, parse_lighthouse
from revenue_impact import calculate_business_impact


def _result(metrics):
    return calculate_business_impact(metrics, "100000", "45", "2.5")


def test_findings_order_and_amounts(sample_report_text):
    result = _result(parse_lighthouse(sample_report_text))
    findings = build_impact_findings(result, "USD", "en_US")

    assert [f["id"] for f in findings] == [
        "IMPACT_BASELINE_REVENUE",
        "IMPACT_SPEED_LOSS",
        "IMPACT_ACCESSIBILITY_LOSS",
        "IMPACT_SPEED_LOSS_LINEAR",
    ]
    by_id = {f["id"]: f for f in findings}
    assert by_id["IMPACT_BASELINE_REVENUE"]["amount_display"] == "$112,500.00"
    assert by_id["IMPACT_SPEED_LOSS"]["amount_display"] == "$56,250.00"
    assert by_id["IMPACT_SPEED_LOSS"]["severity"] == "critical"
    assert by_id["IMPACT_ACCESSIBILITY_LOSS"]["amount_display"] == "$375.00"
    assert by_id["IMPACT_ACCESSIBILITY_LOSS"]["severity"] == "warning"
    assert by_id["IMPACT_SPEED_LOSS_LINEAR"]["severity"] == "info"
    assert "comparison only" in by_id["IMPACT_SPEED_LOSS_LINEAR"]["explanation"]


def test_fast_accessible_site_has_ok_findings():
    result = _result(PerformanceMetrics(accessibility_score=98, lcp_seconds=1.2))
    by_id = {f["id"]: f for f in build_impact_findings(result, "EUR", "en_US")}
    assert by_id["IMPACT_SPEED_LOSS"]["severity"] == "ok"
    assert by_id["IMPACT_SPEED_LOSS"]["amount_display"] == "€0.00"
    assert by_id["IMPACT_ACCESSIBILITY_LOSS"]["severity"] == "ok"


def test_methodology_mentions_lift_and_cap():
    notes = methodology_notes(0.084)
    assert any("8.4%" in n for n in notes)
    assert any("50%" in n for n in notes)
    assert any("INP 200ms" in n for n in notes)


def test_summary_is_json_serializable(sample_report_text):
    metrics = parse_lighthouse(sample_report_text)
    summary = build_impact_summary(_result(metrics), metrics, "USD", "en_US")
    data = json.loads(json.dumps(summary, ensure_ascii=False))
    assert data["headline"].startswith("LCP 3.2s")
    assert data["metrics"]["perf_score"] == 68
    assert data["total_loss_display"] == "$56,625.00"
    assert data["disclaimer"] == DISCLAIMER
