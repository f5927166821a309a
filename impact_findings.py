"""impact_findings.py

Creates plain-language Findings from a revenue-impact calculation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from currency_format import format_currency
from lighthouse import PerformanceMetrics
from revenue_impact import (
    A11Y_REVENUE_IMPACT_RATE,
    MAX_REALISTIC_IMPACT,
    SIMPLE_SPEED_IMPACT,
    TARGET_CLS,
    TARGET_INP_SECONDS,
    TARGET_LCP_SECONDS,
    TARGET_TBT_MS,
    CalculationResult,
)

DELOITTE_STUDY_URL = (
    "https://www.thinkwithgoogle.com/_qs/documents/9757/Milliseconds_Make_Millions_report_hQYAbZJ.pdf"
)

RESEARCH_SOURCES = [
    {"title": "Deloitte: Milliseconds Make Millions (2020)", "url": DELOITTE_STUDY_URL},
    {"title": "Accessibility: Conservative estimate, limited global benchmarks", "url": ""},
]

DISCLAIMER = [
    "These are statistical estimates only - not guaranteed results. Calculations are based on "
    "third-party research and may not apply to your specific business, industry, or market conditions.",
    "No warranty or guarantee is provided. Always validate with real A/B testing, user data, and "
    "professional consultation before making significant changes.",
    "This tool is for educational purposes only and does not constitute financial, business, "
    "or professional advice.",
]


def _fmt_pct(x: float) -> str:
    # x=0.084 -> "8.4%"
    return f"{x * 100:g}%"


def methodology_notes(lift_per_100ms: float) -> List[str]:
    return [
        "Use all available Core Web Vitals metrics (same as the original study).",
        f"Apply {_fmt_pct(lift_per_100ms)} impact per 0.1s across the combined metric gaps.",
        f"Cap results at {_fmt_pct(MAX_REALISTIC_IMPACT)} to prevent unrealistic projections.",
        (
            f"Targets: LCP {TARGET_LCP_SECONDS}s, CLS {TARGET_CLS}, "
            f"INP {TARGET_INP_SECONDS * 1000:.0f}ms, TBT {TARGET_TBT_MS}ms."
        ),
        f"Accessibility: up to {_fmt_pct(A11Y_REVENUE_IMPACT_RATE)} of revenue, scaled by the gap below 90/100.",
    ]


def _finding(
    finding_id: str,
    title: str,
    amount: float,
    explanation: str,
    severity: str,
    currency_code: str,
    locale: Optional[str],
) -> Dict[str, Any]:
    return {
        "id": finding_id,
        "title": title,
        "amount": amount,
        "amount_display": format_currency(amount, currency_code, locale),
        "explanation": explanation,
        "severity": severity,
    }


def _loss_severity(loss: float, baseline: float) -> str:
    if loss <= 0:
        return "ok"
    if baseline > 0 and loss / baseline >= 0.1:
        return "critical"
    return "warning"


def build_impact_findings(
    result: CalculationResult,
    currency_code: str = "USD",
    locale: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Build Findings (JSON-serializable) in display order."""
    baseline = result.baseline_revenue

    findings = [
        _finding(
            "IMPACT_BASELINE_REVENUE",
            "Baseline monthly revenue",
            baseline,
            "Monthly visits x conversion rate x average order value.",
            "info",
            currency_code,
            locale,
        ),
    ]

    if result.speed_loss_deloitte > 0:
        speed_text = (
            "Every month, your shop may lose this much because the site is slower than recommended. "
            "Making your site faster can help recover this money."
        )
    else:
        speed_text = "Your Core Web Vitals meet the recommended targets; no speed-related loss is estimated."
    findings.append(
        _finding(
            "IMPACT_SPEED_LOSS",
            "Estimated money lost due to slow performance",
            result.speed_loss_deloitte,
            speed_text,
            _loss_severity(result.speed_loss_deloitte, baseline),
            currency_code,
            locale,
        )
    )

    if result.accessibility_loss > 0:
        a11y_text = "Improving accessibility helps more people complete purchases, increasing your revenue."
    else:
        a11y_text = "No accessibility-related loss is estimated (score at or above 90/100, or not measured)."
    findings.append(
        _finding(
            "IMPACT_ACCESSIBILITY_LOSS",
            "Estimated money lost due to accessibility issues",
            result.accessibility_loss,
            a11y_text,
            _loss_severity(result.accessibility_loss, baseline),
            currency_code,
            locale,
        )
    )

    findings.append(
        _finding(
            "IMPACT_SPEED_LOSS_LINEAR",
            "Simple comparison: linear speed estimate",
            result.speed_loss_linear,
            (
                f"A simpler model at {_fmt_pct(SIMPLE_SPEED_IMPACT)} of revenue per second over target "
                f"({result.total_gap_seconds:.2f}s combined). Shown for comparison only."
            ),
            "info",
            currency_code,
            locale,
        )
    )
    return findings


def build_impact_summary(
    result: CalculationResult,
    metrics: Optional[PerformanceMetrics] = None,
    currency_code: str = "USD",
    locale: Optional[str] = None,
) -> Dict[str, Any]:
    """Everything the CLI and the PDF show for one calculation."""
    return {
        "headline": result.headline,
        "currency": currency_code,
        "locale": locale,
        "metrics": metrics.to_dict() if metrics is not None else {},
        "result": result.to_dict(),
        "findings": build_impact_findings(result, currency_code, locale),
        "total_loss_display": format_currency(result.total_loss, currency_code, locale),
        "methodology": methodology_notes(result.lift_per_100ms),
        "sources": RESEARCH_SOURCES,
        "disclaimer": DISCLAIMER,
    }
