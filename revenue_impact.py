"""revenue_impact.py

Deterministic, conservative revenue-impact estimation from Lighthouse metrics.

Principles:
- Never claim precise numbers: these are estimates, not guarantees.
- Every figure is bounded (speed loss <= 50% of baseline, accessibility <= 2%).
- Missing metrics contribute zero impact, never an error.
- Bad business inputs return a CalculationError value; nothing is raised.

Speed model: Deloitte "Milliseconds Make Millions" (2020), 37 brands and 30M
sessions over 4 weeks: 8.4% conversion lift per 0.1s across LCP, CLS, INP, TBT.
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Dict, Optional, Union

from lighthouse import PerformanceMetrics

# Core Web Vitals targets
TARGET_LCP_SECONDS = 2.5
TARGET_CLS = 0.1
TARGET_INP_SECONDS = 0.2
TARGET_TBT_MS = 200

DELOITTE_BASE_IMPACT = 0.084  # per 0.1s
MAX_REALISTIC_IMPACT = 0.5
SIMPLE_SPEED_IMPACT = 0.02  # per second, linear fallback

# Per-vertical conversion lift per 0.1s (same study)
VERTICAL_BENCHMARKS: Dict[str, float] = {
    "retail": 0.084,
    "travel": 0.101,
    "luxury": 0.036,
    "default": DELOITTE_BASE_IMPACT,
}

A11Y_TARGET_SCORE = 90
A11Y_MAX_GAP_RANGE = 30
A11Y_REVENUE_IMPACT_RATE = 0.02

NO_USABLE_METRICS = "no usable metrics"
INVALID_NUMERIC_INPUT = "invalid numeric input"
NON_POSITIVE_INPUT = "non-positive input"

# Plain ASCII decimal or exponent notation, after commas are stripped
NUMERIC_INPUT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

ERROR_MESSAGES = {
    NO_USABLE_METRICS: "Could not read Lighthouse JSON",
    INVALID_NUMERIC_INPUT: "Please enter valid numbers for all fields.",
    NON_POSITIVE_INPUT: "All values must be greater than zero.",
}


@dataclass(frozen=True)
class BusinessInputs:
    """Raw shop numbers as typed by the user (thousands separators allowed)."""

    monthly_sessions: str
    avg_order_value: str
    conversion_rate: str  # percent, "2.5" for 2.5%


@dataclass(frozen=True)
class CalculationError:
    reason: str  # one of NO_USABLE_METRICS / INVALID_NUMERIC_INPUT / NON_POSITIVE_INPUT
    message: str

    ok = False

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "reason": self.reason, "message": self.message}


@dataclass(frozen=True)
class CalculationResult:
    headline: str
    baseline_revenue: float
    speed_loss_deloitte: float
    speed_loss_linear: float  # informational comparison figure, uncapped
    accessibility_loss: float
    speed_gaps: Dict[str, float] = field(default_factory=dict)
    total_gap_seconds: float = 0.0
    vertical: str = "default"
    lift_per_100ms: float = DELOITTE_BASE_IMPACT

    ok = True

    @property
    def total_loss(self) -> float:
        return self.speed_loss_deloitte + self.accessibility_loss

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["ok"] = True
        data["total_loss"] = self.total_loss
        return data


CalculationOutcome = Union[CalculationResult, CalculationError]


def _error(reason: str) -> CalculationError:
    return CalculationError(reason=reason, message=ERROR_MESSAGES[reason])


def _parse_numeric_input(raw: Any) -> float:
    # "1,800,000" -> 1800000.0, "" -> 0.0, unparseable or non-finite -> nan
    text = str(raw if raw is not None else "").replace(",", "").strip()
    if not text:
        return 0.0
    if not NUMERIC_INPUT_RE.fullmatch(text):
        return math.nan
    value = float(text)
    return value if math.isfinite(value) else math.nan


def _gap(value: Optional[float], target: float) -> float:
    if value is None:
        return 0.0
    return max(0.0, value - target)


def speed_gaps(metrics: PerformanceMetrics) -> Dict[str, float]:
    """Per-metric distance over target, in seconds (CLS counted as-is)."""
    return {
        "lcp": _gap(metrics.lcp_seconds, TARGET_LCP_SECONDS),
        "cls": _gap(metrics.cls, TARGET_CLS),
        "inp": _gap(metrics.inp_seconds, TARGET_INP_SECONDS),
        "tbt": _gap(metrics.tbt_millis, TARGET_TBT_MS) / 1000,
    }


def _compound_impact(total_gap_seconds: float, lift: float) -> float:
    steps = total_gap_seconds * 10  # 100ms steps
    try:
        raw = math.pow(1 + lift, steps) - 1
    except OverflowError:
        raw = math.inf
    return min(raw, MAX_REALISTIC_IMPACT)


def calculate_speed_impact(
    total_gap_seconds: float,
    baseline_revenue: float,
    lift: float = DELOITTE_BASE_IMPACT,
) -> tuple[float, float]:
    """Returns (compounding loss capped at 50%, linear loss)."""
    if total_gap_seconds <= 0:
        return 0.0, 0.0
    speed_loss = baseline_revenue * _compound_impact(total_gap_seconds, lift)
    speed_sec_loss = baseline_revenue * SIMPLE_SPEED_IMPACT * total_gap_seconds
    return speed_loss, speed_sec_loss


def calculate_accessibility_impact(accessibility: Optional[int], baseline_revenue: float) -> float:
    """Full 2% impact at a 30+ point gap below 90, linear below that."""
    if accessibility is None:
        return 0.0
    score_gap = max(0, A11Y_TARGET_SCORE - accessibility)
    ratio = min(1.0, score_gap / A11Y_MAX_GAP_RANGE)
    if ratio <= 0:
        return 0.0
    return baseline_revenue * A11Y_REVENUE_IMPACT_RATE * ratio


def _fixed(x: float, places: int) -> str:
    """Fixed-point text with exact halves rounded up (3.25 -> "3.3", 220.5 -> "221")."""
    if not math.isfinite(x):
        return f"{x:.{places}f}"
    with localcontext() as ctx:
        ctx.prec = 400
        quantum = Decimal(1).scaleb(-places)
        return str(Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP))


def generate_headline(metrics: PerformanceMetrics) -> str:
    vitals = []
    if metrics.lcp_seconds is not None:
        vitals.append(f"LCP {_fixed(metrics.lcp_seconds, 1)}s")
    if metrics.cls is not None:
        vitals.append(f"CLS {_fixed(metrics.cls, 3)}")
    if metrics.inp_seconds is not None:
        vitals.append(f"INP {_fixed(metrics.inp_seconds * 1000, 0)}ms")
    if metrics.tbt_millis is not None:
        vitals.append(f"TBT {_fixed(metrics.tbt_millis, 0)}ms")

    scores = []
    if metrics.perf_score is not None:
        scores.append(f"Performance {metrics.perf_score}/100")
    if metrics.accessibility_score is not None:
        scores.append(f"Accessibility {metrics.accessibility_score}/100")

    parts = [" · ".join(group) for group in (vitals, scores) if group]
    return " | ".join(parts)


def resolve_vertical(vertical: Optional[str]) -> str:
    key = (vertical or "").lower().strip()
    return key if key in VERTICAL_BENCHMARKS else "default"


def calculate_business_impact(
    metrics: PerformanceMetrics,
    monthly_sessions: str,
    avg_order_value: str,
    conversion_rate: str,
    vertical: str = "default",
) -> CalculationOutcome:
    """
    Turns Lighthouse metrics and three shop numbers into a monthly revenue-loss estimate.

    Returns a CalculationResult, or a CalculationError when no usable metric is
    present or a business input is non-numeric / not positive.
    """
    if (
        metrics.perf_score is None
        and metrics.accessibility_score is None
        and metrics.lcp_seconds is None
    ):
        return _error(NO_USABLE_METRICS)

    sessions = _parse_numeric_input(monthly_sessions)
    avg_order = _parse_numeric_input(avg_order_value)
    conversion = _parse_numeric_input(conversion_rate)

    if any(math.isnan(v) for v in (sessions, avg_order, conversion)):
        return _error(INVALID_NUMERIC_INPUT)
    if sessions <= 0 or avg_order <= 0 or conversion <= 0:
        return _error(NON_POSITIVE_INPUT)

    baseline_revenue = sessions * (conversion / 100) * avg_order

    vertical = resolve_vertical(vertical)
    lift = VERTICAL_BENCHMARKS[vertical]
    gaps = speed_gaps(metrics)
    total_gap = sum(gaps.values())
    speed_loss, speed_sec_loss = calculate_speed_impact(total_gap, baseline_revenue, lift)

    a11y_loss = calculate_accessibility_impact(metrics.accessibility_score, baseline_revenue)

    return CalculationResult(
        headline=generate_headline(metrics),
        baseline_revenue=baseline_revenue,
        speed_loss_deloitte=speed_loss,
        speed_loss_linear=speed_sec_loss,
        accessibility_loss=a11y_loss,
        speed_gaps=gaps,
        total_gap_seconds=total_gap,
        vertical=vertical,
        lift_per_100ms=lift,
    )


def calculate_from_inputs(
    metrics: PerformanceMetrics,
    inputs: BusinessInputs,
    vertical: str = "default",
) -> CalculationOutcome:
    return calculate_business_impact(
        metrics,
        inputs.monthly_sessions,
        inputs.avg_order_value,
        inputs.conversion_rate,
        vertical=vertical,
    )
