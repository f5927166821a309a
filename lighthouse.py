"""
lighthouse.py - Lighthouse report parsing (category scores + Core Web Vitals).

Usage:
    metrics = parse_lighthouse(open("report.json").read())
    if metrics.is_empty():
        ...

Never raises: a report that cannot be read yields an empty PerformanceMetrics.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CATEGORY_KEYS = {
    "perf_score": "performance",
    "accessibility_score": "accessibility",
    "seo_score": "seo",
    "best_practices_score": "best-practices",
}

AUDIT_LCP = "largest-contentful-paint"
AUDIT_CLS = "cumulative-layout-shift"
AUDIT_INP = "interaction-to-next-paint"
AUDIT_TBT = "total-blocking-time"


@dataclass(frozen=True)
class PerformanceMetrics:
    """Normalized metrics. None means "not measured", never zero."""

    perf_score: Optional[int] = None
    accessibility_score: Optional[int] = None
    seo_score: Optional[int] = None
    best_practices_score: Optional[int] = None
    lcp_seconds: Optional[float] = None
    cls: Optional[float] = None  # unitless
    inp_seconds: Optional[float] = None
    tbt_millis: Optional[float] = None  # stays in ms

    def is_empty(self) -> bool:
        return all(v is None for v in asdict(self).values())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _number(value: Any) -> Optional[float]:
    # bool is an int subclass; JSON true/false is not a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        # integer literal beyond float range
        return None
    if not math.isfinite(value):
        return None
    return value


def _dig(doc: Any, *keys: str) -> Optional[float]:
    """Safe navigation: doc[k1][k2]... as a finite number, else None."""
    node = doc
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return _number(node)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _score(doc: Any, category: str) -> Optional[int]:
    raw = _dig(doc, "categories", category, "score")
    if raw is None or not math.isfinite(raw * 100):
        return None
    return _round_half_up(raw * 100)


def _ms_to_seconds(ms: Optional[float]) -> Optional[float]:
    return ms / 1000 if ms is not None else None


def parse_lighthouse(raw_text: Any) -> PerformanceMetrics:
    """
    Extracts category scores (0-100) and Core Web Vitals from a Lighthouse JSON report.

    Scores are rescaled from 0-1. LCP and INP are converted from ms to seconds,
    CLS is passed through, TBT stays in milliseconds.
    """
    try:
        data = json.loads(raw_text)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug(f"Lighthouse report not readable: {e}")
        return PerformanceMetrics()

    if not isinstance(data, dict):
        logger.debug(f"Lighthouse report is not an object: {type(data).__name__}")
        return PerformanceMetrics()

    # PageSpeed Insights API responses wrap the report
    envelope = data.get("lighthouseResult")
    if "categories" not in data and "audits" not in data and isinstance(envelope, dict):
        data = envelope

    scores = {field: _score(data, category) for field, category in CATEGORY_KEYS.items()}

    return PerformanceMetrics(
        **scores,
        lcp_seconds=_ms_to_seconds(_dig(data, "audits", AUDIT_LCP, "numericValue")),
        cls=_dig(data, "audits", AUDIT_CLS, "numericValue"),
        inp_seconds=_ms_to_seconds(_dig(data, "audits", AUDIT_INP, "numericValue")),
        tbt_millis=_dig(data, "audits", AUDIT_TBT, "numericValue"),
    )
