import json

import pytest

SAMPLE_REPORT = {
    "categories": {
        "performance": {"score": 0.68},
        "accessibility": {"score": 0.85},
        "seo": {"score": 0.92},
        "best-practices": {"score": 0.93},
    },
    "audits": {
        "largest-contentful-paint": {"numericValue": 3200},
        "cumulative-layout-shift": {"numericValue": 0.12},
        "interaction-to-next-paint": {"numericValue": 180},
        "total-blocking-time": {"numericValue": 220},
    },
}


@pytest.fixture
def sample_report() -> dict:
    return json.loads(json.dumps(SAMPLE_REPORT))


@pytest.fixture
def sample_report_text() -> str:
    return json.dumps(SAMPLE_REPORT)
