from pathlib import Path

from pypdf import PdfReader

from impact_findings import build_impact_summary
from lighthouse import PerformanceMetrics, parse_lighthouse
from pdf_export import export_impact_pdf
from revenue_impact import calculate_business_impact


def _summary(metrics, currency="USD"):
    result = calculate_business_impact(metrics, "100000", "45", "2.5")
    return build_impact_summary(result, metrics, currency, "en_US")


def test_export_impact_pdf_writes_readable_report(tmp_path: Path, sample_report_text) -> None:
    out = export_impact_pdf(_summary(parse_lighthouse(sample_report_text)), str(tmp_path / "impact.pdf"))

    assert out.endswith("impact.pdf")
    reader = PdfReader(out)
    assert len(reader.pages) >= 1
    text = "\n".join(page.extract_text() or "" for page in reader.pages)
    assert "How much money is lost?" in text
    assert "Baseline monthly revenue" in text
    assert "$112,500.00" in text
    assert "$56,250.00" in text
    assert "Legal disclaimer" in text


def test_export_appends_pdf_extension(tmp_path: Path) -> None:
    summary = _summary(PerformanceMetrics(lcp_seconds=1.1), currency="EUR")
    out = export_impact_pdf(summary, str(tmp_path / "report"))
    assert out.endswith("report.pdf")
    assert Path(out).is_file()


def test_export_without_scores_or_headline(tmp_path: Path) -> None:
    summary = _summary(PerformanceMetrics(lcp_seconds=4.0))
    summary["headline"] = ""
    out = export_impact_pdf(summary, str(tmp_path / "plain.pdf"))
    assert Path(out).stat().st_size > 0
