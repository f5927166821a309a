# pdf_export.py
import datetime as dt
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
    HRFlowable,
    ListFlowable,
    Flowable,
)

from ui.theme import Theme
from ui.widgets import ScoreGauge, create_card_table

REPORT_TITLE = "How much money is lost?"
REPORT_SUBTITLE = "Monthly revenue impact of web performance and accessibility"


def _p(text: Any, style) -> Paragraph:
    return Paragraph(escape(str(text or "")), style)


def _gauges(metrics: dict) -> list[Flowable]:
    gauges = []
    if metrics.get("perf_score") is not None:
        gauges.append(ScoreGauge(metrics["perf_score"], label="Performance", size=28))
    if metrics.get("accessibility_score") is not None:
        gauges.append(ScoreGauge(metrics["accessibility_score"], label="Accessibility", size=28))
    if not gauges:
        return []
    row = Table([gauges], colWidths=[70 * mm] * len(gauges), hAlign="LEFT")
    row.setStyle(TableStyle([
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    return [row, Spacer(1, 8)]


def export_impact_pdf(summary: dict, out_path: str) -> str:
    """Writes the one-page impact summary built by impact_findings.build_impact_summary."""
    body_font, _ = Theme.register_fonts()
    styles = Theme.get_stylesheet()

    if not out_path.lower().endswith(".pdf"):
        out_path += ".pdf"

    doc = SimpleDocTemplate(
        out_path,
        pagesize=A4,
        leftMargin=18 * mm,
        rightMargin=18 * mm,
        topMargin=16 * mm,
        bottomMargin=16 * mm,
        title=REPORT_TITLE,
        author="Revenue Impact Estimator",
    )

    findings = summary.get("findings", []) or []
    metrics = summary.get("metrics", {}) or {}
    headline = summary.get("headline") or "—"
    report_date = dt.date.today().strftime("%Y-%m-%d")

    story: list[Flowable] = []
    story.append(_p(REPORT_TITLE, styles["H1"]))
    story.append(_p(REPORT_SUBTITLE, styles["Small"]))
    story.append(HRFlowable(color=Theme.BORDER, thickness=0.6, width="100%"))
    story.append(Spacer(1, 8))
    story.append(_p(headline, styles["Headline"]))
    story.append(Spacer(1, 8))
    story.extend(_gauges(metrics))

    baseline = next((f for f in findings if f.get("id") == "IMPACT_BASELINE_REVENUE"), None)
    if baseline:
        story.append(_p(baseline["title"], styles["Label"]))
        story.append(_p(baseline["amount_display"], styles["Amount"]))
        story.append(Spacer(1, 6))

    story.append(_p("Estimated monthly impact", styles["H2"]))
    rows = [[
        _p("Finding", styles["Label"]),
        _p("Estimate", styles["Label"]),
        _p("What it means", styles["Label"]),
    ]]
    row_colors = {}
    for f in findings:
        if f.get("id") == "IMPACT_BASELINE_REVENUE":
            continue
        row_colors[len(rows)] = Theme.SEVERITY_COLORS.get(f.get("severity"), Theme.BORDER)
        rows.append([
            _p(f.get("title"), styles["Body"]),
            _p(f.get("amount_display"), styles["Body"]),
            _p(f.get("explanation"), styles["Small"]),
        ])
    story.append(create_card_table(rows, col_widths=[50 * mm, 32 * mm, 92 * mm], row_colors=row_colors))

    total_display = summary.get("total_loss_display")
    if total_display:
        story.append(Spacer(1, 6))
        story.append(_p(f"Total estimated monthly loss: {total_display}", styles["Headline"]))

    story.append(_p("Research basis", styles["H2"]))
    story.append(ListFlowable(
        [_p(note, styles["Small"]) for note in summary.get("methodology", [])],
        bulletType="bullet",
        leftIndent=10,
    ))
    for source in summary.get("sources", []):
        line = source.get("title", "")
        if source.get("url"):
            line = f"{line} - {source['url']}"
        story.append(_p(line, styles["Small"]))

    story.append(Spacer(1, 10))
    story.append(_p("Legal disclaimer", styles["Label"]))
    for para in summary.get("disclaimer", []):
        story.append(_p(para, styles["Small"]))

    def draw_header_footer(canvas, doc_obj):
        canvas.saveState()
        width, height = A4
        left = doc_obj.leftMargin
        right = width - doc_obj.rightMargin
        footer_y = 10 * mm

        canvas.setFont(body_font, 8)
        canvas.setFillColor(colors.HexColor("#6b7280"))
        canvas.drawString(left, height - 12 * mm, f"Revenue impact estimate • {report_date}")

        canvas.setStrokeColor(Theme.BORDER)
        canvas.setLineWidth(0.5)
        canvas.line(left, footer_y + 4 * mm, right, footer_y + 4 * mm)
        canvas.drawString(left, footer_y, "Estimates only, not guaranteed results.")
        canvas.drawRightString(right, footer_y, f"Page {canvas.getPageNumber()}")
        canvas.restoreState()

    doc.build(story, onFirstPage=draw_header_footer, onLaterPages=draw_header_footer)
    return out_path
