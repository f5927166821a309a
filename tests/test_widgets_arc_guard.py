from pathlib import Path

import pytest
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table

from ui.widgets import ScoreGauge, create_card_table


@pytest.mark.parametrize("score", [0, 68, 100, None, "n/a", float("nan"), 250])
def test_score_gauge_draws_any_score(tmp_path: Path, score) -> None:
    pdf_path = tmp_path / "gauge.pdf"
    c = canvas.Canvas(str(pdf_path))
    gauge = ScoreGauge(score=score, label="Score", size=40)
    gauge.wrap(0, 0)
    gauge.canv = c
    gauge.draw()
    c.showPage()
    c.save()
    assert pdf_path.exists()
    assert pdf_path.stat().st_size > 0


def test_card_table_accepts_row_colors() -> None:
    table = create_card_table([["Finding", "Estimate"], ["Speed", "$1.00"]], row_colors={1: colors.red})
    assert isinstance(table, Table)
    assert table.wrap(400, 400)[1] > 0
