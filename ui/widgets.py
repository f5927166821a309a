"""
widgets.py - Custom visual elements for the impact report.
"""

from reportlab.platypus import Flowable, Table, TableStyle
import math

from reportlab.lib import colors
from .theme import Theme

class ScoreGauge(Flowable):
    """
    Draws a circular 0-100 Lighthouse score gauge.
    """
    def __init__(self, score, label: str = "Score", size: int = 40):
        super().__init__()
        self.score = score
        self.label = label
        self.size = size
        self.width = size * 2
        self.height = size * 2

    def draw(self):
        score_value = 0.0
        try:
            score_value = float(self.score)
        except (TypeError, ValueError):
            score_value = 0.0

        if not math.isfinite(score_value):
            score_value = 0.0

        score_value = max(0.0, min(100.0, score_value))
        display_score = int(round(score_value))

        # Lighthouse bands: 0-49 poor, 50-89 needs improvement, 90+ good
        c = Theme.ERROR
        if score_value >= 50:
            c = Theme.WARNING
        if score_value >= 90:
            c = Theme.SUCCESS

        cx, cy = self.size, self.size
        r_outer = self.size
        r_inner = self.size * 0.85

        bg_color = colors.Color(c.red, c.green, c.blue, alpha=0.15)
        self.canv.setFillColor(bg_color)
        self.canv.circle(cx, cy, r_outer, stroke=0, fill=1)

        # Wedge from 12 o'clock, clockwise; skipped at 0 (zero-extent arc)
        angle = 3.6 * score_value
        if angle > 0.001:
            self.canv.setFillColor(c)
            self.canv.saveState()
            p = self.canv.beginPath()
            p.moveTo(cx, cy)
            p.arc(cx-r_outer, cy-r_outer, cx+r_outer, cy+r_outer, 90, -angle)
            p.lineTo(cx, cy)
            p.close()
            self.canv.drawPath(p, fill=1, stroke=0)
            self.canv.restoreState()

        self.canv.setFillColor(colors.white)
        self.canv.circle(cx, cy, r_inner, stroke=0, fill=1)

        self.canv.setFillColor(Theme.PRIMARY)
        self.canv.setFont(Theme.BOLD_FONT, self.size * 0.5)
        self.canv.drawCentredString(cx, cy - (self.size*0.1), str(display_score))

        self.canv.setFillColor(Theme.TEXT_LIGHT)
        self.canv.setFont(Theme.BODY_FONT, self.size * 0.2)
        self.canv.drawCentredString(cx, cy - (self.size*0.4), self.label)

def create_card_table(data, col_widths=None, row_colors=None):
    """
    Returns a Table formatted like a generic UI card.
    row_colors: optional {row_index: color} for a left accent bar per row.
    """
    t = Table(data, colWidths=col_widths)
    style = [
        ('BACKGROUND', (0,0), (-1,-1), colors.white),
        ('BACKGROUND', (0,0), (-1,0), Theme.BG_LIGHT),
        ('FONTNAME', (0,0), (-1,0), Theme.BOLD_FONT), # Header
        ('TEXTCOLOR', (0,0), (-1,0), Theme.PRIMARY),
        ('BOTTOMPADDING', (0,0), (-1,-1), 8),
        ('TOPPADDING', (0,0), (-1,-1), 8),
        ('GRID', (0,0), (-1,-1), 0.5, Theme.BORDER),
        ('ALIGN', (0,0), (-1,-1), 'LEFT'),
        ('VALIGN', (0,0), (-1,-1), 'TOP'),
    ]
    for row, color in (row_colors or {}).items():
        style.append(('LINEBEFORE', (0,row), (0,row), 3, color))
    t.setStyle(TableStyle(style))
    return t
