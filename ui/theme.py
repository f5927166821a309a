"""
theme.py - Design system for the revenue-impact PDF.
"""

import os

from reportlab.lib.colors import HexColor
from reportlab.lib.styles import StyleSheet1, ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

import config


class Theme:
    # Color Palette (Slate/Blue)
    PRIMARY = HexColor("#0f172a")    # Slate 900
    SECONDARY = HexColor("#334155")  # Slate 700
    ACCENT = HexColor("#2563eb")     # Blue 600

    TEXT_MAIN = HexColor("#1e293b")  # Slate 800
    TEXT_LIGHT = HexColor("#64748b") # Slate 500

    BG_LIGHT = HexColor("#f8fafc")   # Slate 50
    BORDER = HexColor("#e2e8f0")     # Slate 200

    SUCCESS = HexColor("#16a34a")
    WARNING = HexColor("#d97706")
    ERROR = HexColor("#dc2626")

    BODY_FONT = "Helvetica"
    BOLD_FONT = "Helvetica-Bold"

    SEVERITY_COLORS = {
        "critical": ERROR,
        "warning": WARNING,
        "ok": SUCCESS,
        "info": ACCENT,
    }

    @classmethod
    def register_fonts(cls) -> tuple[str, str]:
        """DejaVu from assets/fonts when shipped, built-in Helvetica otherwise."""
        body_path = os.path.join(config.FONTS_DIR, "DejaVuSans.ttf")
        bold_path = os.path.join(config.FONTS_DIR, "DejaVuSans-Bold.ttf")

        if os.path.exists(body_path) and os.path.exists(bold_path):
            pdfmetrics.registerFont(TTFont("DejaVuSans", body_path))
            pdfmetrics.registerFont(TTFont("DejaVuSans-Bold", bold_path))
            pdfmetrics.registerFontFamily(
                "DejaVuSans",
                normal="DejaVuSans",
                bold="DejaVuSans-Bold",
                italic="DejaVuSans",
                boldItalic="DejaVuSans-Bold",
            )
            cls.BODY_FONT = "DejaVuSans"
            cls.BOLD_FONT = "DejaVuSans-Bold"
        return cls.BODY_FONT, cls.BOLD_FONT

    @classmethod
    def get_stylesheet(cls):
        s = StyleSheet1()

        # Base Body
        s.add(ParagraphStyle(
            name='Body',
            fontName=cls.BODY_FONT,
            fontSize=10,
            leading=14,
            textColor=cls.TEXT_MAIN,
            spaceAfter=6
        ))

        # Report title
        s.add(ParagraphStyle(
            name='H1',
            parent=s['Body'],
            fontName=cls.BOLD_FONT,
            fontSize=18,
            leading=22,
            textColor=cls.PRIMARY,
            spaceAfter=8,
        ))

        # Section title
        s.add(ParagraphStyle(
            name='H2',
            parent=s['Body'],
            fontName=cls.BOLD_FONT,
            fontSize=12,
            leading=16,
            textColor=cls.SECONDARY,
            spaceBefore=12,
            spaceAfter=6
        ))

        # Headline (raw vitals summary)
        s.add(ParagraphStyle(
            name='Headline',
            parent=s['Body'],
            fontName=cls.BOLD_FONT,
            fontSize=11,
            leading=15,
            textColor=cls.SECONDARY,
        ))

        # Big money figure
        s.add(ParagraphStyle(
            name='Amount',
            parent=s['Body'],
            fontName=cls.BOLD_FONT,
            fontSize=20,
            leading=24,
            textColor=cls.SUCCESS,
        ))

        # Small Text
        s.add(ParagraphStyle(
            name='Small',
            parent=s['Body'],
            fontSize=8,
            leading=10,
            textColor=cls.TEXT_LIGHT
        ))

        # Badge/Label
        s.add(ParagraphStyle(
            name='Label',
            parent=s['Body'],
            fontName=cls.BOLD_FONT,
            fontSize=9,
            textColor=cls.ACCENT
        ))

        return s
