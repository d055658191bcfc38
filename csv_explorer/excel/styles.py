"""
Single source of truth for export workbook colors, fonts, fills, borders, alignments.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
INDIGO = "4F46E5"
DARK_INDIGO = "312E81"
LIGHT_INDIGO = "EEF2FF"
SLATE_50 = "F8FAFC"
SLATE_300 = "CBD5E1"
SLATE_500 = "64748B"
WHITE = "FFFFFF"
BLACK = "000000"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=DARK_INDIGO)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=SLATE_500)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=INDIGO)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
KPI_VALUE_FONT = Font(name="Calibri", size=24, bold=True, color=DARK_INDIGO)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=SLATE_500)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=INDIGO, end_color=INDIGO, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=SLATE_50, end_color=SLATE_50, fill_type="solid")
KPI_FILL = PatternFill(start_color=LIGHT_INDIGO, end_color=LIGHT_INDIGO, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color=SLATE_300),
    right=Side(style="thin", color=SLATE_300),
    top=Side(style="thin", color=SLATE_300),
    bottom=Side(style="thin", color=SLATE_300),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=DARK_INDIGO),
    right=Side(style="thin", color=DARK_INDIGO),
    top=Side(style="thin", color=DARK_INDIGO),
    bottom=Side(style="medium", color=DARK_INDIGO),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
