"""Shared python-docx building blocks for the generated legal documents."""
from __future__ import annotations

from io import BytesIO
from typing import Optional, Sequence

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

FONT = "Calibri"
CONTENT_WIDTH_INCHES = 6.5
DRAFT_NOTICE = "CONFIDENTIAL - DRAFT"

PRIMARY = RGBColor(0x1B, 0x3A, 0x5C)
TEXT_GRAY = RGBColor(0x4A, 0x55, 0x68)
BLACK = RGBColor(0x1A, 0x1A, 0x1A)
WHITE = RGBColor(0xFF, 0xFF, 0xFF)
HEADER_FILL = "1B3A5C"
ALT_ROW_FILL = "F0F4F8"

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _shade(cell, fill: str) -> None:
    """Solid background fill for a table cell."""
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    cell._tc.get_or_add_tcPr().append(shd)


def _add_page_number(paragraph) -> None:
    fld = OxmlElement("w:fldSimple")
    fld.set(qn("w:instr"), "PAGE")
    run = OxmlElement("w:r")
    text = OxmlElement("w:t")
    text.text = "1"
    run.append(text)
    fld.append(run)
    paragraph._p.append(fld)


def _style_run(run, size: float = 10, bold: bool = False, italic: bool = False,
               color: Optional[RGBColor] = None) -> None:
    run.font.name = FONT
    run.font.size = Pt(size)
    run.bold = bold
    run.italic = italic
    run.font.color.rgb = color or BLACK


def new_legal_document(header_text: str) -> Document:
    """Blank document with 1" margins, Calibri body, running header and draft footer."""
    doc = Document()

    normal = doc.styles["Normal"]
    normal.font.name = FONT
    normal.font.size = Pt(10)

    section = doc.sections[0]
    for side in ("top_margin", "bottom_margin", "left_margin", "right_margin"):
        setattr(section, side, Inches(1))

    header = section.header.paragraphs[0]
    header.alignment = WD_ALIGN_PARAGRAPH.RIGHT
    _style_run(header.add_run(header_text), size=8, italic=True, color=TEXT_GRAY)

    footer = section.footer.paragraphs[0]
    footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _style_run(footer.add_run("Page "), size=8, color=TEXT_GRAY)
    _add_page_number(footer)
    notice = section.footer.add_paragraph()
    notice.alignment = WD_ALIGN_PARAGRAPH.CENTER
    _style_run(notice.add_run(DRAFT_NOTICE), size=7, italic=True, color=TEXT_GRAY)

    return doc


def document_title(doc, text: str):
    title = doc.add_heading(text.upper(), level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    for run in title.runs:
        run.font.color.rgb = PRIMARY
    return title


def section_heading(doc, text: str):
    h = doc.add_heading(text, level=2)
    for run in h.runs:
        run.font.color.rgb = PRIMARY
    return h


def body_text(doc, text: str, bold: bool = False, italic: bool = False,
              color: Optional[RGBColor] = None, indent: Optional[float] = None):
    p = doc.add_paragraph()
    if indent:
        p.paragraph_format.left_indent = Inches(indent)
    _style_run(p.add_run(text), bold=bold, italic=italic, color=color)
    return p


def bullet(doc, text: str, bold_prefix: Optional[str] = None):
    p = doc.add_paragraph(style="List Bullet")
    if bold_prefix:
        _style_run(p.add_run(bold_prefix), bold=True)
        _style_run(p.add_run(f"  {text}"))
    else:
        _style_run(p.add_run(text))
    return p


def spacer(doc):
    return doc.add_paragraph("")


def create_table(
    doc,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    column_widths: Optional[Sequence[float]] = None,
    alternate_rows: bool = True,
):
    """Grid table with a shaded header row.

    ``column_widths`` are percentages of the content width.
    """
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = "Table Grid"

    for i, text in enumerate(headers):
        cell = table.rows[0].cells[i]
        cell.text = ""
        _style_run(cell.paragraphs[0].add_run(text), size=9, bold=True, color=WHITE)
        _shade(cell, HEADER_FILL)

    for row_idx, values in enumerate(rows):
        cells = table.add_row().cells
        for i, text in enumerate(values):
            cells[i].text = ""
            _style_run(cells[i].paragraphs[0].add_run(text), size=9)
            if alternate_rows and row_idx % 2 == 1:
                _shade(cells[i], ALT_ROW_FILL)

    if column_widths:
        for row in table.rows:
            for i, pct in enumerate(column_widths):
                row.cells[i].width = Inches(CONTENT_WIDTH_INCHES * pct / 100.0)

    return table


def key_terms_table(doc, terms: Sequence[tuple[str, str]]):
    """Two-column Term | Value summary."""
    return create_table(doc, ["Term", "Value"], [list(t) for t in terms], column_widths=[40, 60])


def signature_block(doc, party_name: str, title: Optional[str] = None) -> None:
    spacer(doc)
    body_text(doc, "________________________________________", color=TEXT_GRAY)
    body_text(doc, party_name, bold=True)
    if title:
        body_text(doc, title, color=TEXT_GRAY)
    body_text(doc, "Date: ___________________", color=TEXT_GRAY)


def document_to_bytes(doc) -> bytes:
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()
