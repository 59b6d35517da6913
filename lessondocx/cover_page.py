# lessondocx/cover_page.py
"""Formal header page and signature footer of an exported lesson plan."""

from typing import Optional

from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK, WD_TAB_ALIGNMENT
from docx.shared import Pt, Twips

from .config import (
    PLACEHOLDER_DEPARTMENT,
    PLACEHOLDER_INSTITUTION,
    PLACEHOLDER_LONG,
    PLACEHOLDER_SHORT,
)
from .models import LessonMetadata
from .oxml import EDGES, Border, set_paragraph_border, set_table_width_pct

NATIONAL_NAME = "CỘNG HÒA XÃ HỘI CHỦ NGHĨA VIỆT NAM"
NATIONAL_MOTTO = "Độc lập - Tự do - Hạnh phúc"
PLAN_TITLE = "KẾ HOẠCH BÀI DẠY"
SUBJECT_LABEL = "MÔN"
LESSON_LABEL = "BÀI"
YEAR_LABEL = "Năm học"

INFO_LABELS = ("Giáo viên", "Lớp", "Tuần", "Ngày dạy")
INFO_INDENT = 3000
INFO_BORDER = Border(size=6, color="808080", space=4)

APPROVER_TITLE = "DUYỆT CỦA TỔ CHUYÊN MÔN"
PREPARER_TITLE = "NGƯỜI SOẠN"
DATE_LINE = "Ngày ..... tháng ..... năm ......"
SIGN_HINT = "(Ký, ghi rõ họ tên)"
SIGNATURE_SPACE_LINES = 3


def _add_line(
    document,
    text: str = "",
    *,
    size: Optional[float] = None,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
    align=WD_ALIGN_PARAGRAPH.LEFT,
    space_after: int = 200,
):
    paragraph = document.add_paragraph()
    paragraph.alignment = align
    paragraph.paragraph_format.space_after = Twips(space_after)
    if text:
        run = paragraph.add_run(text)
        run.bold = bold
        run.italic = italic
        run.underline = underline
        if size is not None:
            run.font.size = Pt(size)
    return paragraph


def _add_header_row(document, left: str, right: str, tab_position: int, space_after: int, underline_right: bool = False):
    paragraph = document.add_paragraph()
    paragraph.paragraph_format.tab_stops.add_tab_stop(Twips(tab_position), WD_TAB_ALIGNMENT.RIGHT)
    paragraph.paragraph_format.space_after = Twips(space_after)
    paragraph.add_run(left).bold = True
    paragraph.add_run("\t")
    motto = paragraph.add_run(right)
    motto.bold = True
    motto.underline = underline_right
    return paragraph


def add_cover_page(document, metadata: LessonMetadata, year: int) -> None:
    """
    Append the cover page, ending with a page break

    Args:
        document: python-docx Document
        metadata: lesson header; empty fields get dotted placeholders
        year: first year of the academic year line
    """
    institution = metadata.institution_name.strip().upper() or PLACEHOLDER_INSTITUTION

    _add_header_row(document, PLACEHOLDER_DEPARTMENT, NATIONAL_NAME, 9000, 100)
    _add_header_row(document, institution, NATIONAL_MOTTO, 9500, 3000, underline_right=True)

    _add_line(document, PLAN_TITLE, size=20, bold=True, align=WD_ALIGN_PARAGRAPH.CENTER, space_after=400)
    _add_line(document, f"{SUBJECT_LABEL}: {metadata.subject.upper()}", size=16, bold=True,
              align=WD_ALIGN_PARAGRAPH.CENTER, space_after=200)
    _add_line(document, f"{LESSON_LABEL}: {metadata.lesson_title}", size=15, bold=True,
              align=WD_ALIGN_PARAGRAPH.CENTER, space_after=1000)

    values = (
        metadata.author_name or PLACEHOLDER_LONG,
        metadata.class_label or PLACEHOLDER_SHORT,
        metadata.week_label or PLACEHOLDER_SHORT,
        metadata.date or PLACEHOLDER_SHORT,
    )
    # identical borders on consecutive paragraphs render as one box
    for label, value in zip(INFO_LABELS, values):
        paragraph = document.add_paragraph()
        paragraph.add_run(f"{label}: ")
        paragraph.add_run(value).bold = True
        set_paragraph_border(paragraph, {edge: INFO_BORDER for edge in EDGES})
        fmt = paragraph.paragraph_format
        fmt.left_indent = Twips(INFO_INDENT)
        fmt.space_after = Twips(200)

    year_line = _add_line(document, f"{YEAR_LABEL}: {year} - {year + 1}", italic=True,
                          align=WD_ALIGN_PARAGRAPH.CENTER, space_after=0)
    year_line.paragraph_format.space_before = Twips(400)

    page_break = document.add_paragraph()
    page_break.paragraph_format.space_before = Twips(2000)
    page_break.add_run().add_break(WD_BREAK.PAGE)


def _fill_signature_cell(cell, title: str, signer: str) -> None:
    center = WD_ALIGN_PARAGRAPH.CENTER
    lines = [
        (DATE_LINE, {"italic": True}),
        (title, {"bold": True}),
        (SIGN_HINT, {"italic": True}),
    ]
    lines.extend(("", {}) for _ in range(SIGNATURE_SPACE_LINES))
    lines.append((signer, {"bold": True}))

    for index, (text, style) in enumerate(lines):
        paragraph = cell.paragraphs[0] if index == 0 else cell.add_paragraph()
        paragraph.alignment = center
        paragraph.paragraph_format.space_after = Twips(0)
        if text:
            run = paragraph.add_run(text)
            run.bold = style.get("bold", False)
            run.italic = style.get("italic", False)


def add_signature_footer(document, metadata: LessonMetadata):
    """Approval and preparer signature blocks side by side; the author signs on the right."""
    _add_line(document, space_after=200)
    table = document.add_table(rows=1, cols=2)
    table.alignment = WD_TABLE_ALIGNMENT.CENTER
    set_table_width_pct(table, 5000)
    approver, preparer = table.rows[0].cells
    _fill_signature_cell(approver, APPROVER_TITLE, PLACEHOLDER_LONG)
    _fill_signature_cell(preparer, PREPARER_TITLE, metadata.author_name.strip() or PLACEHOLDER_LONG)
    return table
