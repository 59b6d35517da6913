# lessondocx/docx_builder.py
import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.table import WD_ALIGN_VERTICAL
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor, Twips
from docx.table import _Cell

from . import cover_page
from .block_segmenter import classify_line
from .config import DocumentSettings
from .formula_extractor import FormulaExtractor
from .inline_formatter import InlineFormatter
from .models import (
    BoldSpan,
    CellLine,
    FormulaSpan,
    LessonMetadata,
    LineKind,
    PlainSpan,
    Span,
    TableBlock,
    TextBlock,
)
from .oxml import (
    EDGES,
    Border,
    ensure_rfonts,
    math_element,
    set_cell_auto_width,
    set_cell_borders,
    set_cell_margins,
    set_cell_shading,
    set_paragraph_border,
    set_paragraph_shading,
    set_table_width_pct,
)
from .themes import Theme, get_theme

logger = logging.getLogger(__name__)

HEADING_SIZES_PT = {1: 16, 2: 14, 3: 14}
LIST_MARKER = "- "
CELL_MARGIN = 100
TABLE_WIDTH_PCT = 5000  # fiftieths of a percent


class DocumentSerializationError(RuntimeError):
    """The document tree could not be written out."""


class DocxBuilder:
    def __init__(
        self,
        theme: Union[Theme, str, None] = None,
        settings: Optional[DocumentSettings] = None,
        year: Optional[int] = None,
    ):
        """
        Document assembler

        Args:
            theme: Theme or theme key; defaults to the classic Word colours
            settings: page geometry and base font
            year: academic-year start for the cover page; current year if omitted
        """
        self._theme = theme if isinstance(theme, Theme) else get_theme(theme)
        self._settings = settings or DocumentSettings()
        self._year = year if year is not None else datetime.now().year
        self._formatter = InlineFormatter()
        self._formulas = FormulaExtractor()
        self._document = Document()
        self._setup_document()

    @property
    def document(self):
        return self._document

    @property
    def theme(self) -> Theme:
        return self._theme

    def _setup_document(self) -> None:
        settings = self._settings
        section = self._document.sections[0]
        section.orientation = WD_ORIENT.PORTRAIT
        section.page_width = Twips(settings.page_width)
        section.page_height = Twips(settings.page_height)
        section.top_margin = Twips(settings.margin_top)
        section.bottom_margin = Twips(settings.margin_bottom)
        section.left_margin = Twips(settings.margin_left)
        section.right_margin = Twips(settings.margin_right)

        normal = self._document.styles["Normal"]
        normal.font.name = settings.font_family
        normal.font.size = Pt(settings.font_size_pt)
        ensure_rfonts(normal, settings.font_family)
        normal.paragraph_format.line_spacing = settings.line_spacing

    # ── cover page / footer ──────────────────────────────────────────────

    def add_cover_page(self, metadata: LessonMetadata) -> bool:
        """Prepend the formal header page; returns False when there is no institution name."""
        if not metadata.has_cover_page:
            return False
        cover_page.add_cover_page(self._document, metadata, self._year)
        return True

    def add_signature_footer(self, metadata: LessonMetadata) -> None:
        cover_page.add_signature_footer(self._document, metadata)

    # ── body ─────────────────────────────────────────────────────────────

    def add_block(self, block, suppress_title: bool = False) -> None:
        if isinstance(block, TableBlock):
            self.add_table(block)
        else:
            self.add_text_block(block, suppress_title=suppress_title)

    def add_text_block(self, block: TextBlock, suppress_title: bool = False) -> None:
        """
        Render a run of non-table lines

        Args:
            block: text region from the segmenter
            suppress_title: drop level-1 headings (the cover page already carries the title)
        """
        for raw_line in block.lines:
            line = classify_line(raw_line)

            if line.kind is LineKind.BLANK:
                self._document.add_paragraph("")
            elif line.kind is LineKind.HEADING:
                if line.level == 1 and suppress_title:
                    logger.debug("Suppressed title heading %r under cover page", line.text)
                    continue
                self._add_heading(line.text, line.level)
            elif line.kind is LineKind.BLOCKQUOTE:
                self._add_blockquote(line.text)
            elif line.kind is LineKind.LIST_ITEM:
                self._add_list_item(line.text)
            else:
                paragraph = self._document.add_paragraph()
                self._add_runs(paragraph, self._formatter.format(line.text))
                paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
                paragraph.paragraph_format.space_after = Twips(200)

    def _add_heading(self, text: str, level: int) -> None:
        theme = self._theme
        paragraph = self._document.add_paragraph(style=f"Heading {level}")
        run = paragraph.add_run(text)
        run.bold = True
        run.font.name = self._settings.font_family
        run.font.size = Pt(HEADING_SIZES_PT[level])
        color = {1: theme.heading1_color, 2: theme.heading2_color, 3: theme.heading3_color}[level]
        if color:
            run.font.color.rgb = RGBColor.from_string(color)

        fmt = paragraph.paragraph_format
        if level == 1:
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
            fmt.space_before, fmt.space_after = Twips(400), Twips(200)
        elif level == 2:
            fmt.space_before, fmt.space_after = Twips(300), Twips(150)
        else:
            fmt.space_before, fmt.space_after = Twips(200), Twips(100)

    def _add_blockquote(self, text: str) -> None:
        theme = self._theme
        paragraph = self._document.add_paragraph()
        self._add_runs(paragraph, self._formatter.format(text))
        frame = Border(size=6, color=theme.quote_frame_color, space=4)
        set_paragraph_border(paragraph, {
            "top": frame,
            "left": Border(size=18, color=theme.quote_accent_color, space=10),
            "bottom": frame,
            "right": frame,
        })
        set_paragraph_shading(paragraph, theme.quote_fill)
        paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        fmt = paragraph.paragraph_format
        fmt.space_before, fmt.space_after = Twips(200), Twips(200)
        fmt.left_indent, fmt.right_indent = Twips(720), Twips(720)

    def _add_list_item(self, text: str) -> None:
        paragraph = self._document.add_paragraph()
        paragraph.add_run(LIST_MARKER)
        self._add_runs(paragraph, self._formatter.format(text))
        fmt = paragraph.paragraph_format
        fmt.left_indent = Twips(720)
        fmt.first_line_indent = Twips(-360)
        fmt.space_after = Twips(100)

    def _add_runs(self, paragraph, spans: Iterable[Span]) -> None:
        spans = tuple(spans)
        # extract() keeps span order, so nodes line up with the formula spans below
        math_nodes = iter([node for _, node in self._formulas.extract(spans)])
        for span in spans:
            if isinstance(span, FormulaSpan):
                paragraph._p.append(math_element(next(math_nodes)))
            elif isinstance(span, BoldSpan):
                paragraph.add_run(span.text).bold = True
            elif isinstance(span, PlainSpan):
                paragraph.add_run(span.text)

    # ── tables ───────────────────────────────────────────────────────────

    def add_table(self, table_block: TableBlock):
        rows = table_block.rows
        column_count = max(len(row) for row in rows)
        if column_count == 0:
            logger.debug("Skipped table without cells")
            return None

        table = self._document.add_table(rows=len(rows), cols=column_count)
        table.autofit = True
        set_table_width_pct(table, TABLE_WIDTH_PCT)

        thin = Border(size=4, color="000000")
        edges = {edge: thin for edge in EDGES}
        for row_index, (row, values) in enumerate(zip(table.rows, rows)):
            tr = row._tr
            # ragged rows keep only the cells they have
            for surplus in tr.tc_lst[len(values):]:
                tr.remove(surplus)
            for tc, value in zip(tr.tc_lst, values):
                cell = _Cell(tc, table)
                set_cell_auto_width(cell)
                set_cell_borders(cell, edges)
                if row_index == 0 and self._theme.table_header_fill:
                    set_cell_shading(cell, self._theme.table_header_fill)
                set_cell_margins(cell, CELL_MARGIN)
                cell.vertical_alignment = WD_ALIGN_VERTICAL.CENTER
                self._fill_cell(cell, self._formatter.format_cell(value))
        return table

    def _fill_cell(self, cell: _Cell, lines: Sequence[CellLine]) -> None:
        theme = self._theme
        for index, line in enumerate(lines):
            paragraph = cell.paragraphs[0] if index == 0 else cell.add_paragraph()
            if line.kind is LineKind.LIST_ITEM:
                paragraph.add_run(LIST_MARKER)
            self._add_runs(paragraph, line.spans)

            fmt = paragraph.paragraph_format
            fmt.space_after = Twips(100)
            if line.kind is LineKind.BLOCKQUOTE:
                set_paragraph_border(paragraph, {
                    "left": Border(size=12, color=theme.cell_quote_accent_color, space=5),
                })
                set_paragraph_shading(paragraph, theme.cell_quote_fill)
                fmt.left_indent = Twips(300)
            elif line.kind is LineKind.LIST_ITEM:
                fmt.left_indent = Twips(360)
                fmt.first_line_indent = Twips(-360)

    # ── output ───────────────────────────────────────────────────────────

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        try:
            self._document.save(buffer)
        except Exception as exc:
            logger.exception("Failed to serialize document")
            raise DocumentSerializationError(f"Failed to serialize document: {exc}") from exc
        return buffer.getvalue()

    def save(self, output_path: Path) -> Path:
        output_path = Path(output_path)
        data = self.to_bytes()
        try:
            output_path.write_bytes(data)
        except OSError as exc:
            raise DocumentSerializationError(f"Cannot write {output_path}: {exc}") from exc
        return output_path
