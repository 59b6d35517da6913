# lessondocx/block_segmenter.py
import logging
import re
from itertools import groupby
from typing import Iterable, Optional, Tuple

from .models import Block, Line, LineKind, TableBlock, TextBlock

logger = logging.getLogger(__name__)

_SEPARATOR_ROW = re.compile(r"^\|?[\s\-:|]+\|?$")
_QUOTE_MARKER = re.compile(r"^>\s*")
_LIST_MARKER = re.compile(r"^[-*]\s+")

_HEADING_PREFIXES = (("# ", 1), ("## ", 2), ("### ", 3))


def is_table_row(line: str) -> bool:
    """A row starts with a pipe and either ends with one or holds at least two."""
    trimmed = line.strip()
    if not trimmed.startswith("|"):
        return False
    return trimmed.endswith("|") or len(line.split("|")) > 2


def is_separator_row(row: str) -> bool:
    trimmed = row.strip()
    return bool(trimmed) and bool(_SEPARATOR_ROW.match(trimmed))


def split_row(row: str) -> Tuple[str, ...]:
    trimmed = row.strip()
    cells = trimmed.split("|")
    if trimmed.startswith("|"):
        cells = cells[1:]
    if trimmed.endswith("|") and cells:
        cells = cells[:-1]
    return tuple(cell.strip() for cell in cells)


def parse_table(rows: Iterable[str]) -> Optional[TableBlock]:
    """
    Turn raw table lines into a header/body table

    Args:
        rows: consecutive lines that passed is_table_row

    Returns:
        TableBlock, or None when only separator rows were present
    """
    raw_rows = tuple(rows)
    valid = [row for row in raw_rows if row.strip() and not is_separator_row(row)]
    if not valid:
        return None
    header, *body = [split_row(row) for row in valid]
    return TableBlock(header=header, body=tuple(body), raw_rows=raw_rows)


def classify_line(line: str) -> Line:
    trimmed = line.strip()
    if not trimmed:
        return Line(LineKind.BLANK, "")
    for prefix, level in _HEADING_PREFIXES:
        if trimmed.startswith(prefix):
            return Line(LineKind.HEADING, trimmed[len(prefix):].strip(), level)
    if trimmed.startswith("> "):
        return Line(LineKind.BLOCKQUOTE, _QUOTE_MARKER.sub("", trimmed, count=1))
    if trimmed.startswith("- ") or trimmed.startswith("* "):
        return Line(LineKind.LIST_ITEM, _LIST_MARKER.sub("", trimmed, count=1))
    return Line(LineKind.PARAGRAPH, trimmed)


class BlockSegmenter:
    """Splits raw text into text and table regions.

    Segmentation only tells "inside a table" from "not"; headings, quotes and
    list items are classified per line by classify_line when a TextBlock is
    rendered.
    """

    def segment(self, text: str) -> Tuple[Block, ...]:
        if not text or not text.strip():
            return ()

        lines = text.replace("\r\n", "\n").split("\n")
        blocks = []
        for in_table, group in groupby(lines, key=is_table_row):
            region = tuple(group)
            if not in_table:
                blocks.append(TextBlock(lines=region))
                continue
            table = parse_table(region)
            if table is None:
                logger.debug("Dropped table region of %d separator-only rows", len(region))
                continue
            blocks.append(table)

        logger.debug("Segmented %d lines into %d blocks", len(lines), len(blocks))
        return tuple(blocks)
