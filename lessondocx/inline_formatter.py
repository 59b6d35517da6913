# lessondocx/inline_formatter.py
import logging
import re
from typing import List, Tuple

from .models import BoldSpan, CellLine, FormulaSpan, LineKind, PlainSpan, Span

logger = logging.getLogger(__name__)

# display math is tried first at every "$$" so it is not read as two empty inline spans
_MATH_SPAN = re.compile(r"\$\$(.+?)\$\$|\$([^$]+?)\$", re.DOTALL)
_BOLD_SPAN = re.compile(r"\*\*(.*?)\*\*")
_SOFT_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_QUOTE_MARKER = re.compile(r"^>\s*")
_LIST_MARKER = re.compile(r"^[-*]\s+")


class InlineFormatter:
    """Splits a line into plain, bold and formula spans."""

    def format(self, text: str) -> Tuple[Span, ...]:
        """
        Parse one line or cell string

        Args:
            text: source text; "$" without a partner and unbalanced "**"
                  are kept as literal text

        Returns:
            ordered spans, delimiters consumed
        """
        if not text:
            return ()

        spans: List[Span] = []
        last_end = 0
        for match in _MATH_SPAN.finditer(text):
            spans.extend(self._format_bold(text[last_end:match.start()]))
            display = match.group(1) is not None
            content = match.group(1) if display else match.group(2)
            spans.append(FormulaSpan(content=content, raw_latex=match.group(0), display=display))
            last_end = match.end()
        spans.extend(self._format_bold(text[last_end:]))
        return tuple(spans)

    def _format_bold(self, segment: str) -> List[Span]:
        if not segment:
            return []
        spans: List[Span] = []
        for index, piece in enumerate(_BOLD_SPAN.split(segment)):
            if not piece:
                continue
            if index % 2 == 1:
                spans.append(BoldSpan(piece))
            else:
                spans.append(PlainSpan(piece))
        if segment.count("**") % 2 == 1:
            logger.debug("Unbalanced bold marker kept as text: %r", segment)
        return spans

    def format_cell(self, text: str) -> Tuple[CellLine, ...]:
        """Split a table cell on <br> tags and format each sub-line on its own."""
        lines = []
        for sub_line in _SOFT_BREAK.split(text.strip()):
            trimmed = sub_line.strip()
            kind = LineKind.PARAGRAPH
            if trimmed.startswith(">"):
                kind = LineKind.BLOCKQUOTE
                trimmed = _QUOTE_MARKER.sub("", trimmed, count=1)
            elif trimmed.startswith("- ") or trimmed.startswith("* "):
                kind = LineKind.LIST_ITEM
                trimmed = _LIST_MARKER.sub("", trimmed, count=1)
            lines.append(CellLine(kind=kind, spans=self.format(trimmed)))
        return tuple(lines)
