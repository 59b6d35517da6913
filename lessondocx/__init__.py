"""Markdown lesson text to formatted Word documents."""

from .block_segmenter import BlockSegmenter, classify_line
from .config import DocumentSettings
from .docx_builder import DocumentSerializationError, DocxBuilder
from .formula_extractor import FormulaExtractor
from .inline_formatter import InlineFormatter
from .models import (
    Attachment,
    BoldSpan,
    FormulaSpan,
    Fraction,
    LessonMetadata,
    MathText,
    PlainSpan,
    TableBlock,
    TextBlock,
)
from .pipeline import MarkdownToDocxPipeline, default_filename, generate_docx
from .progress import ProgressCallback
from .text_normalizer import TextNormalizer, auto_fix
from .themes import THEMES, Theme, get_theme

__version__ = "0.1.0"
