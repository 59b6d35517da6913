# lessondocx/pipeline.py
import logging
from pathlib import Path
from typing import Optional, Union

from .block_segmenter import BlockSegmenter
from .config import CONVERTER_FILENAME, DEFAULT_THEME, DocumentSettings, LESSON_PLAN_FILENAME
from .docx_builder import DocxBuilder
from .models import LessonMetadata
from .progress import ProgressCallback
from .themes import Theme, get_theme

logger = logging.getLogger(__name__)


def default_filename(metadata: Optional[LessonMetadata] = None) -> str:
    """Plain conversions and lesson-plan exports download under different names."""
    return LESSON_PLAN_FILENAME if metadata is not None else CONVERTER_FILENAME


class MarkdownToDocxPipeline:
    def __init__(
        self,
        text: str,
        metadata: Optional[LessonMetadata] = None,
        theme: Union[Theme, str, None] = None,
        settings: Optional[DocumentSettings] = None,
        progress_callback: Optional[ProgressCallback] = None,
        year: Optional[int] = None,
    ):
        """
        Markdown text to Word document

        Args:
            text: lesson markdown
            metadata: lesson header; enables the cover page (when it names an
                      institution) and the signature footer
            theme: Theme or theme key
            settings: page geometry and base font
            progress_callback: optional progress reporting
            year: academic-year start for the cover page
        """
        self._text = text or ""
        self._metadata = metadata
        self._theme = theme if isinstance(theme, Theme) else get_theme(theme)
        self._settings = settings
        self._year = year
        self._segmenter = BlockSegmenter()
        self._progress = progress_callback

    @property
    def filename(self) -> str:
        return default_filename(self._metadata)

    def _assemble(self) -> DocxBuilder:
        blocks = self._segmenter.segment(self._text)
        logger.info("Assembling %d blocks (metadata=%s)", len(blocks), self._metadata is not None)

        if self._progress:
            self._progress.on_start(len(blocks))

        builder = DocxBuilder(theme=self._theme, settings=self._settings, year=self._year)
        has_cover = False
        if self._metadata is not None:
            has_cover = builder.add_cover_page(self._metadata)
            if self._progress and has_cover:
                self._progress.update("Cover page added")

        for index, block in enumerate(blocks, start=1):
            builder.add_block(block, suppress_title=has_cover)
            if self._progress:
                self._progress.on_block_processed(index)

        if self._metadata is not None:
            builder.add_signature_footer(self._metadata)

        return builder

    def run(self) -> bytes:
        data = self._assemble().to_bytes()
        logger.info("Generated %s (%d bytes)", self.filename, len(data))
        if self._progress:
            self._progress.on_finish(self.filename)
        return data

    def save(self, output_path: Optional[Path] = None) -> Path:
        output_path = Path(output_path) if output_path else Path(self.filename)
        self._assemble().save(output_path)
        logger.info("Wrote %s", output_path)
        if self._progress:
            self._progress.on_finish(str(output_path))
        return output_path


def generate_docx(
    text: str,
    metadata: Optional[LessonMetadata] = None,
    theme: Union[Theme, str, None] = DEFAULT_THEME,
) -> bytes:
    return MarkdownToDocxPipeline(text, metadata=metadata, theme=theme).run()
