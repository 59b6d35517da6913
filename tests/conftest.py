"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lessondocx.block_segmenter import BlockSegmenter
from lessondocx.docx_builder import DocxBuilder
from lessondocx.formula_extractor import FormulaExtractor
from lessondocx.inline_formatter import InlineFormatter
from lessondocx.models import LessonMetadata
from lessondocx.progress import ProgressCallback
from lessondocx.text_normalizer import TextNormalizer
from tests.helpers.docx_inspector import DocxSnapshot


# ============================================================================
# Parsing Fixtures
# ============================================================================


@pytest.fixture
def segmenter():
    return BlockSegmenter()


@pytest.fixture
def formatter():
    return InlineFormatter()


@pytest.fixture
def extractor():
    return FormulaExtractor()


@pytest.fixture
def normalizer():
    return TextNormalizer()


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def builder():
    """Classic-theme builder with a fixed academic year."""
    return DocxBuilder(year=2024)


@pytest.fixture
def snapshot_of():
    """Serialize a builder and parse its word/document.xml."""
    def _snapshot(source):
        data = source.to_bytes() if hasattr(source, "to_bytes") else source
        return DocxSnapshot.from_bytes(data)
    return _snapshot


@pytest.fixture
def metadata():
    """Complete lesson header."""
    return LessonMetadata(
        institution_name="THCS Lê Lợi",
        author_name="Nguyễn Văn An",
        date="07/10/2024",
        subject="Toán",
        class_label="7A",
        week_label="5",
        lesson_title="Phép cộng phân số",
    )


@pytest.fixture
def metadata_without_school():
    return LessonMetadata(author_name="Trần Thị Bình", subject="Ngữ văn")


class RecordingProgress(ProgressCallback):
    def __init__(self):
        self.events = []

    def on_start(self, total_blocks):
        self.events.append(("start", total_blocks))

    def on_block_processed(self, block_number):
        self.events.append(("block", block_number))

    def on_finish(self, filename):
        self.events.append(("finish", filename))

    def update(self, message):
        self.events.append(("update", message))


@pytest.fixture
def progress():
    return RecordingProgress()
