# lessondocx/config.py
"""Shared configuration for lesson-plan document generation.

All lengths are in twips (1 cm = 567 twips) unless the name says otherwise.
"""

from dataclasses import dataclass

# A4 portrait
PAGE_WIDTH = 11906
PAGE_HEIGHT = 16838

MARGIN_TOP = 1134     # 2cm
MARGIN_BOTTOM = 1134  # 2cm
MARGIN_LEFT = 1701    # 3cm
MARGIN_RIGHT = 851    # 1.5cm

FONT_FAMILY = "Times New Roman"
FONT_SIZE_PT = 14
LINE_SPACING = 1.15

DEFAULT_THEME = "classic"

# Download names per calling context
CONVERTER_FILENAME = "Tai_lieu_chuyen_doi.docx"
LESSON_PLAN_FILENAME = "Giao_an_GDPT2018.docx"

# Placeholder glyphs for empty cover-page fields
PLACEHOLDER_LONG = "........................................"
PLACEHOLDER_SHORT = "...................."
PLACEHOLDER_INSTITUTION = "TRƯỜNG................"
PLACEHOLDER_DEPARTMENT = "PHÒNG GD&ĐT ...................."


@dataclass(frozen=True)
class DocumentSettings:
    page_width: int = PAGE_WIDTH
    page_height: int = PAGE_HEIGHT
    margin_top: int = MARGIN_TOP
    margin_bottom: int = MARGIN_BOTTOM
    margin_left: int = MARGIN_LEFT
    margin_right: int = MARGIN_RIGHT
    font_family: str = FONT_FAMILY
    font_size_pt: float = FONT_SIZE_PT
    line_spacing: float = LINE_SPACING

    def __post_init__(self):
        for name in ("page_width", "page_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("margin_top", "margin_bottom", "margin_left", "margin_right"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.margin_left + self.margin_right >= self.page_width:
            raise ValueError("horizontal margins leave no room for content")
        if self.font_size_pt <= 0:
            raise ValueError(f"font_size_pt must be positive, got {self.font_size_pt}")
