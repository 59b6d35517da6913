# lessondocx/themes.py
"""Colour themes for the generated document.

Colours are hex RGB strings as Word expects them (no leading "#").
"classic" is the plain Word look used by the converter; the others follow the
colour themes of the on-screen lesson view.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .config import DEFAULT_THEME


@dataclass(frozen=True)
class Theme:
    name: str
    heading1_color: str
    heading2_color: str
    heading3_color: Optional[str]
    quote_accent_color: str
    quote_frame_color: str
    quote_fill: str
    cell_quote_accent_color: str
    cell_quote_fill: str
    table_header_fill: Optional[str] = None


THEMES: Mapping[str, Theme] = MappingProxyType({
    "classic": Theme(
        name="classic",
        heading1_color="2E75B5",
        heading2_color="1F4E79",
        heading3_color="000000",
        quote_accent_color="2E75B5",
        quote_frame_color="CCCCCC",
        quote_fill="F8F9FA",
        cell_quote_accent_color="2E75B5",
        cell_quote_fill="F0F8FF",
    ),
    "indigo": Theme(
        name="indigo",
        heading1_color="312E81",
        heading2_color="3730A3",
        heading3_color="1E293B",
        quote_accent_color="6366F1",
        quote_frame_color="C7D2FE",
        quote_fill="EEF2FF",
        cell_quote_accent_color="6366F1",
        cell_quote_fill="EEF2FF",
        table_header_fill="EEF2FF",
    ),
    "emerald": Theme(
        name="emerald",
        heading1_color="064E3B",
        heading2_color="065F46",
        heading3_color="1E293B",
        quote_accent_color="10B981",
        quote_frame_color="A7F3D0",
        quote_fill="ECFDF5",
        cell_quote_accent_color="10B981",
        cell_quote_fill="ECFDF5",
        table_header_fill="ECFDF5",
    ),
    "rose": Theme(
        name="rose",
        heading1_color="881337",
        heading2_color="9F1239",
        heading3_color="1E293B",
        quote_accent_color="F43F5E",
        quote_frame_color="FECDD3",
        quote_fill="FFF1F2",
        cell_quote_accent_color="F43F5E",
        cell_quote_fill="FFF1F2",
        table_header_fill="FFF1F2",
    ),
    "amber": Theme(
        name="amber",
        heading1_color="78350F",
        heading2_color="92400E",
        heading3_color="1E293B",
        quote_accent_color="F59E0B",
        quote_frame_color="FDE68A",
        quote_fill="FFFBEB",
        cell_quote_accent_color="F59E0B",
        cell_quote_fill="FFFBEB",
        table_header_fill="FFFBEB",
    ),
    "slate": Theme(
        name="slate",
        heading1_color="0F172A",
        heading2_color="1E293B",
        heading3_color="1E293B",
        quote_accent_color="475569",
        quote_frame_color="CBD5E1",
        quote_fill="F1F5F9",
        cell_quote_accent_color="475569",
        cell_quote_fill="F1F5F9",
        table_header_fill="F1F5F9",
    ),
})


def get_theme(key: Optional[str] = None) -> Theme:
    key = key or DEFAULT_THEME
    try:
        return THEMES[key]
    except KeyError:
        raise KeyError(f"Unknown theme {key!r}; expected one of: {', '.join(THEMES)}") from None
