# lessondocx/oxml.py
"""Raw WordprocessingML / Office Math pieces python-docx has no API for."""

from dataclasses import dataclass
from typing import Dict

from docx.oxml import OxmlElement
from docx.oxml.ns import qn

from .models import Fraction, MathNode

# w:pPr children that may follow w:pBdr, in schema order
_PPR_AFTER_SHD = (
    "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap", "w:overflowPunct",
    "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN", "w:bidi", "w:adjustRightInd",
    "w:snapToGrid", "w:spacing", "w:ind", "w:contextualSpacing", "w:mirrorIndents",
    "w:suppressOverlap", "w:jc", "w:textDirection", "w:textAlignment",
    "w:textboxTightWrap", "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr",
    "w:sectPr", "w:pPrChange",
)
_PPR_AFTER_PBDR = ("w:shd",) + _PPR_AFTER_SHD

# w:tcPr children that may follow w:tcBorders, in schema order
_TCPR_AFTER_MAR = (
    "w:textDirection", "w:tcFitText", "w:vAlign", "w:hideMark", "w:headers",
    "w:cellIns", "w:cellDel", "w:cellMerge", "w:tcPrChange",
)
_TCPR_AFTER_SHD = ("w:noWrap", "w:tcMar") + _TCPR_AFTER_MAR
_TCPR_AFTER_BORDERS = ("w:shd",) + _TCPR_AFTER_SHD

# w:tblPr children that may follow w:tblW
_TBLPR_AFTER_TBLW = (
    "w:jc", "w:tblCellSpacing", "w:tblInd", "w:tblBorders", "w:shd", "w:tblLayout",
    "w:tblCellMar", "w:tblLook", "w:tblCaption", "w:tblDescription", "w:tblPrChange",
)

EDGES = ("top", "left", "bottom", "right")


@dataclass(frozen=True)
class Border:
    size: int              # eighths of a point
    color: str
    space: int = 0


def _border_set(tag: str, edges: Dict[str, Border]):
    container = OxmlElement(tag)
    for edge in EDGES:
        border = edges.get(edge)
        if border is None:
            continue
        element = OxmlElement(f"w:{edge}")
        element.set(qn("w:val"), "single")
        element.set(qn("w:sz"), str(border.size))
        element.set(qn("w:space"), str(border.space))
        element.set(qn("w:color"), border.color)
        container.append(element)
    return container


def _shading(fill: str):
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    return shd


def set_paragraph_border(paragraph, edges: Dict[str, Border]) -> None:
    p_pr = paragraph._p.get_or_add_pPr()
    p_pr.insert_element_before(_border_set("w:pBdr", edges), *_PPR_AFTER_PBDR)


def set_paragraph_shading(paragraph, fill: str) -> None:
    p_pr = paragraph._p.get_or_add_pPr()
    p_pr.insert_element_before(_shading(fill), *_PPR_AFTER_SHD)


def set_cell_borders(cell, edges: Dict[str, Border]) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    tc_pr.insert_element_before(_border_set("w:tcBorders", edges), *_TCPR_AFTER_BORDERS)


def set_cell_shading(cell, fill: str) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    tc_pr.insert_element_before(_shading(fill), *_TCPR_AFTER_SHD)


def set_cell_margins(cell, margin: int) -> None:
    tc_pr = cell._tc.get_or_add_tcPr()
    tc_mar = OxmlElement("w:tcMar")
    for edge in EDGES:
        element = OxmlElement(f"w:{edge}")
        element.set(qn("w:w"), str(margin))
        element.set(qn("w:type"), "dxa")
        tc_mar.append(element)
    tc_pr.insert_element_before(tc_mar, *_TCPR_AFTER_MAR)


def set_cell_auto_width(cell) -> None:
    tc_w = cell._tc.get_or_add_tcPr().get_or_add_tcW()
    tc_w.set(qn("w:type"), "auto")
    tc_w.set(qn("w:w"), "0")


def set_table_width_pct(table, fiftieths: int) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.insert_element_before(tbl_w, *_TBLPR_AFTER_TBLW)
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), str(fiftieths))


def ensure_rfonts(style, font_family: str) -> None:
    r_pr = style.element.get_or_add_rPr()
    r_fonts = r_pr.find(qn("w:rFonts"))
    if r_fonts is None:
        r_fonts = OxmlElement("w:rFonts")
        r_pr.insert(0, r_fonts)
    for attr in ("w:ascii", "w:hAnsi", "w:eastAsia", "w:cs"):
        r_fonts.set(qn(attr), font_family)


def _math_run(text: str):
    run = OxmlElement("m:r")
    text_el = OxmlElement("m:t")
    text_el.set(qn("xml:space"), "preserve")
    text_el.text = text
    run.append(text_el)
    return run


def math_element(node: MathNode):
    """Office Math for a fraction or a plain math run."""
    o_math = OxmlElement("m:oMath")
    if isinstance(node, Fraction):
        fraction = OxmlElement("m:f")
        for tag, value in (("m:num", node.numerator), ("m:den", node.denominator)):
            part = OxmlElement(tag)
            part.append(_math_run(value))
            fraction.append(part)
        o_math.append(fraction)
    else:
        o_math.append(_math_run(node.text))
    return o_math
