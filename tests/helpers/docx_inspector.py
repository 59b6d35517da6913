from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass
from typing import List, Optional

from lxml import etree

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
M_NS = "http://schemas.openxmlformats.org/officeDocument/2006/math"
NS = {"w": W_NS, "m": M_NS}


def w(name: str) -> str:
    return f"{{{W_NS}}}{name}"


def local_name(element) -> str:
    return etree.QName(element).localname


def paragraph_text(paragraph) -> str:
    """Visible text of a w:p, math runs included, tabs and breaks omitted."""
    return "".join(paragraph.xpath(".//w:t/text() | .//m:t/text()", namespaces=NS))


def border(element, edge: str) -> Optional[dict]:
    """Attributes of the w:pBdr / w:tcBorders edge under a w:p or w:tc, or None."""
    found = element.xpath(f"(w:pPr/w:pBdr | w:tcPr/w:tcBorders)/w:{edge}", namespaces=NS)
    if not found:
        return None
    return {etree.QName(key).localname: value for key, value in found[0].attrib.items()}


def attr(element, path: str, name: str = "val") -> Optional[str]:
    found = element.xpath(path, namespaces=NS)
    if not found:
        return None
    return found[0].get(w(name))


@dataclass
class DocxSnapshot:
    root: etree._Element

    @classmethod
    def from_bytes(cls, data: bytes) -> "DocxSnapshot":
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            xml = archive.read("word/document.xml")
        return cls(root=etree.fromstring(xml))

    @property
    def body(self):
        return self.root.find(w("body"))

    def body_children(self) -> List[str]:
        """Tag names of the body's content children, sectPr excluded."""
        return [local_name(child) for child in self.body if local_name(child) != "sectPr"]

    def paragraphs(self) -> list:
        return self.body.findall(w("p"))

    def texts(self) -> List[str]:
        return [paragraph_text(p) for p in self.paragraphs()]

    def all_text(self) -> str:
        return "\n".join(paragraph_text(p) for p in self.root.iter(w("p")))

    def tables(self) -> list:
        return self.body.findall(w("tbl"))

    def find_paragraph(self, text: str):
        for paragraph in self.root.iter(w("p")):
            if paragraph_text(paragraph) == text:
                return paragraph
        raise AssertionError(f"No paragraph with text {text!r}")

    def styled(self, style_id: str) -> list:
        return self.body.xpath(f"w:p[w:pPr/w:pStyle/@w:val='{style_id}']", namespaces=NS)

    def section(self):
        return self.body.find(w("sectPr"))
