# lessondocx/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple, Union


class LineKind(Enum):
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


@dataclass(frozen=True)
class Line:
    kind: LineKind
    text: str              # marker already stripped
    level: int = 0         # 1-3 for headings


@dataclass(frozen=True)
class TextBlock:
    lines: Tuple[str, ...]


@dataclass(frozen=True)
class TableBlock:
    header: Tuple[str, ...]
    body: Tuple[Tuple[str, ...], ...] = ()
    raw_rows: Tuple[str, ...] = ()

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return (self.header,) + self.body


Block = Union[TextBlock, TableBlock]


@dataclass(frozen=True)
class PlainSpan:
    text: str


@dataclass(frozen=True)
class BoldSpan:
    text: str


@dataclass(frozen=True)
class FormulaSpan:
    content: str           # expression without delimiters
    raw_latex: str         # verbatim source, delimiters included
    display: bool = False  # True for $$...$$


Span = Union[PlainSpan, BoldSpan, FormulaSpan]


@dataclass(frozen=True)
class CellLine:
    kind: LineKind         # BLOCKQUOTE, LIST_ITEM or PARAGRAPH
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class Fraction:
    numerator: str
    denominator: str


@dataclass(frozen=True)
class MathText:
    text: str


MathNode = Union[Fraction, MathText]


@dataclass
class Attachment:
    base64: str
    mime_type: str
    file_name: str


# camelCase keys used by the generation form
_METADATA_ALIASES = {
    "schoolName": "institution_name",
    "teacherName": "author_name",
    "date": "date",
    "subject": "subject",
    "grade": "class_label",
    "week": "week_label",
    "lessonName": "lesson_title",
    "duration": "duration_label",
    "lessonType": "lesson_type_label",
    "teachingMethod": "method_label",
    "topicContext": "context_note",
    "attachments": "attachments",
}


@dataclass
class LessonMetadata:
    """Lesson header record.

    Only institution_name, author_name, date, subject, class_label,
    week_label and lesson_title reach the document; the remaining fields
    belong to the upstream generation request.
    """

    institution_name: str = ""
    author_name: str = ""
    date: str = ""
    subject: str = ""
    class_label: str = ""
    week_label: str = ""
    lesson_title: str = ""
    duration_label: str = ""
    lesson_type_label: str = ""
    method_label: str = ""
    context_note: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    @property
    def has_cover_page(self) -> bool:
        return bool(self.institution_name and self.institution_name.strip())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LessonMetadata":
        """
        Build metadata from a plain dict

        Args:
            data: snake_case field names or the form's camelCase names

        Returns:
            LessonMetadata; unknown keys are ignored, None becomes ""
        """
        known = {f for f in cls.__dataclass_fields__}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _METADATA_ALIASES.get(key, key)
            if name not in known:
                continue
            if name == "attachments":
                kwargs[name] = [
                    item if isinstance(item, Attachment) else Attachment(
                        base64=item.get("base64", ""),
                        mime_type=item.get("mimeType", item.get("mime_type", "")),
                        file_name=item.get("fileName", item.get("file_name", "")),
                    )
                    for item in (value or [])
                ]
            else:
                kwargs[name] = "" if value is None else str(value)
        return cls(**kwargs)
