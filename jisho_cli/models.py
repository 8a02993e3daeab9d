"""Data containers produced by the search-results parser.

``ResultItem`` and ``SupplementalInfo`` are closed unions. Each class carries a
``type`` discriminant so callers can dispatch on it without isinstance checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class Tag:
    """A bare label: part-of-speech header or usage tag on a sense."""

    type: ClassVar[str] = "tag"

    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True, slots=True)
class SeeAlso:
    """Cross-reference to another entry."""

    type: ClassVar[str] = "see-also"

    text: str
    href: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text, "href": self.href}


SupplementalInfo = Union[Tag, SeeAlso]


@dataclass(frozen=True, slots=True)
class Meaning:
    """One sense of an entry."""

    type: ClassVar[str] = "meaning"

    text: str
    number: Optional[str] = None
    supplemental_info: Tuple[SupplementalInfo, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "number": self.number,
            "text": self.text,
            "supplemental_info": [info.to_dict() for info in self.supplemental_info],
        }


ResultItem = Union[Meaning, Tag]


@dataclass(frozen=True, slots=True)
class Entry:
    """A single dictionary entry from a search-results page."""

    text: str
    reading: str
    items: Tuple[ResultItem, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "reading": self.reading,
            "items": [item.to_dict() for item in self.items],
        }


class UnitKind(Enum):
    KANJI = "kanji"
    KANA = "kana"


@dataclass(frozen=True, slots=True)
class TextUnit:
    """One visual slot of a headword."""

    text: str
    kind: UnitKind
