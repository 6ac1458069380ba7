"""Data models for doc-comment extraction, validation and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ElementKind(str, Enum):
    """Kind of documentable element, decided by the source parser."""

    FILE = "file"
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    METHOD = "method"
    FUNCTION = "function"
    PROPERTY = "property"

    @property
    def label(self) -> str:
        """Capitalized name used in headings and messages."""
        return self.value.title()

    @property
    def is_class_like(self) -> bool:
        return self in (ElementKind.CLASS, ElementKind.INTERFACE, ElementKind.TRAIT)

    @property
    def is_callable(self) -> bool:
        return self in (ElementKind.METHOD, ElementKind.FUNCTION)


class Level(str, Enum):
    """RFC 2119 severity of a validation warning."""

    MUST = "MUST"
    SHOULD = "SHOULD"
    MAY = "MAY"

    @property
    def rank(self) -> int:
        """Sort position, most severe first."""
        return _LEVEL_RANKS[self]


_LEVEL_RANKS = {Level.MUST: 0, Level.SHOULD: 1, Level.MAY: 2}


@dataclass(frozen=True)
class Location:
    """Source position of an element (1-based, inclusive)."""

    file: str
    start_line: int
    end_line: int

    @property
    def ref(self) -> str:
        """Display reference, e.g. "src/Widget.php:12"."""
        return f"{self.file}:{self.start_line}"


@dataclass(frozen=True)
class Tag:
    """One @name value annotation."""

    name: str  # Includes the leading "@"
    value: str = ""  # Raw text, type-unaware

    def matches(self, name: str) -> bool:
        # Prefix comparison: a lookup for "@param" also matches "@paramOverride"
        return self.name.startswith(name)


@dataclass(frozen=True)
class DocBlock:
    """Structured form of a doc-comment."""

    summary: str | None = None
    description: str = ""
    tags: tuple[Tag, ...] = ()

    def find_tags(self, name: str) -> list[Tag]:
        """All tags matching name, in order of appearance."""
        return [tag for tag in self.tags if tag.matches(name)]

    def get_tag(self, name: str) -> Tag | None:
        """First tag matching name, or None."""
        for tag in self.tags:
            if tag.matches(name):
                return tag
        return None

    def has_tag(self, name: str) -> bool:
        return self.get_tag(name) is not None


@dataclass(frozen=True)
class Element:
    """One documentable unit of source code."""

    kind: ElementKind
    name: str  # Comma-joined for multi-name property declarations
    location: Location
    namespace: str | None = None
    raw_comment: str | None = None
    doc: DocBlock | None = None  # None when absent or malformed

    def __post_init__(self) -> None:
        if self.doc is not None and self.raw_comment is None:
            raise ValueError(f"{self.name}: parsed doc without raw comment text")


@dataclass(frozen=True)
class ValidationWarning:
    """One validation finding."""

    level: Level
    rule: str  # Standards reference, e.g. "1.1"
    element: str  # "{file}:{line}"
    message: str


@dataclass(frozen=True)
class FileDocs:
    """Extracted elements of one source file, in declaration pre-order."""

    path: str
    elements: tuple[Element, ...] = ()


@dataclass(frozen=True)
class LevelCounts:
    """Warning totals per level, used for strict-mode decisions."""

    must: int = 0
    should: int = 0
    may: int = 0

    @property
    def total(self) -> int:
        return self.must + self.should + self.may


@dataclass(frozen=True)
class RenderResult:
    """Rendered report plus every warning in emission order."""

    document: str
    warnings: list[ValidationWarning] = field(default_factory=list)
    counts: LevelCounts = field(default_factory=LevelCounts)
