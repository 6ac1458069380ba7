"""Input records handed over by the PHP source parser.

One record per file:

    {"file": "src/Widget.php",
     "elements": [{"kind": "class", "name": "Widget", "namespace": "App",
                   "startLine": 5, "endLine": 40, "rawComment": "/** ... */"}]}

Elements arrive in declaration pre-order: an enclosing class comes before its
methods, which come before the class's next sibling.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from .exceptions import InputFormatError
from .models import ElementKind


class ElementRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: ElementKind
    name: str = Field(min_length=1)
    namespace: str | None = None
    start_line: int = Field(alias="startLine", ge=1)
    end_line: int = Field(alias="endLine", ge=1)
    raw_comment: str | None = Field(default=None, alias="rawComment")

    @model_validator(mode="after")
    def _check_line_range(self) -> ElementRecord:
        if self.end_line < self.start_line:
            raise ValueError(
                f"endLine {self.end_line} is before startLine {self.start_line}"
            )
        return self


class FileRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str = Field(min_length=1)
    elements: list[ElementRecord] = Field(default_factory=list)


_RECORDS = TypeAdapter(list[FileRecord])


def parse_records(text: str) -> list[FileRecord]:
    """Parse a JSON array of file records.

    Raises:
        InputFormatError: If the text is not valid JSON or a record is invalid.
    """
    try:
        return _RECORDS.validate_json(text)
    except ValidationError as e:
        raise InputFormatError(f"Invalid element records: {e}") from e


def load_records(path: Path) -> list[FileRecord]:
    """Load file records from a JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputFormatError(f"Cannot read {path}: {e}") from e
    return parse_records(text)

