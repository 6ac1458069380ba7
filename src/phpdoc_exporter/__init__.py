"""phpdoc-exporter - validate PHPDoc comments and export them as Markdown."""

from phpdoc_exporter.config import VERSION, ExportConfig
from phpdoc_exporter.exceptions import (
    InputFormatError,
    MalformedDocBlockError,
    PhpDocExporterError,
)
from phpdoc_exporter.extractors import extract_file, extract_summary, parse_doc_comment
from phpdoc_exporter.generators import render
from phpdoc_exporter.models import (
    DocBlock,
    Element,
    ElementKind,
    FileDocs,
    Level,
    LevelCounts,
    Location,
    RenderResult,
    Tag,
    ValidationWarning,
)
from phpdoc_exporter.pipeline import export, extract_files, should_fail
from phpdoc_exporter.schemas import ElementRecord, FileRecord, load_records, parse_records
from phpdoc_exporter.validators import count_levels, validate

__version__ = VERSION

__all__ = [
    # Parsing
    "parse_doc_comment",
    "extract_summary",
    "extract_file",
    "extract_files",
    # Validation
    "validate",
    "count_levels",
    # Rendering
    "render",
    "export",
    "should_fail",
    # Input records
    "ElementRecord",
    "FileRecord",
    "load_records",
    "parse_records",
    # Models
    "DocBlock",
    "Element",
    "ElementKind",
    "FileDocs",
    "Level",
    "LevelCounts",
    "Location",
    "RenderResult",
    "Tag",
    "ValidationWarning",
    "ExportConfig",
    # Exceptions
    "PhpDocExporterError",
    "MalformedDocBlockError",
    "InputFormatError",
]
