"""Exceptions raised by phpdoc-exporter."""


class PhpDocExporterError(Exception):
    """Base exception for phpdoc-exporter."""

    pass


class MalformedDocBlockError(PhpDocExporterError):
    """Raised when doc-comment text violates the tag grammar.

    Callers keep the raw comment text and treat the element as having no
    structured documentation.
    """

    def __init__(self, reason: str, line: int | None = None) -> None:
        message = reason if line is None else f"{reason} (comment line {line})"
        super().__init__(message)
        self.reason = reason
        self.line = line


class InputFormatError(PhpDocExporterError):
    """Raised when element records from the source parser cannot be loaded."""

    pass
