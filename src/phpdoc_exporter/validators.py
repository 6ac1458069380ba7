"""Doc-comment validation against the PHPDoc standard.

Rule identifiers refer to clauses of the standards document and are stable:
new rules get new identifiers, existing ones are never renumbered.

    1.1  required documentation, summary and class-level tags
    1.3  summary line format
    2.3  property @var tags
    3.1  callable @return tags
    4.2  deprecation notices reference a replacement

Every function here is pure: each call builds and returns its own list.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import (
    DocBlock,
    Element,
    ElementKind,
    FileDocs,
    Level,
    LevelCounts,
    Location,
    ValidationWarning,
)

SUMMARY_MAX_LENGTH = 80


def validate(
    doc: DocBlock | None,
    kind: ElementKind,
    name: str,
    location: Location,
) -> list[ValidationWarning]:
    """Validate one element's doc-comment.

    Checks:
    1. Missing doc is a MUST violation and stops further checks
    2. Kind-specific checks for class-likes, callables and properties
    3. General checks for every documented element, after the kind checks

    Args:
        doc: Parsed doc-comment, or None if absent or malformed
        kind: Element kind
        name: Element name
        location: Element position, rendered as "file:line" in warnings

    Returns:
        Warnings in check order
    """
    where = location.ref

    if doc is None:
        return [
            ValidationWarning(
                Level.MUST,
                "1.1",
                where,
                f"Element '{name}' ({kind.value}) lacks documentation",
            )
        ]

    warnings: list[ValidationWarning] = []
    if kind.is_class_like:
        warnings.extend(_check_class_like(doc, kind, name, where))
    elif kind.is_callable:
        warnings.extend(_check_callable(doc, kind, name, where))
    elif kind is ElementKind.PROPERTY:
        warnings.extend(_check_property(doc, name, where))

    warnings.extend(_check_general(doc, kind, name, where))
    return warnings


def _check_class_like(
    doc: DocBlock, kind: ElementKind, name: str, where: str
) -> list[ValidationWarning]:
    warnings = []

    if not doc.summary:
        warnings.append(
            ValidationWarning(
                Level.MUST,
                "1.1",
                where,
                f"{kind.label} '{name}' lacks short description",
            )
        )
    else:
        warnings.extend(_check_summary(doc.summary, kind, name, where))

    if not doc.has_tag("@package"):
        warnings.append(
            ValidationWarning(
                Level.SHOULD, "1.1", where, f"{kind.label} '{name}' missing @package tag"
            )
        )

    if not doc.has_tag("@since"):
        warnings.append(
            ValidationWarning(
                Level.SHOULD, "1.1", where, f"{kind.label} '{name}' missing @since tag"
            )
        )

    if not doc.has_tag("@api") and not doc.has_tag("@internal"):
        warnings.append(
            ValidationWarning(
                Level.SHOULD,
                "1.1",
                where,
                f"{kind.label} '{name}' should have @api or @internal marker",
            )
        )

    return warnings


def _check_callable(
    doc: DocBlock, kind: ElementKind, name: str, where: str
) -> list[ValidationWarning]:
    warnings = []

    if not doc.summary:
        warnings.append(
            ValidationWarning(
                Level.MUST,
                "1.1",
                where,
                f"{kind.label} '{name}' lacks short description",
            )
        )

    # Void callables too: return types are not resolved here
    if not doc.has_tag("@return"):
        warnings.append(
            ValidationWarning(
                Level.SHOULD, "3.1", where, f"{kind.label} '{name}' missing @return tag"
            )
        )

    return warnings


def _check_property(doc: DocBlock, name: str, where: str) -> list[ValidationWarning]:
    if doc.has_tag("@var"):
        return []
    return [
        ValidationWarning(
            Level.SHOULD, "2.3", where, f"Property '{name}' missing @var tag"
        )
    ]


def _check_general(
    doc: DocBlock, kind: ElementKind, name: str, where: str
) -> list[ValidationWarning]:
    deprecated = doc.get_tag("@deprecated")
    if deprecated is None:
        return []
    # "Use Foo::bar() instead" counts as a replacement, so "use " ignores case
    if "@see" in deprecated.value or "use " in deprecated.value.lower():
        return []
    return [
        ValidationWarning(
            Level.SHOULD,
            "4.2",
            where,
            f"Deprecated {kind.value} '{name}' should reference replacement",
        )
    ]


def _check_summary(
    summary: str, kind: ElementKind, name: str, where: str
) -> list[ValidationWarning]:
    """Check summary length, punctuation and that it does not restate the name."""
    warnings = []

    if len(summary) > SUMMARY_MAX_LENGTH:
        warnings.append(
            ValidationWarning(
                Level.SHOULD,
                "1.3",
                where,
                f"Summary for {kind.value} '{name}' exceeds "
                f"{SUMMARY_MAX_LENGTH} characters",
            )
        )

    if not summary.endswith("."):
        warnings.append(
            ValidationWarning(
                Level.SHOULD,
                "1.3",
                where,
                f"Summary for {kind.value} '{name}' should end with period",
            )
        )

    # Both conditions are kept; either one flags the summary
    lower_name = name.lower()
    lower_summary = summary.lower()
    if f"{lower_name} " in lower_summary or lower_summary.startswith(lower_name):
        warnings.append(
            ValidationWarning(
                Level.SHOULD,
                "1.3",
                where,
                f"Summary for {kind.value} '{name}' should not restate element name",
            )
        )

    return warnings


def validate_element(element: Element) -> list[ValidationWarning]:
    return validate(element.doc, element.kind, element.name, element.location)


def validate_file(file_docs: FileDocs) -> list[ValidationWarning]:
    """Validate every element of a file, in element order."""
    warnings: list[ValidationWarning] = []
    for element in file_docs.elements:
        warnings.extend(validate_element(element))
    return warnings


def count_levels(warnings: Iterable[ValidationWarning]) -> LevelCounts:
    """Count warnings per level.

    Returns:
        LevelCounts with MUST, SHOULD and MAY totals
    """
    must = should = may = 0
    for w in warnings:
        if w.level is Level.MUST:
            must += 1
        elif w.level is Level.SHOULD:
            should += 1
        else:
            may += 1
    return LevelCounts(must=must, should=should, may=may)
