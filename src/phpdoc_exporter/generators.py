"""Markdown report generator."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .config import PROGRAM_NAME, VERSION
from .models import (
    DocBlock,
    Element,
    ElementKind,
    FileDocs,
    RenderResult,
    ValidationWarning,
)
from .validators import count_levels, validate_element

# "Type $name description", type optional, variadic and by-reference allowed
_PARAM_RE = re.compile(
    r"^(?:(?P<type>[^\s$&.]\S*)\s+)?(?P<var>&?(?:\.\.\.)?\$\w+)(?:\s+(?P<desc>.*))?$"
)

_NO_DETAILS = "*(no details)*"


def _one_line(value: str) -> str:
    return " ".join(value.split())


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def _format_text(value: str) -> str:
    return _one_line(value) or _NO_DETAILS


def _format_typed(value: str) -> str:
    """Render "Type rest" with the leading token as code."""
    text = _one_line(value)
    if not text:
        return _NO_DETAILS
    head, _, rest = text.partition(" ")
    return f"`{head}` {rest}".rstrip()


def _format_param(value: str) -> str:
    text = _one_line(value)
    match = _PARAM_RE.match(text)
    if not match:
        return _format_text(text)

    item = f"`{match['var']}`"
    if match["type"]:
        item += f" (`{match['type']}`)"
    if match["desc"]:
        item += f": {match['desc']}"
    return item


# Fixed category order; categories without tags are omitted
_TAG_CATEGORIES = (
    ("Parameters", "@param", _format_param),
    ("Returns", "@return", _format_typed),
    ("Throws", "@throws", _format_typed),
    ("See also", "@see", _format_typed),
    ("Deprecated", "@deprecated", _format_text),
)


def _fence_for(text: str) -> str:
    """Backtick fence longer than any backtick run inside text."""
    longest = max((len(run) for run in re.findall(r"`+", text)), default=0)
    return "`" * max(3, longest + 1)


def _heading_prefix(kind: ElementKind) -> str:
    if kind in (ElementKind.METHOD, ElementKind.PROPERTY):
        return "####"
    return "###"


def _rule_key(rule: str) -> tuple[tuple[int, int | str], ...]:
    """Sort key comparing dotted rule ids segment by segment ("2.3" < "10.1")."""
    return tuple(
        (0, int(part)) if part.isdigit() else (1, part) for part in rule.split(".")
    )


def sort_warnings(warnings: Sequence[ValidationWarning]) -> list[ValidationWarning]:
    """Order warnings by level, then rule id, then emission order."""
    return sorted(warnings, key=lambda w: (w.level.rank, _rule_key(w.rule)))


def _render_tags(doc: DocBlock) -> list[str]:
    lines: list[str] = []
    for title, tag_name, formatter in _TAG_CATEGORIES:
        tags = doc.find_tags(tag_name)
        if not tags:
            continue
        lines.append(f"**{title}:**")
        for tag in tags:
            lines.append(f"- {formatter(tag.value)}")
        lines.append("")
    return lines


def _render_element(element: Element) -> list[str]:
    lines = [
        f"{_heading_prefix(element.kind)} {element.kind.label} `{element.name}`",
        "",
    ]

    if element.namespace:
        lines.append(f"*Namespace: `{element.namespace}`*")
        lines.append("")

    # Raw text is shown even when structured parsing failed
    raw = (element.raw_comment or "").rstrip()
    fence = _fence_for(raw)
    lines.append(f"{fence}php")
    if raw:
        lines.append(raw)
    lines.append(fence)
    lines.append("")

    if element.doc is not None:
        lines.extend(_render_tags(element.doc))

    location = element.location
    lines.append(f"*Source: {location.file}:{location.start_line}-{location.end_line}*")
    lines.append("")
    lines.append("---")
    lines.append("")
    return lines


def _render_violations(warnings: list[ValidationWarning]) -> list[str]:
    lines = ["## Violations", ""]
    if not warnings:
        lines.append("*No violations found.*")
        lines.append("")
        return lines

    counts = count_levels(warnings)
    lines.extend(
        [
            f"{counts.must} MUST violation(s), {counts.should} SHOULD improvement(s), "
            f"{counts.may} MAY suggestion(s).",
            "",
            "| Level | Rule | Location | Message |",
            "|-------|------|----------|---------|",
        ]
    )
    for w in sort_warnings(warnings):
        lines.append(
            f"| {w.level.value} | {w.rule} | `{w.element}` | {_escape_cell(w.message)} |"
        )
    lines.append("")
    return lines


def render(files: Sequence[FileDocs], project_title: str) -> RenderResult:
    """Render the documentation report and collect validation warnings.

    Each element is validated exactly once, and its warnings are appended in
    file, element and check order. Files with no elements still get a heading.

    Args:
        files: Extracted files, in the order they should appear
        project_title: Report title

    Returns:
        RenderResult with the Markdown text and all warnings
    """
    element_count = sum(len(f.elements) for f in files)
    lines = [
        f"<!-- AUTO-GENERATED by {PROGRAM_NAME} {VERSION}. DO NOT EDIT. -->",
        "",
        f"# {project_title}",
        "",
        f"Generated by {PROGRAM_NAME} {VERSION} from {len(files)} file(s), "
        f"{element_count} element(s).",
        "",
    ]

    warnings: list[ValidationWarning] = []
    for file_docs in files:
        lines.append(f"## {file_docs.path}")
        lines.append("")
        if not file_docs.elements:
            lines.append("*No documentable elements.*")
            lines.append("")
            continue
        for element in file_docs.elements:
            warnings.extend(validate_element(element))
            lines.extend(_render_element(element))

    lines.extend(_render_violations(warnings))

    return RenderResult(
        document="\n".join(lines),
        warnings=warnings,
        counts=count_levels(warnings),
    )
