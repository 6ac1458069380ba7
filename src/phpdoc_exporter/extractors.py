"""Doc-comment parser and element extraction."""

from __future__ import annotations

import logging
import re

from .exceptions import MalformedDocBlockError
from .models import DocBlock, Element, FileDocs, Location, Tag
from .schemas import ElementRecord, FileRecord

log = logging.getLogger(__name__)

_OPEN = "/**"
_CLOSE = "*/"

# Leading continuation marker: optional indentation, one "*", one space
_DECORATION_RE = re.compile(r"^\s*\* ?")

# Tag line: "@name rest". Names allow namespaces and dashes
# (@ORM\Column, @phpstan-param, @psalm-suppress).
_TAG_RE = re.compile(r"^@([A-Za-z_\\][\w\\:-]*)(.*)$")

# "{@see Foo" with no closing brace before the end of the comment.
# Inline tags may wrap across lines.
_UNCLOSED_INLINE_RE = re.compile(r"\{@[^}]*\Z")


def _dedent_lines(lines: list[str]) -> str:
    """Join description lines, removing their common left margin."""
    margin = min(
        (len(line) - len(line.lstrip()) for line in lines if line.strip()), default=0
    )
    return "\n".join(line[margin:] for line in lines).strip()


def _strip_decoration(line: str) -> str:
    return _DECORATION_RE.sub("", line.rstrip(), count=1)


def _body_lines(raw: str) -> list[str]:
    """Remove the comment delimiters and per-line decoration."""
    text = raw.strip()
    if not text.startswith(_OPEN):
        raise MalformedDocBlockError("doc-comment must start with /**")
    if len(text) < len(_OPEN) + len(_CLOSE) or not text.endswith(_CLOSE):
        raise MalformedDocBlockError("doc-comment is not terminated with */")

    body = text[len(_OPEN) : -len(_CLOSE)]
    lines = [_strip_decoration(line) for line in body.splitlines()]

    for number, line in enumerate(lines, start=1):
        if _CLOSE in line:
            raise MalformedDocBlockError("comment closed before its end", number)

    joined = "\n".join(lines)
    unclosed = _UNCLOSED_INLINE_RE.search(joined)
    if unclosed:
        number = joined.count("\n", 0, unclosed.start()) + 1
        raise MalformedDocBlockError("unterminated inline tag", number)
    return lines


def parse_doc_comment(raw: str) -> DocBlock:
    """Parse raw doc-comment text into summary, description and tags.

    The summary is the first non-empty line before any tag. Lines between the
    summary and the first tag form the description. A tag starts on a line
    beginning with "@identifier" and owns every following line up to the next
    tag line, so free text after the first tag is part of a tag value.

    Args:
        raw: Comment text exactly as written, including /** and */.

    Returns:
        DocBlock with tags in order of appearance (duplicates kept).

    Raises:
        MalformedDocBlockError: If the text violates the tag grammar.
    """
    summary: str | None = None
    description: list[str] = []
    tags: list[Tag] = []
    tag_name: str | None = None
    tag_value: list[str] = []

    for number, line in enumerate(_body_lines(raw), start=1):
        stripped = line.strip()

        if stripped.startswith("@"):
            match = _TAG_RE.match(stripped)
            if not match:
                token = stripped.split()[0]
                raise MalformedDocBlockError(f"invalid tag {token!r}", number)
            if tag_name is not None:
                tags.append(Tag(tag_name, "\n".join(tag_value).strip()))
            tag_name = "@" + match.group(1)
            tag_value = [match.group(2).strip()]
            continue

        if tag_name is not None:
            tag_value.append(stripped)
        elif summary is None:
            candidate = stripped.strip(" \t*")
            if candidate:
                summary = candidate
        else:
            description.append(line)

    if tag_name is not None:
        tags.append(Tag(tag_name, "\n".join(tag_value).strip()))

    return DocBlock(
        summary=summary,
        description=_dedent_lines(description),
        tags=tuple(tags),
    )


def extract_summary(raw: str) -> str | None:
    """Return the summary line of a doc-comment, decoration stripped."""
    return parse_doc_comment(raw).summary


def extract_element(record: ElementRecord, path: str) -> Element:
    """Build an Element from a parser record, parsing its comment if any.

    A malformed comment keeps its raw text but gets no structured doc.
    """
    doc = None
    if record.raw_comment is not None:
        try:
            doc = parse_doc_comment(record.raw_comment)
        except MalformedDocBlockError as e:
            log.debug(
                "%s:%d: keeping raw doc-comment of %s %r: %s",
                path,
                record.start_line,
                record.kind.value,
                record.name,
                e,
            )

    return Element(
        kind=record.kind,
        name=record.name,
        namespace=record.namespace,
        location=Location(path, record.start_line, record.end_line),
        raw_comment=record.raw_comment,
        doc=doc,
    )


def extract_file(record: FileRecord) -> FileDocs:
    """Extract every element of one file, keeping declaration order."""
    elements = tuple(extract_element(e, record.file) for e in record.elements)
    log.debug("%s: extracted %d element(s)", record.file, len(elements))
    return FileDocs(path=record.file, elements=elements)
