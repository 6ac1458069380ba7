"""Shared pytest fixtures for phpdoc-exporter tests."""

import json
from pathlib import Path

import pytest

from phpdoc_exporter.extractors import parse_doc_comment
from phpdoc_exporter.models import Element, ElementKind, Location


@pytest.fixture
def make_element():
    """Factory for elements; a raw comment is parsed unless doc is given."""

    def _make(
        kind=ElementKind.METHOD,
        name="run",
        raw_comment=None,
        file="src/Job.php",
        start_line=7,
        end_line=9,
        namespace=None,
    ):
        doc = None
        if raw_comment is not None:
            doc = parse_doc_comment(raw_comment)
        return Element(
            kind=kind,
            name=name,
            namespace=namespace,
            location=Location(file, start_line, end_line),
            raw_comment=raw_comment,
            doc=doc,
        )

    return _make


@pytest.fixture
def sample_records():
    """Records for one class with a documented and an undocumented method."""
    return [
        {
            "file": "src/Widget.php",
            "elements": [
                {
                    "kind": "class",
                    "name": "Widget",
                    "namespace": "App\\Ui",
                    "startLine": 10,
                    "endLine": 60,
                    "rawComment": (
                        "/**\n"
                        " * Renders a single UI component.\n"
                        " *\n"
                        " * @package App\\Ui\n"
                        " * @since 1.0.0\n"
                        " * @api\n"
                        " */"
                    ),
                },
                {
                    "kind": "method",
                    "name": "render",
                    "namespace": "App\\Ui",
                    "startLine": 20,
                    "endLine": 30,
                    "rawComment": (
                        "/**\n"
                        " * Produces the HTML markup.\n"
                        " *\n"
                        " * @param array $options Rendering options\n"
                        " * @return string\n"
                        " */"
                    ),
                },
                {
                    "kind": "method",
                    "name": "reset",
                    "namespace": "App\\Ui",
                    "startLine": 40,
                    "endLine": 44,
                },
            ],
        },
        {"file": "src/empty.php", "elements": []},
    ]


@pytest.fixture
def records_file(tmp_path: Path, sample_records) -> Path:
    """sample_records written as a JSON file."""
    path = tmp_path / "elements.json"
    path.write_text(json.dumps(sample_records))
    return path
