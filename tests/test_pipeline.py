"""Tests for parallel extraction and export."""

import pytest

from phpdoc_exporter import pipeline
from phpdoc_exporter.extractors import extract_file
from phpdoc_exporter.generators import render
from phpdoc_exporter.models import LevelCounts
from phpdoc_exporter.pipeline import export, extract_files, should_fail
from phpdoc_exporter.schemas import FileRecord


def _records(count):
    return [
        FileRecord.model_validate(
            {
                "file": f"src/File{i:02d}.php",
                "elements": [
                    {
                        "kind": "function",
                        "name": f"fn{i}",
                        "startLine": 3,
                        "endLine": 5,
                        "rawComment": None if i % 3 == 0 else "/** Does work. */",
                    }
                ],
            }
        )
        for i in range(count)
    ]


class TestExtractFiles:
    def test_empty_input(self):
        assert extract_files([]) == []

    @pytest.mark.parametrize("workers", [1, 4, 16])
    def test_results_follow_input_order(self, workers):
        records = _records(25)
        files = extract_files(records, workers=workers)
        assert [f.path for f in files] == [r.file for r in records]

    def test_matches_serial_extraction(self):
        records = _records(10)
        assert extract_files(records, workers=4) == [extract_file(r) for r in records]

    def test_interrupt_propagates(self, monkeypatch):
        def interrupted(record):
            if record.file.endswith("03.php"):
                raise KeyboardInterrupt
            return extract_file(record)

        monkeypatch.setattr(pipeline, "extract_file", interrupted)
        with pytest.raises(KeyboardInterrupt):
            extract_files(_records(8), workers=2)


class TestExport:
    def test_report_is_independent_of_worker_count(self):
        records = _records(12)
        serial = export(records, "Demo", workers=1)
        parallel = export(records, "Demo", workers=8)
        assert serial.document == parallel.document
        assert serial.warnings == parallel.warnings

    def test_matches_render(self, sample_records):
        records = [FileRecord.model_validate(r) for r in sample_records]
        result = export(records, "Widget Documentation")
        expected = render([extract_file(r) for r in records], "Widget Documentation")
        assert result == expected
        assert result.counts == LevelCounts(must=1, should=0, may=0)

    def test_warnings_in_file_then_element_order(self):
        result = export(_records(7), "Demo", workers=3)
        assert [w.element for w in result.warnings] == [
            f"src/File{i:02d}.php:3" for i in range(7)
        ]


@pytest.mark.parametrize(
    "counts, strict, expected",
    [
        (LevelCounts(must=1), True, True),
        (LevelCounts(must=1), False, False),
        (LevelCounts(should=5), True, False),
        (LevelCounts(), True, False),
    ],
)
def test_should_fail(counts, strict, expected):
    assert should_fail(counts, strict) is expected
