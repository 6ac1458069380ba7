"""Tests for export settings."""

import pytest

from phpdoc_exporter.config import ExportConfig, default_project_title


class TestDefaultProjectTitle:
    def test_no_paths(self):
        assert default_project_title([]) == "PHP Documentation"

    def test_directory(self, tmp_path):
        source = tmp_path / "billing"
        source.mkdir()
        assert default_project_title([str(source)]) == "Billing Documentation"

    def test_file(self, tmp_path):
        source = tmp_path / "Widget.php"
        source.write_text("<?php\n")
        assert default_project_title([str(source)]) == "Widget Documentation"

    def test_only_first_path_counts(self, tmp_path):
        first = tmp_path / "core"
        first.mkdir()
        assert default_project_title([str(first), "other"]) == "Core Documentation"


class TestFromArgs:
    def test_defaults(self):
        config = ExportConfig.from_args("in.json", "out.md", environ={})
        assert config == ExportConfig(
            input_path="in.json",
            output_path="out.md",
            project_title="PHP Documentation",
            workers=None,
            verbose=False,
            strict=False,
        )

    def test_environment_defaults(self):
        environ = {
            "PHPDOC_EXPORTER_TITLE": "Shop API",
            "PHPDOC_EXPORTER_WORKERS": "3",
            "PHPDOC_EXPORTER_STRICT": "yes",
        }
        config = ExportConfig.from_args("in.json", "out.md", environ=environ)
        assert config.project_title == "Shop API"
        assert config.workers == 3
        assert config.strict is True

    def test_arguments_override_environment(self):
        environ = {"PHPDOC_EXPORTER_TITLE": "Shop API", "PHPDOC_EXPORTER_WORKERS": "3"}
        config = ExportConfig.from_args(
            "in.json", "out.md", title="Billing", workers=8, environ=environ
        )
        assert config.project_title == "Billing"
        assert config.workers == 8

    def test_strict_flag_is_not_cleared_by_environment(self):
        environ = {"PHPDOC_EXPORTER_STRICT": "0"}
        config = ExportConfig.from_args("in.json", "out.md", strict=True, environ=environ)
        assert config.strict is True

    @pytest.mark.parametrize("value", ["many", "0", "-2"])
    def test_invalid_worker_environment(self, value):
        with pytest.raises(ValueError, match="PHPDOC_EXPORTER_WORKERS"):
            ExportConfig.from_args(
                "in.json", "out.md", environ={"PHPDOC_EXPORTER_WORKERS": value}
            )

    def test_invalid_worker_argument(self):
        with pytest.raises(ValueError):
            ExportConfig.from_args("in.json", "out.md", workers=0, environ={})

    def test_is_immutable(self):
        config = ExportConfig.from_args("in.json", "out.md", environ={})
        with pytest.raises(AttributeError):
            config.strict = True
