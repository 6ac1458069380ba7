"""Export settings."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

PROGRAM_NAME = "phpdoc-exporter"
VERSION = "1.0.0"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUE_VALUES


def _env_int(environ: Mapping[str, str], name: str) -> int | None:
    value = environ.get(name, "").strip()
    if not value:
        return None
    try:
        number = int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    if number < 1:
        raise ValueError(f"{name} must be at least 1, got {number}")
    return number


def default_project_title(paths: Sequence[str]) -> str:
    """Derive a report title from the first source path.

    A directory gives "Basename Documentation", a file gives its name without
    the .php extension, and no paths give "PHP Documentation".
    """
    if not paths:
        return "PHP Documentation"

    first = Path(paths[0])
    if first.is_dir():
        name = first.resolve().name
        return f"{name[:1].upper()}{name[1:]} Documentation"
    return f"{first.name.replace('.php', '')} Documentation"


@dataclass(frozen=True)
class ExportConfig:
    """Immutable settings for one export run."""

    input_path: str  # JSON element records, "-" for stdin
    output_path: str  # Markdown report
    project_title: str
    workers: int | None = None  # None lets the executor decide
    verbose: bool = False
    strict: bool = False  # Fail the run on MUST violations

    @classmethod
    def from_args(
        cls,
        input_path: str,
        output_path: str,
        title: str | None = None,
        workers: int | None = None,
        verbose: bool = False,
        strict: bool = False,
        source_paths: Sequence[str] = (),
        environ: Mapping[str, str] | None = None,
    ) -> ExportConfig:
        """Merge explicit arguments over environment defaults.

        Environment:
            PHPDOC_EXPORTER_TITLE: Report title
            PHPDOC_EXPORTER_WORKERS: Worker threads for extraction
            PHPDOC_EXPORTER_STRICT: Truthy to enable strict mode

        Raises:
            ValueError: If a numeric setting is invalid.
        """
        env = os.environ if environ is None else environ

        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        return cls(
            input_path=input_path,
            output_path=output_path,
            project_title=(
                title
                or env.get("PHPDOC_EXPORTER_TITLE")
                or default_project_title(source_paths)
            ),
            workers=(
                workers
                if workers is not None
                else _env_int(env, "PHPDOC_EXPORTER_WORKERS")
            ),
            verbose=verbose,
            strict=strict or _env_flag(env, "PHPDOC_EXPORTER_STRICT"),
        )
