"""Extraction pipeline: parse files in parallel, then render in input order."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .extractors import extract_file
from .generators import render
from .models import FileDocs, LevelCounts, RenderResult
from .schemas import FileRecord

log = logging.getLogger(__name__)


def extract_files(
    records: Sequence[FileRecord], workers: int | None = None
) -> list[FileDocs]:
    """Extract every file's elements on a worker pool.

    Files share no state, so they are processed independently. Results come
    back in input order regardless of which file finishes first.

    On KeyboardInterrupt pending files are cancelled, partial results are
    discarded and the interrupt propagates.

    Args:
        records: Per-file element records from the source parser
        workers: Thread count, None for the executor default

    Returns:
        FileDocs in the same order as records
    """
    if not records:
        return []

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="extract") as pool:
        futures = [pool.submit(extract_file, record) for record in records]
        try:
            return [future.result() for future in futures]
        except KeyboardInterrupt:
            log.warning("Interrupted; discarding partial extraction results")
            for future in futures:
                future.cancel()
            raise


def export(
    records: Sequence[FileRecord], project_title: str, workers: int | None = None
) -> RenderResult:
    """Extract, validate and render a full report."""
    files = extract_files(records, workers=workers)
    log.info(
        "Extracted %d element(s) from %d file(s)",
        sum(len(f.elements) for f in files),
        len(files),
    )
    return render(files, project_title)


def should_fail(counts: LevelCounts, strict: bool) -> bool:
    """Strict mode turns any MUST violation into a failed run."""
    return strict and counts.must > 0
