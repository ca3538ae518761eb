"""Conversion pass orchestration: load -> convert -> write"""

import logging
from pathlib import Path

from postmd.core.export import write_post
from postmd.core.loader import iter_records
from postmd.core.models import ConvertResult


log = logging.getLogger(__name__)


def run_convert(source_dir: Path, output_dir: Path) -> ConvertResult:
    """Convert every JSON post under source_dir into a Markdown file in output_dir.

    Unusable input files are skipped and reported in the result. Failures to
    create or write output_dir propagate.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    result = ConvertResult()
    seen: dict[Path, Path] = {}

    for src, record in iter_records(source_dir):
        if record is None:
            result.skipped.append(src)
            continue
        md_path = write_post(record, src, output_dir)
        if md_path in seen:
            log.warning("%s overwrites %s (from %s)", src, md_path, seen[md_path])
        seen[md_path] = src
        log.info("%s -> %s", src, md_path)
        result.written.append((src, md_path))

    log.info("Converted %d post(s), skipped %d", len(result.written), len(result.skipped))
    return result
