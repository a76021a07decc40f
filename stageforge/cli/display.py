from __future__ import annotations

import sys
from typing import TextIO

from stageforge.executor.types import JobResult

_HEADERS = ("Task", "Stage", "Result", "Run Time(s)", "File")


def render_job(job: JobResult, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    rows = [
        (r.name, str(r.stage), str(r.result), str(r.elapsed_time), r.file_path)
        for r in job.results
    ]
    widths = [
        max(len(row[i]) for row in [_HEADERS, *rows]) for i in range(len(_HEADERS))
    ]
    rule = "+".join("-" * (w + 2) for w in widths)

    print(f"+{rule}+", file=out)
    print(_format_row(_HEADERS, widths), file=out)
    print(f"+{rule}+", file=out)
    for row in rows:
        print(_format_row(row, widths), file=out)
    print(f"+{rule}+", file=out)


def render_history(jobs: list[JobResult], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for job in jobs:
        print(f"\n> {job.job_name} | {job.execution_time}", file=out)
        render_job(job, out)


def _format_row(row: tuple[str, ...], widths: list[int]) -> str:
    cells = [row[0].ljust(widths[0])]
    cells += [cell.center(width) for cell, width in zip(row[1:4], widths[1:4])]
    cells.append(row[4].rjust(widths[4]))
    return "| " + " | ".join(cells) + " |"
