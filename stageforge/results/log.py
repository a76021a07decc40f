from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

import yaml

from stageforge.executor.types import JobResult, PassFail, TaskResult

LOG_DIR = ".stageforge"
LOG_PREFIX = "stageforge"


class ResultLog:
    """One YAML file per job result, named so that sorting by name sorts by time."""

    def __init__(self, log_dir: str | Path = LOG_DIR):
        self.log_dir = Path(log_dir)

    def write(self, job: JobResult) -> str:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        content = dump_job(job)
        while True:
            filename = f"{LOG_PREFIX}-{_timestamp()}.log"
            try:
                # "x" never overwrites; a taken name gets a fresh timestamp.
                with open(self.log_dir / filename, "x", encoding="utf-8") as f:
                    f.write(content)
            except FileExistsError:
                continue
            return filename

    def replay(self, count: int) -> list[JobResult]:
        """Return the `count` most recent job results, oldest first."""
        if count <= 0 or not self.log_dir.is_dir():
            return []

        filenames = sorted(
            p.name
            for p in self.log_dir.iterdir()
            if p.is_file() and p.name.startswith(f"{LOG_PREFIX}-")
        )
        return [self.read(self.log_dir / name) for name in filenames[-count:]]

    def read(self, path: str | Path) -> JobResult:
        return load_job(Path(path).read_text(encoding="utf-8"))


def dump_job(job: JobResult) -> str:
    raw = asdict(job)
    raw["results"] = [
        {**result, "result": str(result["result"])} for result in raw["results"]
    ]
    return yaml.safe_dump(raw, sort_keys=False)


def load_job(text: str) -> JobResult:
    raw = yaml.safe_load(text)
    return JobResult(
        job_name=raw["job_name"],
        execution_time=raw["execution_time"],
        results=tuple(_load_task_result(item) for item in raw["results"]),
    )


def _load_task_result(raw: Mapping[str, Any]) -> TaskResult:
    return TaskResult(
        name=raw["name"],
        command=raw["command"],
        stage=raw["stage"],
        result=PassFail(raw["result"]),
        elapsed_time=raw["elapsed_time"],
        file_path=raw["file_path"],
    )


def _timestamp() -> str:
    # Fixed width (always microseconds) keeps lexicographic order chronological.
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f+00:00")
