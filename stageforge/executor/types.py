from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PassFail(Enum):
    PASS = "Pass"
    FAIL = "Fail"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TaskResult:
    name: str
    command: str
    stage: int
    result: PassFail
    elapsed_time: int
    file_path: str


@dataclass(frozen=True)
class JobResult:
    job_name: str
    execution_time: str
    results: tuple[TaskResult, ...]

    @property
    def failed(self) -> list[TaskResult]:
        return [r for r in self.results if r.result is PassFail.FAIL]
