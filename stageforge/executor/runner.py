from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from stageforge.logger import get_logger
from stageforge.registry import TaskRegistry

from .executor import run_task
from .scheduler import StageScheduler
from .types import JobResult, TaskResult

if TYPE_CHECKING:
    from stageforge.results import ResultLog

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_TASK_FAILED = 1


class PipelineRunner:
    """Turns one top-level invocation into a persisted and rendered JobResult."""

    def __init__(
        self,
        registry: TaskRegistry,
        result_log: ResultLog,
        render: Callable[[JobResult], None],
        *,
        max_workers: int | None = None,
    ):
        self.registry = registry
        self.result_log = result_log
        self.render = render
        self.scheduler = StageScheduler(registry, max_workers=max_workers)

    def run_pipeline(self, name: str, *, parallel: bool = False) -> JobResult:
        pipeline = self.registry.get_pipeline(name)
        execution_time = _now()
        stage_results = self.scheduler.run(pipeline.stages, parallel=parallel)
        flat = tuple(result for stage in stage_results for result in stage)
        return self._finish(JobResult(pipeline.name, execution_time, flat))

    def run_task(self, name: str) -> JobResult:
        task = self.registry.get_task(name)
        execution_time = _now()
        result: TaskResult = run_task(task, 1)
        return self._finish(JobResult(task.name, execution_time, (result,)))

    def _finish(self, job: JobResult) -> JobResult:
        log_name = self.result_log.write(job)
        print(f"> Log file written to: {log_name}")
        self.render(job)
        return job

    @staticmethod
    def exit_code(job: JobResult) -> int:
        if job.failed:
            logger.info(
                "%d task(s) failed in '%s'", len(job.failed), job.job_name
            )
            return EXIT_TASK_FAILED
        return EXIT_OK


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
