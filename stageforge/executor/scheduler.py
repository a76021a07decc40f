from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from stageforge.config.types import Task
from stageforge.logger import get_logger
from stageforge.registry import TaskRegistry

from .executor import run_task
from .types import TaskResult

logger = get_logger(__name__)


class StageScheduler:
    def __init__(self, registry: TaskRegistry, max_workers: int | None = None):
        self.registry = registry
        self.max_workers = max_workers or os.cpu_count() or 1

    def run(
        self, stages: Sequence[Sequence[str]], *, parallel: bool = False
    ) -> list[list[TaskResult]]:
        """Execute stages in order; stage N+1 starts only after stage N finished.

        Failures never stop the run. Within a stage, results keep the declared
        order even when tasks run concurrently.
        """
        # Every name resolves before stage 1 starts.
        resolved = [[self.registry.get_task(name) for name in stage] for stage in stages]

        if not parallel:
            return [
                self._run_stage_sequential(tasks, number)
                for number, tasks in enumerate(resolved, start=1)
            ]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return [
                self._run_stage_parallel(pool, tasks, number)
                for number, tasks in enumerate(resolved, start=1)
            ]

    def _run_stage_sequential(self, tasks: list[Task], number: int) -> list[TaskResult]:
        logger.info("Running stage %d task(s): %s", number, [t.name for t in tasks])
        return [run_task(task, number) for task in tasks]

    def _run_stage_parallel(
        self, pool: ThreadPoolExecutor, tasks: list[Task], number: int
    ) -> list[TaskResult]:
        logger.info(
            "Running stage %d task(s) in parallel: %s", number, [t.name for t in tasks]
        )
        # list() is the join barrier; map() yields in submission order.
        return list(pool.map(run_task, tasks, [number] * len(tasks)))
