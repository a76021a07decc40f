from __future__ import annotations

import subprocess
import time

from stageforge.config.types import Task
from stageforge.logger import get_logger

from .types import PassFail, TaskResult

logger = get_logger(__name__)

DEFAULT_FILE_PATH = "stageforge.yml"


def run_task(task: Task, stage: int = 1) -> TaskResult:
    """Run one task through `sh -c` and time it.

    Standard streams are inherited from the parent. Blocks until the child
    exits; there is no timeout.
    """
    workdir = task.workdir or "."
    command = task.command or ""

    logger.info("Running command: '%s'", command)
    start = time.monotonic()
    try:
        completed = subprocess.run(["sh", "-c", command], cwd=workdir)
    except OSError as exc:
        logger.warning("Task '%s' could not be started: %s", task.name, exc)
        verdict = PassFail.FAIL
    else:
        verdict = PassFail.PASS if completed.returncode == 0 else PassFail.FAIL
    elapsed = time.monotonic() - start

    return TaskResult(
        name=task.name,
        command=command,
        stage=stage,
        result=verdict,
        elapsed_time=int(elapsed),
        file_path=task.file_path or DEFAULT_FILE_PATH,
    )
