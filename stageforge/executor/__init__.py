from .executor import run_task
from .runner import EXIT_OK, EXIT_TASK_FAILED, PipelineRunner
from .scheduler import StageScheduler
from .types import JobResult, PassFail, TaskResult

__all__ = [
    "run_task",
    "StageScheduler",
    "PipelineRunner",
    "EXIT_OK",
    "EXIT_TASK_FAILED",
    "JobResult",
    "PassFail",
    "TaskResult",
]
