from .registry import TaskRegistry, resolve
from .types import PipelineNotFoundError, RegistryLookupError, TaskNotFoundError

__all__ = [
    "TaskRegistry",
    "resolve",
    "RegistryLookupError",
    "TaskNotFoundError",
    "PipelineNotFoundError",
]
