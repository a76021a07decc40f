from __future__ import annotations

from dataclasses import dataclass, replace

from stageforge.config.templates import expand_template
from stageforge.config.types import Pipeline, ProjectConfig, Task

from .types import PipelineNotFoundError, TaskNotFoundError


@dataclass(frozen=True)
class TaskRegistry:
    """Name-keyed lookup of resolved tasks and pipelines.

    Built once per run and only read afterwards, including from worker
    threads of a parallel stage.
    """

    tasks: dict[str, Task]
    pipelines: dict[str, Pipeline]

    @classmethod
    def from_project(cls, project: ProjectConfig) -> TaskRegistry:
        templates = {template.name: template for template in project.templates}

        tasks: dict[str, Task] = {}
        for task in project.tasks:
            if task.uses is not None:
                task = expand_template(task, templates[task.uses])
            tasks[task.name] = _inject_metadata(task, project.path)

        pipelines: dict[str, Pipeline] = {}
        for pipeline in project.pipelines:
            if pipeline.description is None:
                pipeline = replace(pipeline, description="")
            pipelines[pipeline.name] = pipeline

        return cls(tasks, pipelines)

    def get_task(self, name: str) -> Task:
        if name not in self.tasks:
            raise TaskNotFoundError(name)
        return self.tasks[name]

    def get_pipeline(self, name: str) -> Pipeline:
        if name not in self.pipelines:
            raise PipelineNotFoundError(name)
        return self.pipelines[name]

    def task_names(self) -> list[str]:
        return sorted(self.tasks, key=str.lower)

    def pipeline_names(self) -> list[str]:
        return sorted(self.pipelines, key=str.lower)

    def visible_tasks(self) -> list[Task]:
        return [
            self.tasks[name] for name in self.task_names() if not self.tasks[name].hide
        ]


def resolve(project: ProjectConfig) -> TaskRegistry:
    return TaskRegistry.from_project(project)


def _inject_metadata(task: Task, file_path: str) -> Task:
    description = task.description or task.command
    return replace(task, file_path=file_path, description=description)
