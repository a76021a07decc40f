from __future__ import annotations

from dataclasses import dataclass

from stageforge.config import ProjectConfig, load_project, validate_config
from stageforge.registry import TaskRegistry, resolve


@dataclass(frozen=True)
class AppContext:
    config_path: str
    project: ProjectConfig
    registry: TaskRegistry


def build_context(config_path: str) -> AppContext:
    project = load_project(config_path)
    validate_config(project)
    return AppContext(config_path, project, resolve(project))
