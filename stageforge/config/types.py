from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Task:
    name: str
    command: str | None = None
    uses: str | None = None
    values: tuple[str, ...] | None = None
    description: str | None = None
    workdir: str | None = None
    hide: bool = False
    file_path: str | None = None


@dataclass(frozen=True)
class Template:
    name: str
    command: str
    symbols: tuple[str, ...]


@dataclass(frozen=True)
class Pipeline:
    name: str
    stages: tuple[tuple[str, ...], ...]
    description: str | None = None


@dataclass(frozen=True)
class ProjectConfig:
    path: str
    tasks: tuple[Task, ...]
    pipelines: tuple[Pipeline, ...] = field(default_factory=tuple)
    templates: tuple[Template, ...] = field(default_factory=tuple)


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class ValidationError(ConfigError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
