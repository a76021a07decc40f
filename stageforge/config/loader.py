import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    ConfigError,
    Pipeline,
    ProjectConfig,
    Task,
    Template,
    UnsupportedConfigFormatError,
)

_TOP_LEVEL_KEYS = {"tasks", "pipelines", "templates"}
_TASK_KEYS = {"name", "command", "uses", "values", "description", "workdir", "hide"}
_TEMPLATE_KEYS = {"name", "command", "symbols"}
_PIPELINE_KEYS = {"name", "description", "stages"}


def load_project(path: str | Path) -> ProjectConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_project_config(raw_file, str(path))


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_project_config(raw: Mapping[str, Any], path: str) -> ProjectConfig:
    for key in raw.keys():
        if key not in _TOP_LEVEL_KEYS:
            raise ConfigError(f"Unknown top-level field: {key}")

    if "tasks" not in raw:
        raise ConfigError("Missing 'tasks' field")

    tasks = _entity_list(raw, "tasks")
    if len(tasks) < 1:
        raise ConfigError("There must be at least one task in the config file")

    pipelines = _entity_list(raw, "pipelines") if "pipelines" in raw else []
    templates = _entity_list(raw, "templates") if "templates" in raw else []

    return ProjectConfig(
        path=path,
        tasks=tuple(_build_task(fields) for fields in tasks),
        pipelines=tuple(_build_pipeline(fields) for fields in pipelines),
        templates=tuple(_build_template(fields) for fields in templates),
    )


def _entity_list(raw: Mapping[str, Any], section: str) -> list[Mapping[str, Any]]:
    items = raw[section]
    if not isinstance(items, list):
        raise ConfigError(f"'{section}' must be a list, got {type(items)}")

    for item in items:
        if not isinstance(item, Mapping):
            raise ConfigError(f"Every entry of '{section}' must be a mapping")

    return items


def _entity_name(kind: str, fields: Mapping[str, Any], keys: set[str]) -> str:
    if "name" not in fields:
        raise ConfigError(f"A {kind} is missing 'name'")

    name = fields["name"]
    if not isinstance(name, str):
        raise ConfigError(f"{kind} name must be a string, got {type(name)}")

    name = name.strip()
    if len(name) < 1:
        raise ConfigError(f"A {kind} name can't be empty")

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{kind} '{name}': Can't process: {field}")

    return name


def _optional_str(kind: str, name: str, fields: Mapping[str, Any], key: str) -> str | None:
    if key not in fields or fields[key] is None:
        return None

    if not isinstance(fields[key], str):
        raise ConfigError(f"{kind} '{name}': '{key}' should be a string")

    return fields[key]


def _string_list(kind: str, name: str, value: Any, key: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigError(f"{kind} '{name}': '{key}' should be a list")

    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"{kind} '{name}': {item!r} in '{key}' should be a string")

    return tuple(value)


def _build_task(fields: Mapping[str, Any]) -> Task:
    name = _entity_name("Task", fields, _TASK_KEYS)

    command = _optional_str("Task", name, fields, "command")
    if command is not None and len(command.strip()) < 1:
        raise ConfigError(f"Task '{name}': Command missing")

    values = None
    if fields.get("values") is not None:
        values = _string_list("Task", name, fields["values"], "values")

    workdir = _optional_str("Task", name, fields, "workdir")
    if workdir is not None and len(workdir.strip()) < 1:
        raise ConfigError(f"Task '{name}': Please provide a workdir or remove this field")

    hide = fields.get("hide", False)
    if hide is None:
        hide = False
    if not isinstance(hide, bool):
        raise ConfigError(f"Task '{name}': 'hide' should be a boolean")

    return Task(
        name=name,
        command=command.strip() if command is not None else None,
        uses=_optional_str("Task", name, fields, "uses"),
        values=values,
        description=_optional_str("Task", name, fields, "description"),
        workdir=workdir.strip() if workdir is not None else None,
        hide=hide,
    )


def _build_template(fields: Mapping[str, Any]) -> Template:
    name = _entity_name("Template", fields, _TEMPLATE_KEYS)

    command = _optional_str("Template", name, fields, "command")
    if command is None:
        raise ConfigError(f"Template '{name}': missing 'command'")

    if "symbols" not in fields:
        raise ConfigError(f"Template '{name}': missing 'symbols'")

    symbols = _string_list("Template", name, fields["symbols"], "symbols")
    return Template(name=name, command=command, symbols=symbols)


def _build_pipeline(fields: Mapping[str, Any]) -> Pipeline:
    name = _entity_name("Pipeline", fields, _PIPELINE_KEYS)

    if "stages" not in fields:
        raise ConfigError(f"Pipeline '{name}': missing 'stages'")

    raw_stages = fields["stages"]
    if not isinstance(raw_stages, list):
        raise ConfigError(f"Pipeline '{name}': 'stages' should be a list of lists")

    stages = tuple(
        _string_list("Pipeline", name, stage, "stages") for stage in raw_stages
    )
    return Pipeline(
        name=name,
        stages=stages,
        description=_optional_str("Pipeline", name, fields, "description"),
    )
