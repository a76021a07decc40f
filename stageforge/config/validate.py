from __future__ import annotations

import sys
from typing import NoReturn

from .types import Pipeline, ProjectConfig, Task, Template, ValidationError


def validate(entity: Task | Template) -> None:
    """Check the structural rules of a single Task or Template.

    Raises ValidationError for the first violated rule. A notice naming the
    entity is printed to stderr before raising.
    """
    match entity:
        case Task():
            _validate_task(entity)
        case Template():
            _validate_template(entity)
        case _:
            raise TypeError(f"Can't validate {type(entity)}")


def validate_config(project: ProjectConfig) -> None:
    """Validate every entity of a loaded project before anything runs."""
    _check_unique("template", project.templates)
    _check_unique("task", project.tasks)
    _check_unique("pipeline", project.pipelines)

    templates = {template.name: template for template in project.templates}

    for template in project.templates:
        validate(template)

    for task in project.tasks:
        validate(task)
        if task.uses is None:
            continue

        template = templates.get(task.uses)
        if template is None:
            _fail("Task", task.name, f"Task '{task.name}' uses unknown template '{task.uses}'")

        if len(task.values) != len(template.symbols):
            _fail(
                "Task",
                task.name,
                f"Task '{task.name}' provides {len(task.values)} value(s) "
                f"but template '{template.name}' declares {len(template.symbols)} symbol(s)",
            )


def _validate_task(task: Task) -> None:
    if task.command is None and task.uses is None:
        _fail("Task", task.name, "A Task must implement either 'command' or 'uses'!")

    if task.command is not None and task.uses is not None:
        _fail("Task", task.name, "A Task cannot implement both 'command' & 'uses'!")

    if task.uses is not None and task.values is None:
        _fail("Task", task.name, "A Task that implements 'uses' must also implement 'values'!")

    if task.uses is None and task.values is not None:
        _fail("Task", task.name, "A Task that implements 'values' must also implement 'uses'!")


def _validate_template(template: Template) -> None:
    for symbol in template.symbols:
        if symbol not in template.command:
            _fail(
                "Template",
                template.name,
                "A Template's 'symbols' must all exist within its 'command'!",
            )


def _check_unique(kind: str, entities: tuple[Task | Template | Pipeline, ...]) -> None:
    seen: set[str] = set()
    for entity in entities:
        if entity.name in seen:
            _fail(kind.capitalize(), entity.name, f"Duplicate {kind} name: '{entity.name}'")
        seen.add(entity.name)


def _fail(kind: str, name: str, message: str) -> NoReturn:
    print(f"> {kind} '{name}' failed validation!", file=sys.stderr)
    raise ValidationError(message)
