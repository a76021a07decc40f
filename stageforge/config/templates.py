from __future__ import annotations

from dataclasses import replace

from .types import Task, Template


def expand_template(task: Task, template: Template) -> Task:
    """Return a copy of `task` whose command is the expanded `template`.

    Symbols are replaced one at a time, in declaration order, against the
    progressively rewritten command. Each symbol gets exactly one pass, so
    text injected by an earlier value can be rewritten by a later symbol but
    never loops. `uses` and `values` are kept on the returned task.
    """
    command = template.command
    for index, symbol in enumerate(template.symbols):
        command = command.replace(symbol, task.values[index])

    return replace(task, command=command)
