from __future__ import annotations

import argparse

from stageforge.registry import TaskRegistry

DEFAULT_CONFIG = "stageforge.yml"


def build_pre_parser() -> argparse.ArgumentParser:
    """Parser that only knows `--config`, used before the config is loaded."""
    parser = argparse.ArgumentParser(prog="stageforge", add_help=False)
    _add_config_arg(parser)
    return parser


def build_parser(registry: TaskRegistry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stageforge",
        description="Run shell tasks and staged pipelines declared in a config file.",
    )
    _add_config_arg(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # task
    task = subparsers.add_parser("task", help="Discrete executable tasks")
    task_names = task.add_subparsers(dest="target", metavar="TASK", required=True)
    for name in registry.task_names():
        entry = registry.get_task(name)
        if entry.hide:
            # No help kwarg keeps it out of the listing but still runnable.
            task_names.add_parser(name)
        else:
            task_names.add_parser(name, help=_escape(entry.description))

    # pl
    pl = subparsers.add_parser("pl", help="Pipelines composed of multiple tasks")
    pl.add_argument(
        "-p",
        "--parallel",
        action="store_true",
        help="Run the tasks of each stage in parallel",
    )
    pipeline_names = pl.add_subparsers(dest="target", metavar="PIPELINE", required=True)
    for name in registry.pipeline_names():
        pipeline_names.add_parser(
            name, help=_escape(registry.get_pipeline(name).description)
        )

    # logs
    logs = subparsers.add_parser("logs", help="Show results of previous runs")
    logs.add_argument(
        "-n",
        "--number",
        type=int,
        default=1,
        help="Number of most recent runs to show",
    )

    # list
    subparsers.add_parser("list", help="List tasks and pipelines")

    return parser


def _add_config_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to config file",
    )


def _escape(text: str | None) -> str:
    # argparse %-formats help strings.
    return (text or "").replace("%", "%%")
