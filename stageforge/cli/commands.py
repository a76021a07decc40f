from __future__ import annotations

import argparse
import sys
import time

from stageforge.config import ConfigError
from stageforge.executor import PipelineRunner
from stageforge.registry import RegistryLookupError
from stageforge.results import ResultLog

from .args import build_parser, build_pre_parser
from .context import AppContext, build_context
from .display import render_history, render_job

EXIT_CONFIG_ERROR = 2


def run_cli(argv: list[str] | None = None) -> int:
    try:
        pre_args, _ = build_pre_parser().parse_known_args(argv)
        ctx = build_context(pre_args.config)
        args = build_parser(ctx.registry).parse_args(argv)

        match args.command:
            case "task":
                return cmd_task(ctx, args)
            case "pl":
                return cmd_pipeline(ctx, args)
            case "logs":
                return cmd_logs(ctx, args)
            case "list":
                return cmd_list(ctx, args)
            case _:
                return EXIT_CONFIG_ERROR

    except (ConfigError, RegistryLookupError) as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except KeyboardInterrupt:
        return 130


def main() -> None:
    raise SystemExit(run_cli())


def cmd_task(ctx: AppContext, args: argparse.Namespace) -> int:
    start = time.monotonic()
    runner = _runner(ctx)
    job = runner.run_task(args.target)
    _print_elapsed(start)
    return runner.exit_code(job)


def cmd_pipeline(ctx: AppContext, args: argparse.Namespace) -> int:
    start = time.monotonic()
    runner = _runner(ctx)
    job = runner.run_pipeline(args.target, parallel=args.parallel)
    _print_elapsed(start)
    return runner.exit_code(job)


def cmd_logs(ctx: AppContext, args: argparse.Namespace) -> int:
    render_history(ResultLog().replay(args.number))
    return 0


def cmd_list(ctx: AppContext, args: argparse.Namespace) -> int:
    for task in ctx.registry.visible_tasks():
        print(task.name)
    for name in ctx.registry.pipeline_names():
        print(name)
    return 0


def _runner(ctx: AppContext) -> PipelineRunner:
    return PipelineRunner(ctx.registry, ResultLog(), render_job)


def _print_elapsed(start: float) -> None:
    elapsed = time.monotonic() - start
    print(f"> Total elapsed time: {int(elapsed)}s | {int(elapsed * 1000)}ms")
