# Command-line entry point for gokapi_cli.
# This file is the only place that prints usage or errors and sets the
# process exit code; argument resolution lives in flags.
#
# The command hands the argument list to flags exactly as given: the flag
# scan decides what is known, what is ignored and which exit code applies.

from __future__ import annotations

from typing import List

import typer
from typer.core import TyperCommand
from rich.console import Console
from rich.markup import escape

from gokapi_cli.core import run
from gokapi_cli.errors import ParameterError, UsageError
from gokapi_cli.flags import resolve_mode, usage_lines
from gokapi_cli.models import OperationMode

PROG_NAME = "gokapi-cli"
RAW_ARGS_KEY = "gokapi_cli.raw_args"

app = typer.Typer(
    add_completion=False,
    help="Upload files and folders to a Gokapi instance.",
)
console = Console()


def print_usage() -> None:
    console.print("\n".join(usage_lines()), markup=False, highlight=False, soft_wrap=True)


def execute(args: List[str]) -> None:
    # Resolve and run one invocation; args[0] is the program name.
    try:
        mode = resolve_mode(args)
        if mode is OperationMode.invalid:
            raise UsageError("No valid command given")
        run(mode, args)
    except UsageError as exc:
        print_usage()
        raise typer.Exit(code=exc.exit_code)
    except ParameterError as exc:
        console.print(f"[red]ERROR:[/red] {escape(str(exc))}")
        raise typer.Exit(code=exc.exit_code)


class RawArgsCommand(TyperCommand):
    # click drops a bare "--" while parsing; keep the list as it was given
    # so the flag scan sees every token.
    def parse_args(self, ctx, args):
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawArgsCommand,
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def main(ctx: typer.Context) -> None:
    execute([PROG_NAME, *ctx.meta.get(RAW_ARGS_KEY, ctx.args)])


if __name__ == "__main__":
    app()
