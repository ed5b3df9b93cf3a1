"""
Command-line interface for mathcli.

Apply a mathematical operation to a stream of inputs read from stdin:

    $ printf '2\\n3\\n\\n' | mathcli mul
    6
    $ printf '6\\n2\\n\\n' | mathcli sub
    4
    $ printf '7\\n3\\n\\n' | mathcli div
    2.3333333333333335
    $ printf '5\\n4\\n\\n' | mathcli add
    9

The result is the only thing written to stdout; all diagnostics go to stderr.
"""

import sys
from typing import Any, Dict, Optional, TextIO

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import load_config
from .errors import MathCLIError
from .logging_config import get_logger, new_run_id, setup_logging
from .numeric import format_result
from .operations import Operation
from .reducer import reduce_lines

# EX_CONFIG from sysexits.h
EXIT_CONFIG = 78

app = typer.Typer(
    name="mathcli",
    help="Apply a mathematical operation to a stream of inputs read from stdin.",
    add_completion=False,
    no_args_is_help=True,
)
err_console = Console(stderr=True)

logger = get_logger("cli")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mathcli {__version__}")
        raise typer.Exit()


@app.callback()
def cli_options(
    ctx: typer.Context,
    identity_starting_point: bool = typer.Option(
        False,
        "--identity-starting-point",
        help="Use the identity for this operation as a starting point",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="Silence errors parsing input. Applies the identity for the operation "
        "if a parse failure does occur",
    ),
    ignore: Optional[int] = typer.Option(
        None,
        "--ignore",
        "-i",
        min=0,
        help="Ignore lines at the beginning of input (default: 0)",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Logging verbosity, all logs go to stderr. Number of v's translates to logging level",
    ),
    log_format: Optional[str] = typer.Option(
        None,
        "--log-format",
        help="Diagnostic format: text or json (default: text)",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also write diagnostics to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Options are add, sub, mul, div."""
    # Flags left at their defaults fall through to the environment
    ctx.obj = {
        "identity_starting_point": identity_starting_point or None,
        "silent": silent or None,
        "ignore": ignore,
        "verbose": verbose or None,
        "log_format": log_format.lower() if log_format else None,
        "log_file": log_file,
    }


def strict_stdin() -> TextIO:
    """
    Stdin decoded as strict UTF-8.

    Under a C or POSIX locale Python opens stdin with surrogateescape,
    which would let undecodable bytes through as text.
    """
    stdin = sys.stdin
    if hasattr(stdin, "reconfigure"):
        stdin.reconfigure(encoding="utf-8", errors="strict")
    return stdin


def _run(ctx: typer.Context, operation: Operation) -> None:
    """Reduce stdin with an operation and print the result."""
    options: Dict[str, Any] = ctx.obj or {}

    try:
        config = load_config(operation, **options)
        setup_logging(
            config.verbose,
            log_file=config.log_file,
            json_format=config.log_format == "json",
        )
    except (ValueError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_CONFIG)

    run_id = new_run_id()
    logger.info("Starting...", extra={"operation": operation.value})
    logger.debug(f"Run {run_id} with {config}")

    try:
        result = reduce_lines(config, strict_stdin())
    except MathCLIError as e:
        logger.error(str(e))
        raise typer.Exit(e.exit_code)

    logger.info("Writing result")
    typer.echo(format_result(result))


@app.command("add")
def add_command(ctx: typer.Context):
    """Add all inputs. Identity: 0.0"""
    _run(ctx, Operation.ADD)


@app.command("sub")
def sub_command(ctx: typer.Context):
    """Subtract all inputs. Identity: 0.0"""
    _run(ctx, Operation.SUB)


@app.command("mul")
def mul_command(ctx: typer.Context):
    """Multiply all inputs. Identity: 1.0"""
    _run(ctx, Operation.MUL)


@app.command("div")
def div_command(ctx: typer.Context):
    """Divide all inputs. Identity: 1.0"""
    _run(ctx, Operation.DIV)


def main() -> None:
    """Console script entry point."""
    app(prog_name="mathcli")


if __name__ == "__main__":
    main()
