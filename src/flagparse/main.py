import sys
from typing import List, Optional

import typer
from dotenv import load_dotenv

from flagparse.config import FlagConfig, load_config
from flagparse.core.context import FlagContext
from flagparse.logger import get_logger, setup_logger

load_dotenv()

cli = typer.Typer(
    name="flagparse-demo",
    help="Parse a command line with flagparse and show what each flag resolved to",
    epilog="""
    Examples:
    $ flagparse-demo -- -size 42 -output out.bin input.txt
    $ flagparse-demo -- -help
    """,
    add_completion=False,
)


def build_demo_context(config: FlagConfig) -> tuple[FlagContext, dict]:
    """Declare the demo program's flags on a fresh context."""
    ctx = FlagContext(capacity=config.capacity)
    handles = {
        "help": ctx.flag_bool("help", False, "Print this help to stdout and exit with 0"),
        "size": ctx.flag_uint64("size", 0, "Size of the thing"),
        "output": ctx.flag_str("output", "output.txt", "Output file path"),
        "line": ctx.flag_str("line", None, "Line to print"),
    }
    return ctx, handles


@cli.command(context_settings={"ignore_unknown_options": True})
def main(
    args: Optional[List[str]] = typer.Argument(None, help="Arguments handed to flagparse (put them after --)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override FLAGPARSE_LOG_LEVEL"),
):
    """Run the demo flag set against ARGS."""
    config = load_config()
    if log_level:
        config.log_level = log_level.upper()

    setup_logger(log_level=config.log_level, log_file=config.log_file)
    logger = get_logger("main")

    ctx, handles = build_demo_context(config)
    argv = ["flagparse-demo", *(args or [])]
    logger.info(f"Parsing {len(argv) - 1} arguments")

    result = ctx.parse(argv)
    if not result.ok:
        ctx.print_error()
        typer.echo("Usage: flagparse-demo [OPTIONS] [--] [ARGS]...", err=True)
        typer.echo("OPTIONS:", err=True)
        ctx.print_options(sys.stderr)
        raise typer.Exit(code=1)

    if handles["help"].value:
        typer.echo("Usage: flagparse-demo [OPTIONS] [--] [ARGS]...")
        typer.echo("OPTIONS:")
        ctx.print_options()
        raise typer.Exit(code=0)

    for name, handle in handles.items():
        typer.echo(f"{name}: {handle.value}")
    typer.echo(f"rest ({ctx.rest_argc()}): {' '.join(ctx.rest_argv())}")


if __name__ == "__main__":
    cli()
