"""Click application entrypoints for lcrparams."""

from __future__ import annotations

import signal
import sys
from types import FrameType
from typing import Optional

import click

from lcrparams import __version__
from lcrparams.cli.exit_codes import EXIT_ERROR, EXIT_SUCCESS
from lcrparams.core.types import Convention

from .commands.config import init_config
from .recommend import build_recommend_command


def _handle_signal(signum: int, frame: Optional[FrameType]) -> None:
    """Turn SIGINT/SIGTERM into KeyboardInterrupt; commands map it to 130/143."""
    sig_name = "SIGINT" if signum == signal.SIGINT else "SIGTERM"
    click.echo(f"\n{sig_name} received, stopping...", err=True)
    raise KeyboardInterrupt(sig_name)


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(f"lcrparams {__version__}")
        ctx.exit()


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-V",
    "--version",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help="Show the version and exit.",
)
def cli() -> None:
    """lcrparams: recommended fLPS and SEG parameters for a target region length.

    Example: lcrparams flps -f diverse -l 15
    """


flps_command = build_recommend_command(Convention.FLPS, "flps")
seg_command = build_recommend_command(Convention.SEG, "seg")

cli.add_command(flps_command)
cli.add_command(seg_command)
cli.add_command(init_config)

# Standalone programs, named like the classic executables
flps_program = build_recommend_command(Convention.FLPS, "fLPSparameters")
seg_program = build_recommend_command(Convention.SEG, "SEGparameters")


def _run(command: click.Command, argv: Optional[list], prog_name: Optional[str] = None) -> int:
    """Invoke a click command with signal handling and return its exit code."""
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    try:
        command.main(args=argv, prog_name=prog_name)
        return EXIT_SUCCESS
    except SystemExit as exc:
        # Preserve explicit exit codes from click
        if exc.code is None:
            return EXIT_SUCCESS
        return exc.code if isinstance(exc.code, int) else EXIT_ERROR
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        return EXIT_ERROR


def main(argv: list[str] | None = None) -> int:
    """``lcrparams`` entry point."""
    return _run(cli, argv, prog_name="lcrparams")


def flps_main(argv: list[str] | None = None) -> int:
    """``fLPSparameters`` entry point."""
    return _run(flps_program, argv, prog_name="fLPSparameters")


def seg_main(argv: list[str] | None = None) -> int:
    """``SEGparameters`` entry point."""
    return _run(seg_program, argv, prog_name="SEGparameters")


if __name__ == "__main__":
    sys.exit(main())
