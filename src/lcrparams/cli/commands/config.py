"""``init-config``: write a YAML configuration template for the recommenders."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from lcrparams.cli.exit_codes import EXIT_ERROR
from lcrparams.config import Config
from lcrparams.constants import MAX_TARGET_LENGTH, MIN_TARGET_LENGTH, MISSING_LENGTH_POLICIES


@click.command(name="init-config")
@click.option(
    "--output-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("lcrparams.yaml"),
    show_default=True,
    help="Where to write the template",
)
@click.option("--stdout", is_flag=True, help="Print the template instead of writing a file")
@click.option(
    "--default-length",
    type=click.IntRange(MIN_TARGET_LENGTH, MAX_TARGET_LENGTH),
    default=None,
    help="Pre-fill default_target_length",
)
@click.option(
    "--missing-length",
    type=click.Choice(MISSING_LENGTH_POLICIES),
    default=None,
    help="Pre-fill missing_length",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def init_config(
    ctx: click.Context,
    output_file: Path,
    stdout: bool,
    default_length: Optional[int],
    missing_length: Optional[str],
    force: bool,
) -> None:
    """Generate a configuration template for ``-c``."""
    from lcrparams.resources import get_default_config

    cfg = Config()
    if default_length is not None:
        cfg.default_target_length = default_length
    if missing_length is not None:
        cfg.missing_length = missing_length

    config_text = get_default_config(cfg.default_target_length, cfg.missing_length)
    if stdout:
        click.echo(config_text, nl=False)
        return

    if output_file.exists() and not force:
        click.echo(f"Error: {output_file} already exists (use --force to overwrite)", err=True)
        ctx.exit(EXIT_ERROR)
    output_file.write_text(config_text, encoding="utf-8")
    click.echo(f"Configuration template saved to: {output_file}")
    click.echo(f"Pass it to fLPSparameters/SEGparameters with: -c {output_file}")
