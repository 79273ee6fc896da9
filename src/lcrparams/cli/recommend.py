"""Shared recommendation execution helpers for the CLI.

One click command class serves both conventions; the convention picks the
formula table and the ``ReportLayout``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

import click

from lcrparams.cli.common_options import recommendation_options
from lcrparams.cli.exit_codes import (
    EXIT_ERROR,
    EXIT_SIGINT,
    EXIT_SIGTERM,
    EXIT_SUCCESS,
    EXIT_USAGE,
)
from lcrparams.config import Config, load_config
from lcrparams.constants import MISSING_LENGTH_SENTINEL, UNSET_TARGET_LENGTH
from lcrparams.core.recommender import recommend
from lcrparams.core.types import Convention
from lcrparams.exceptions import ConfigurationError
from lcrparams.utils.display import LAYOUTS, ReportLayout, help_text, render_report
from lcrparams.utils.logging import get_logger, setup_logging
from lcrparams.utils.validators import in_target_range, parse_focus, parse_target_length


@dataclass
class RecommendOptions:
    """Container for one recommendation run's command line values."""

    convention: Convention
    focus_value: Optional[str]
    length_value: Optional[str]  # None means -l was not given
    config_path: Optional[Path] = None
    missing_length: Optional[str] = None  # None means use config
    verbose: int = 0
    log_file: Optional[Path] = None
    extra_args: Tuple[str, ...] = ()  # ignored non-option operands


def resolve_target_length(
    length_value: Optional[str],
    cfg: Config,
    logger: logging.Logger,
) -> int:
    """Turn the raw -l value into the target length the formulas run on."""
    if length_value is None:
        if cfg.missing_length == MISSING_LENGTH_SENTINEL:
            logger.warning(
                f"-l not given; computing on the unset target length {UNSET_TARGET_LENGTH} "
                "(every row will be NA)"
            )
            return UNSET_TARGET_LENGTH
        logger.warning(f"-l not given; using the DEFAULT VALUE = {cfg.default_target_length}")
        return cfg.default_target_length

    length = parse_target_length(length_value)
    if not in_target_range(length):
        logger.warning(
            f"-l value is out of bounds, re-setting to a DEFAULT VALUE = {cfg.default_target_length}"
        )
        return cfg.default_target_length
    return length


def _log_level(verbose: int, cfg: Optional[Config] = None) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    if cfg is not None:
        return cfg.runtime.log_level_value
    return logging.WARNING


def execute_recommendation(opts: RecommendOptions) -> int:
    """Run one recommendation and write the report to stdout.

    Returns the process exit code.
    """
    setup_logging(level=_log_level(opts.verbose), log_file=opts.log_file)
    logger = get_logger(opts.convention.value)

    try:
        cfg = load_config(opts.config_path) if opts.config_path else Config()
        if opts.missing_length is not None:
            cfg.missing_length = opts.missing_length
        cfg.validate()
    except ConfigurationError as exc:
        logger.error(f"Configuration error: {exc}")
        return EXIT_ERROR

    # CLI flags take precedence over the config file
    if opts.verbose == 0 or (opts.log_file is None and cfg.runtime.log_file):
        setup_logging(
            level=_log_level(opts.verbose, cfg),
            log_file=opts.log_file or cfg.runtime.log_file,
        )

    if opts.extra_args:
        logger.debug(f"Ignoring non-option arguments: {' '.join(opts.extra_args)}")

    focus = parse_focus(opts.focus_value)
    target_length = resolve_target_length(opts.length_value, cfg, logger)
    logger.info(f"Recommending {opts.convention.value} parameters: length={target_length} focus={focus.value}")

    layout = LAYOUTS[opts.convention]
    rows = recommend(target_length, focus, opts.convention)
    for row in rows:
        logger.debug(f"coverage {row.coverage}%: {row.parameters if row.valid else row.reason}")

    click.echo(render_report(rows, target_length, focus, layout), nl=False)
    return EXIT_SUCCESS


class RecommendCommand(click.Command):
    """Click command whose help and usage errors follow the classic programs.

    Help text goes to stderr. A usage error prints its message and the help
    text to stderr and exits with status 1.
    """

    def __init__(self, *args: Any, convention: Convention, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.convention = convention

    @property
    def layout(self) -> ReportLayout:
        return LAYOUTS[self.convention]

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)
            click.echo(help_text(self.layout), err=True)
            ctx.exit(EXIT_USAGE)

    def get_help(self, ctx: click.Context) -> str:
        return help_text(self.layout)


def _print_help(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(ctx.command.get_help(ctx), err=True)
        ctx.exit(EXIT_SUCCESS)


def build_recommend_command(convention: Convention, name: str) -> click.Command:
    """Create the click command recommending parameters for ``convention``."""
    layout = LAYOUTS[convention]

    @click.command(
        name=name,
        cls=RecommendCommand,
        convention=convention,
        add_help_option=False,
        context_settings={"allow_extra_args": True},
        short_help=f"Recommend {layout.tool_name} parameters for a target length.",
    )
    @click.option(
        "-h",
        "--help",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=_print_help,
        help="Print help to stderr and exit.",
    )
    @recommendation_options
    @click.pass_context
    def command(
        ctx: click.Context,
        focus_value: Optional[str],
        length_value: Optional[str],
        config: Optional[Path],
        missing_length: Optional[str],
        verbose: int,
        log_file: Optional[Path],
    ) -> None:
        opts = RecommendOptions(
            convention=convention,
            focus_value=focus_value,
            length_value=length_value,
            config_path=config,
            missing_length=missing_length,
            verbose=verbose,
            log_file=log_file,
            extra_args=tuple(ctx.args),
        )
        try:
            code = execute_recommendation(opts)
        except KeyboardInterrupt as exc:
            get_logger(convention.value).info("Recommendation interrupted")
            code = EXIT_SIGTERM if "SIGTERM" in str(exc) else EXIT_SIGINT
        ctx.exit(code)

    return command
