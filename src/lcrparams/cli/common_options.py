"""Shared Click options for the lcrparams recommendation commands.

The same decorators build ``lcrparams flps``, ``lcrparams seg`` and the
standalone ``fLPSparameters``/``SEGparameters`` programs, so all four
accept identical options.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

from lcrparams.constants import MISSING_LENGTH_POLICIES

F = TypeVar("F", bound=Callable[..., None])


def focus_option(func: F) -> F:
    """Focus option; read leniently, so it is a plain string here."""
    return click.option(
        "-f",
        "focus_value",
        metavar="FOCUS",
        default=None,
        help="'diverse' (default) or 'narrow'",
    )(func)


def length_option(func: F) -> F:
    """Target length option; read leniently, so it is a plain string here."""
    return click.option(
        "-l",
        "length_value",
        metavar="LENGTH",
        default=None,
        help="Target length, 5-300 inclusive",
    )(func)


def config_option(func: F) -> F:
    """Configuration file option."""
    return click.option(
        "-c",
        "--config",
        type=click.Path(path_type=Path),
        default=None,
        help="Configuration file (YAML)",
    )(func)


def missing_length_option(func: F) -> F:
    """Policy for an omitted -l."""
    return click.option(
        "--missing-length",
        type=click.Choice(MISSING_LENGTH_POLICIES),
        default=None,
        help="When -l is not given: use the default length, or the unset value -1",
    )(func)


def verbose_option(func: F) -> F:
    """Verbosity option."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)",
    )(func)


def log_file_option(func: F) -> F:
    """Log file option."""
    return click.option(
        "--log-file",
        type=click.Path(path_type=Path),
        default=None,
        help="Path for log file output",
    )(func)


def recommendation_options(func: F) -> F:
    """Apply all recommendation options to a command."""
    decorators = [
        focus_option,
        length_option,
        config_option,
        missing_length_option,
        verbose_option,
        log_file_option,
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func
