"""Command line interface for lcrparams."""

from lcrparams.cli.main import cli, flps_main, main, seg_main

__all__ = ["cli", "main", "flps_main", "seg_main"]
