"""Auxiliary lcrparams subcommands."""
