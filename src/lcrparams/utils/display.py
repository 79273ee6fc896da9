"""Text output for lcrparams: report tables and program help.

Both conventions share one report scaffold; a ``ReportLayout`` supplies the
parts that differ (program name, column headings, how a row's parameters
and its NA line are written).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Union

from lcrparams.constants import MAX_TARGET_LENGTH, MIN_TARGET_LENGTH
from lcrparams.core.types import (
    Convention,
    FlpsParameters,
    Focus,
    InvalidReason,
    ParameterRow,
    SegParameters,
)

FOCUS_EXPLANATIONS: Dict[Focus, str] = {
    Focus.DIVERSE: (
        "A DIVERSE focus means that a typical or average level of length variance "
        "for the annotated regions is allowed."
    ),
    Focus.NARROW: "A NARROW focus means that length variance is minimized for the annotated regions.",
}

URLS = (
    "http://biology.mcgill.ca/faculty/harrison/flps.html",
    "https://github.com/pmharrison/flps",
)


def _flps_fields(params: FlpsParameters) -> str:
    return f"{params.small_m}\t{params.big_m}\t{params.threshold:.1e}"


def _seg_fields(params: SegParameters) -> str:
    return f"{params.window_length}\t{params.k1:.2f}\t{params.k2:.2f}"


def _flps_na(row: ParameterRow) -> str:
    return f"NA [ target length <{MIN_TARGET_LENGTH} OR >{row.upper_bound}, OR t>0.001]"


def _seg_na(row: ParameterRow) -> str:
    lower = 10 if row.reason is InvalidReason.LENGTH_BELOW_TEN else MIN_TARGET_LENGTH
    return f"NA [ target length <{lower} OR >{row.upper_bound}, OR K2>4.2]"


@dataclass(frozen=True)
class ReportLayout:
    """Convention-specific pieces of the report and help text."""

    program_name: str
    tool_name: str
    footer_subject: str
    columns: str
    underline: str
    format_fields: Callable[[Union[FlpsParameters, SegParameters]], str]
    format_na: Callable[[ParameterRow], str]


LAYOUTS: Dict[Convention, ReportLayout] = {
    Convention.FLPS: ReportLayout(
        program_name="fLPSparameters",
        tool_name="fLPS",
        footer_subject="the fLPS program",
        columns="m\tM\tt",
        underline="-\t-\t--",
        format_fields=_flps_fields,
        format_na=_flps_na,
    ),
    Convention.SEG: ReportLayout(
        program_name="SEGparameters",
        tool_name="SEG",
        footer_subject="the SEG algorithm",
        columns="L\tK1\tK2",
        underline="-\t--\t---",
        format_fields=_seg_fields,
        format_na=_seg_na,
    ),
}


def format_row(row: ParameterRow, layout: ReportLayout) -> str:
    """One table line, without trailing newline."""
    body = layout.format_fields(row.parameters) if row.valid else layout.format_na(row)
    return f"\t~{row.coverage}%\t\t\t{body}"


def render_report(
    rows: Iterable[ParameterRow],
    target_length: int,
    focus: Focus,
    layout: ReportLayout,
) -> str:
    """Full stdout report: header, table rows in the given order, footer."""
    lines: List[str] = [
        "",
        f"{layout.program_name} has chosen the following parameters for "
        f"target length {target_length} and focus {Focus(focus).value}:",
        "",
        FOCUS_EXPLANATIONS[Focus(focus)],
        f"\tEstimated_coverage\t{layout.columns}:",
        f"\t------------------\t{layout.underline}",
    ]
    lines.extend(format_row(row, layout) for row in rows)
    lines.extend(
        [
            "",
            "",
            "Coverage is the proportion of protein sequences expected to be labelled "
            "by these parameter sets.",
            "",
            "It is recommended to use all of the parameters progressively in separate "
            f"runs of {layout.footer_subject},",
            " and compare the outputs.",
            "If the calculated parameters are listed as 'NA', it means that at least "
            "one of them was out of bounds.",
            "",
            "",
        ]
    )
    return "\n".join(lines)


def help_text(layout: ReportLayout) -> str:
    """Program help, written to stderr by ``-h`` and on usage errors."""
    title = (
        "Parameter choosing program for finding low-complexity or compositionally-biased "
        f"regions using {layout.tool_name} in proteins of a given target length"
    )
    return "\n".join(
        [
            "",
            title,
            "=" * len(title),
            "",
            "The program options are:",
            " -h   prints help",
            " -f   focus of the parameters",
            "      values: 'diverse' or 'narrow'; ",
            "      diverse = more diversity or variance of length is allowed (DEFAULT)",
            "      narrow  = narrowest focus on a particular target length",
            " -l   target length.",
            f"      This must be in the range {MIN_TARGET_LENGTH}-{MAX_TARGET_LENGTH} inclusive.",
            "",
            "Additional options:",
            " -c, --config PATH            configuration file (YAML)",
            " --missing-length [default|sentinel]",
            "                              what to do when -l is not given:",
            "                              'default' uses the default target length,",
            "                              'sentinel' computes on the unset value -1 (all rows NA)",
            " -v, --verbose                increase log verbosity (-v INFO, -vv DEBUG)",
            " --log-file PATH              also write the log to this file",
            "",
            " The program outputs lists of suitable parameters for a given target length "
            "for low-complexity or compositionally-biased regions.",
            " There are sets of parameters output for estimated protein coverage of "
            "approximately 2%, 5%, 10%, 25%, and 40%.",
            " The protein coverage is simply the proportion of proteins that are expected "
            "to be annotated or 'covered' when you choose",
            " a certain set of parameters.",
            " For some combinations of coverage level and target lengths, sets of "
            "parameters cannot be output because they are out of bounds.",
            " This is an example of running the program:",
            f"        {layout.program_name} -f diverse -l 15 > parameters.out",
            "",
            " Here, diverse focus is specified with a target region length of 15 residues.",
            "",
            "CITATION:",
            " Harrison, PM. 'Optimal strategies for discovery of low-complexity or "
            "compositionally-biased regions',",
            " submitted. ",
            "URLs:",
            f" {URLS[0]}",
            " OR ",
            URLS[1],
            "",
        ]
    )
