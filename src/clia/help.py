# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Rendering of help messages.

The layout is::

    <program name>
    <author>

    <tagline>

    USAGE:
        <program name> [OPTIONS]... [<PARAM1>] [<PARAM2>]

    OPTIONS:
        -f, --filter <EXTENSIONS>...      <description>
        -r, --recursive                   <description>

    PARAMETER ARGUMENTS:
        PARAM1:
            <description>

Section headers are singular when exactly one entry is declared and an
empty section is left out. The help text is returned, never printed.
"""

from __future__ import annotations

from collections.abc import Sequence

from clia.options import DESCRIPTION_COLUMN, HELP_INDENT, OptionSpec
from clia.parameters import ParameterSpec


def _section_title(singular: str, count: int) -> str:
    return f"{singular}:" if count == 1 else f"{singular}S:"


def description_column(options: Sequence[OptionSpec]) -> int:
    """Column at which option descriptions start.

    Wide enough for the widest option label plus two spaces, but never
    left of the default column.
    """
    widest = max((len(option.help_label()) for option in options), default=0)
    return max(DESCRIPTION_COLUMN, len(HELP_INDENT) + widest + 2)


def usage(program_name: str, parameters: Sequence[ParameterSpec]) -> str:
    return " ".join([program_name, "[OPTIONS]...", *(p.usage() for p in parameters)])


def render(
    program_name: str,
    author: str,
    tagline: str,
    options: Sequence[OptionSpec],
    parameters: Sequence[ParameterSpec],
) -> str:
    lines = [
        program_name,
        author,
        "",
        tagline,
        "",
        "USAGE:",
        f"{HELP_INDENT}{usage(program_name, parameters)}",
    ]

    if len(options) > 0:
        column = description_column(options)
        lines += ["", _section_title("OPTION", len(options))]
        lines += [option.help_line(column) for option in options]

    if len(parameters) > 0:
        lines += ["", _section_title("PARAMETER ARGUMENT", len(parameters))]
        lines += [parameter.help_line() for parameter in parameters]

    return "\n".join(lines)
