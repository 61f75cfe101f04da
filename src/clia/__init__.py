# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Command Line Interface Arguments.

This is the `clia` package: a small library which matches a flat list of
command line tokens against declared options and positional parameters,
and renders a help message from the same declarations.

The public interface exposed by this package is the `Parser` class, the
one-shot `parse()` function, the declaration types and the errors.
"""

from clia.exceptions import (
    ArgumentsError,
    DeclarationError,
    DuplicateFlagDeclaration,
    InvalidFlagShape,
    MissingOptionValue,
    MissingParameter,
    MissingValueName,
    ParseFailure,
    UnexpectedExtraArgument,
    UnrecognizedOption,
)
from clia.help import render
from clia.options import OptionInfo, OptionKind, OptionSpec
from clia.parameters import ParameterSpec
from clia.parser import Parser, parse
from clia.results import FoundOption, FoundParameter, ParseResult

# Public Re-Exports
__all__ = (
    "ArgumentsError",
    "DeclarationError",
    "DuplicateFlagDeclaration",
    "FoundOption",
    "FoundParameter",
    "InvalidFlagShape",
    "MissingOptionValue",
    "MissingParameter",
    "MissingValueName",
    "OptionInfo",
    "OptionKind",
    "OptionSpec",
    "ParameterSpec",
    "ParseFailure",
    "ParseResult",
    "Parser",
    "UnexpectedExtraArgument",
    "UnrecognizedOption",
    "parse",
    "render",
)
