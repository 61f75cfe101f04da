# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Command line matching and validation.

The parser walks the tokens once, from left to right:

1. The first token is the program name and is skipped.
2. As long as the current token starts with ``-`` it is matched against
   the declared options. Flags with a list or data consume the following
   token as their value.
3. The first token not starting with ``-`` ends option scanning for good.
   The remaining tokens are bound, in order, to the declared parameters.

There must be exactly as many remaining tokens as declared parameters.
The first violation raises a :class:`clia.exceptions.ParseFailure`.
"""

from __future__ import annotations

from collections.abc import Sequence

from clia.exceptions import (
    DuplicateFlagDeclaration,
    MissingOptionValue,
    MissingParameter,
    UnexpectedExtraArgument,
    UnrecognizedOption,
)
from clia.help import render
from clia.log import get_logger
from clia.options import FLAG_PREFIX, LIST_SEPARATOR, OptionKind, OptionSpec
from clia.parameters import ParameterSpec
from clia.results import FoundOption, FoundParameter, OptionValue, ParseResult

logger = get_logger(__name__)


def build_flag_table(options: Sequence[OptionSpec]) -> dict[str, OptionSpec]:
    """Maps every short and long flag to its declaring option.

    Raises :class:`DuplicateFlagDeclaration` if two options share a flag.
    """
    table: dict[str, OptionSpec] = {}
    for option in options:
        for flag in option.info.flags:
            if flag in table:
                raise DuplicateFlagDeclaration(flag)
            table[flag] = option
    return table


class Parser:
    """Parses command line tokens against a fixed declaration table.

    The table is checked once on construction; :meth:`parse` can then be
    called any number of times and does not modify the parser.
    """

    def __init__(
        self,
        options: Sequence[OptionSpec],
        parameters: Sequence[ParameterSpec],
    ) -> None:
        self.options = tuple(options)
        self.parameters = tuple(parameters)
        self._flags = build_flag_table(self.options)

    def _read_value(self, flag: str, tokens: Sequence[str], pos: int) -> str:
        if pos >= len(tokens):
            raise MissingOptionValue(flag)
        return tokens[pos]

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        """Matches ``tokens`` against the declared options and parameters.

        :param tokens: The invocation tokens; ``tokens[0]`` is the program name.
        :return: The options and parameters found, in the order they were bound.
        """
        found: dict[OptionSpec, FoundOption] = {}
        pos = 1

        while pos < len(tokens) and tokens[pos].startswith(FLAG_PREFIX):
            token = tokens[pos]
            spec = self._flags.get(token)
            if spec is None:
                raise UnrecognizedOption(token)

            value: OptionValue = None
            match spec.kind:
                case OptionKind.FLAG:
                    pos += 1
                case OptionKind.FLAG_WITH_LIST:
                    raw = self._read_value(token, tokens, pos + 1)
                    value = tuple(raw.split(LIST_SEPARATOR))
                    pos += 2
                case OptionKind.FLAG_WITH_DATA:
                    value = self._read_value(token, tokens, pos + 1)
                    pos += 2

            if spec in found:
                logger.debug(f"{token} given more than once; last value wins")
            logger.trace(f"matched option {token}: {value!r}")

            # Dicts keep the position of the first insertion on update.
            found[spec] = FoundOption(spec, value)

        parameters: list[FoundParameter] = []
        for parameter in self.parameters:
            if pos >= len(tokens):
                raise MissingParameter(parameter.name)
            logger.trace(f"bound parameter {parameter.name}: {tokens[pos]!r}")
            parameters.append(FoundParameter(parameter.name, tokens[pos]))
            pos += 1

        if pos < len(tokens):
            raise UnexpectedExtraArgument(tokens[pos])

        return ParseResult(options=tuple(found.values()), parameters=tuple(parameters))

    @staticmethod
    def help(
        program_name: str,
        author: str,
        tagline: str,
        options: Sequence[OptionSpec],
        parameters: Sequence[ParameterSpec],
    ) -> str:
        return render(program_name, author, tagline, options, parameters)


def parse(
    tokens: Sequence[str],
    options: Sequence[OptionSpec],
    parameters: Sequence[ParameterSpec],
) -> ParseResult:
    return Parser(options, parameters).parse(tokens)
