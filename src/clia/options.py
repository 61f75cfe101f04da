# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Declarations of command line options.

An option is identified by a short flag (``-r``) and a long flag
(``--recursive``); both spell the same option. Options come in three
kinds:

* plain flags, which are either present or absent,
* flags with a list, which consume the next token and split it on ``,``,
* flags with data, which consume the next token verbatim.
"""

from __future__ import annotations

import re
from enum import Enum, unique
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, model_validator

from clia.exceptions import InvalidFlagShape, MissingValueName

FLAG_PREFIX = "-"
LIST_SEPARATOR = ","

# Column where descriptions start in a single help line.
DESCRIPTION_COLUMN = 38
HELP_INDENT = "    "

# A single character that is neither a dash nor whitespace.
# One character that is neither a dash nor whitespace.
_SHORT_FLAG = re.compile(r"-[^-\s]")
# Words separated by single dashes, e.g. --look-for.
_LONG_FLAG = re.compile(r"--[^-\s]+(?:-[^-\s]+)*")


def is_short_flag(flag: str) -> bool:
    return _SHORT_FLAG.fullmatch(flag) is not None


def is_long_flag(flag: str) -> bool:
    return _LONG_FLAG.fullmatch(flag) is not None


class OptionInfo(BaseModel):
    """Identity of one option: its short flag, long flag and description.

    The flag shapes are checked on construction; a malformed flag raises
    :class:`clia.exceptions.InvalidFlagShape`.
    """

    model_config = ConfigDict(frozen=True)

    short_flag: str
    long_flag: str
    description: str = ""

    def __init__(
        self, short_flag: str, long_flag: str, description: str = "", **data: Any
    ) -> None:
        super().__init__(
            short_flag=short_flag, long_flag=long_flag, description=description, **data
        )

    @classmethod
    def new(cls, short_flag: str, long_flag: str, description: str) -> Self:
        return cls(short_flag, long_flag, description)

    @model_validator(mode="after")
    def _check_flag_shape(self) -> Self:
        if not is_short_flag(self.short_flag) or not is_long_flag(self.long_flag):
            raise InvalidFlagShape(self.short_flag, self.long_flag)
        return self

    @property
    def flags(self) -> tuple[str, str]:
        return self.short_flag, self.long_flag

    def matches(self, token: str) -> bool:
        """Both the short and the long flag are accepted as aliases."""
        return token in self.flags

    def __str__(self) -> str:
        return f"{self.short_flag}, {self.long_flag}"


@unique
class OptionKind(Enum):
    #: ``-r``
    FLAG = "flag"
    #: ``-f cpp,py,rs``
    FLAG_WITH_LIST = "flag_with_list"
    #: ``-F NUMERIC``
    FLAG_WITH_DATA = "flag_with_data"

    @property
    def takes_value(self) -> bool:
        return self is not OptionKind.FLAG


class OptionSpec(BaseModel):
    """A declared option: its identity plus the kind of value it consumes.

    ``value_name`` is the placeholder shown in help messages and is
    required for the list and data kinds only.
    """

    model_config = ConfigDict(frozen=True)

    info: OptionInfo
    kind: OptionKind = OptionKind.FLAG
    value_name: str | None = None

    @model_validator(mode="after")
    def _check_value_name(self) -> Self:
        if self.kind.takes_value != (self.value_name is not None):
            raise MissingValueName(self.info.long_flag)
        return self

    @classmethod
    def flag(cls, info: OptionInfo) -> Self:
        return cls(info=info, kind=OptionKind.FLAG)

    @classmethod
    def flag_with_list(cls, info: OptionInfo, value_name: str) -> Self:
        return cls(info=info, kind=OptionKind.FLAG_WITH_LIST, value_name=value_name)

    @classmethod
    def flag_with_data(cls, info: OptionInfo, value_name: str) -> Self:
        return cls(info=info, kind=OptionKind.FLAG_WITH_DATA, value_name=value_name)

    @property
    def short_flag(self) -> str:
        return self.info.short_flag

    @property
    def long_flag(self) -> str:
        return self.info.long_flag

    @property
    def description(self) -> str:
        return self.info.description

    def matches(self, token: str) -> bool:
        return self.info.matches(token)

    def placeholder(self) -> str:
        match self.kind:
            case OptionKind.FLAG:
                return ""
            case OptionKind.FLAG_WITH_LIST:
                return f"<{self.value_name}>..."
            case OptionKind.FLAG_WITH_DATA:
                return f"<{self.value_name}>"

    def help_label(self) -> str:
        """The flag part of a help line, e.g. ``-f, --filter <EXTENSIONS>...``."""
        label = str(self.info)
        if (placeholder := self.placeholder()) != "":
            label += f" {placeholder}"
        return label

    def help_line(self, column: int = DESCRIPTION_COLUMN) -> str:
        """Formats one line of the OPTIONS section.

        The description starts at ``column``. If the label does not fit,
        the description moves to the next line at the same column.
        """
        head = f"{HELP_INDENT}{self.help_label()}"
        if len(head) + 2 > column:
            return f"{head}\n{' ' * column}{self.description}"
        return f"{head.ljust(column)}{self.description}"
