# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass, field

from clia.options import OptionInfo, OptionKind, OptionSpec

OptionValue = tuple[str, ...] | str | None


@dataclass(frozen=True)
class FoundOption:
    """An option that was given on the command line.

    ``value`` is ``None`` for plain flags, a tuple of strings for flags
    with a list and a string for flags with data.
    """

    spec: OptionSpec
    value: OptionValue = None

    @property
    def info(self) -> OptionInfo:
        return self.spec.info

    @property
    def kind(self) -> OptionKind:
        return self.spec.kind

    @property
    def present(self) -> bool:
        return True

    @property
    def list(self) -> tuple[str, ...] | None:
        return self.value if isinstance(self.value, tuple) else None

    @property
    def data(self) -> str | None:
        return self.value if isinstance(self.value, str) else None

    def matches(self, flag: str) -> bool:
        return self.spec.matches(flag)

    def __str__(self) -> str:
        match self.value:
            case None:
                return self.info.long_flag
            case str():
                return f"{self.info.long_flag} {self.value}"
            case _:
                return f"{self.info.long_flag} {','.join(self.value)}"


@dataclass(frozen=True)
class FoundParameter:
    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass(frozen=True)
class ParseResult:
    options: tuple[FoundOption, ...] = field(default_factory=tuple)
    parameters: tuple[FoundParameter, ...] = field(default_factory=tuple)

    def get_option(self, flag: str) -> FoundOption | None:
        """Looks up a found option by its short or long flag."""
        for option in self.options:
            if option.matches(flag):
                return option
        return None

    def has_option(self, flag: str) -> bool:
        return self.get_option(flag) is not None

    def get_parameter(self, name: str) -> str | None:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter.value
        return None

    def parameter_values(self) -> dict[str, str]:
        return {p.name: p.value for p in self.parameters}
