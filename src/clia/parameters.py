# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from clia.options import HELP_INDENT


class ParameterSpec(BaseModel):
    """A required positional parameter.

    Parameters are bound by position, in the order they are declared,
    to the tokens following the options.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""

    def __init__(self, name: str, description: str = "", **data: Any) -> None:
        super().__init__(name=name, description=description, **data)

    @classmethod
    def new(cls, name: str, description: str) -> Self:
        return cls(name, description)

    def usage(self) -> str:
        return f"[<{self.name}>]"

    def help_line(self) -> str:
        return f"{HELP_INDENT}{self.name}:\n{HELP_INDENT * 2}{self.description}"
