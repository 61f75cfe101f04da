# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

# ****************
# * Base classes *
# ****************


class ArgumentsError(Exception):
    def __init__(self, message: str | None = None):
        self.message = message

        super().__init__(message)

    def _message_core(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        message = self._message_core()

        if self.message is not None:
            message = f"{message}; {self.message}"

        return message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({repr(str(self))})"


class DeclarationError(ArgumentsError):
    """The option or parameter table handed to the library is malformed.

    These are programming errors of the caller, not of the end user.
    """


class ParseFailure(ArgumentsError):
    """The command line tokens do not satisfy the declared options and parameters."""


# ***********************
# * Declaration errors *
# ***********************


class InvalidFlagShape(DeclarationError):
    def __init__(self, short_flag: str, long_flag: str, message: str | None = None):
        self.short_flag = short_flag
        self.long_flag = long_flag

        super().__init__(message)

    def _message_core(self) -> str:
        return (
            f"short flag {self.short_flag!r} and/or long flag {self.long_flag!r} "
            "improperly formatted"
        )


class DuplicateFlagDeclaration(DeclarationError):
    def __init__(self, flag: str, message: str | None = None):
        self.flag = flag

        super().__init__(message)

    def _message_core(self) -> str:
        return f"flag {self.flag} is declared by more than one option"


class MissingValueName(DeclarationError):
    def __init__(self, flag: str, message: str | None = None):
        self.flag = flag

        super().__init__(message)

    def _message_core(self) -> str:
        return f"value name of option {self.flag} does not match its kind"


# ******************
# * Parse failures *
# ******************


class UnrecognizedOption(ParseFailure):
    def __init__(self, token: str, message: str | None = None):
        self.token = token

        super().__init__(message)

    def _message_core(self) -> str:
        return f"unrecognized option: {self.token}"


class MissingOptionValue(ParseFailure):
    def __init__(self, flag: str, message: str | None = None):
        self.flag = flag

        super().__init__(message)

    def _message_core(self) -> str:
        return f"missing value for option: {self.flag}"


class MissingParameter(ParseFailure):
    def __init__(self, name: str, message: str | None = None):
        self.name = name

        super().__init__(message)

    def _message_core(self) -> str:
        return f"missing parameter: {self.name}"


class UnexpectedExtraArgument(ParseFailure):
    def __init__(self, token: str, message: str | None = None):
        self.token = token

        super().__init__(message)

    def _message_core(self) -> str:
        return f"unexpected extra argument: {self.token}"
