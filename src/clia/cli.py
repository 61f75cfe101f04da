# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Example program showing how clia is meant to be used.

It declares the options and parameters of a small line counting tool,
parses the command line and prints what was found.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import exitcode

from clia.config import Settings, load_config_file
from clia.exceptions import ParseFailure
from clia.log import get_logger, setup_logging
from clia.options import FLAG_PREFIX, OptionInfo, OptionSpec
from clia.parameters import ParameterSpec
from clia.parser import Parser, build_flag_table

logger = get_logger(__name__)

PROG = "clia-demo"
AUTHOR = "clia developers"
TAGLINE = "Just here as an example of things you can do"

HELP_FLAGS = ("-h", "--help")


def declare_options() -> list[OptionSpec]:
    return [
        OptionSpec.flag_with_list(
            OptionInfo(
                "-f",
                "--filter",
                "Comma separated list of extensions, will only count lines of files with these extensions",
            ),
            "EXTENSIONS",
        ),
        OptionSpec.flag_with_data(
            OptionInfo(
                "-F",
                "--format",
                "Format the output in a list, valid formats are: DEFAULT, BULLET, MARKDOWN, and NUMERIC",
            ),
            "FORMAT",
        ),
        OptionSpec.flag(OptionInfo("-r", "--recursive", "Search through subdirectories")),
        OptionSpec.flag(OptionInfo(*HELP_FLAGS, "Prints help information")),
    ]


def declare_parameters() -> list[ParameterSpec]:
    return [
        ParameterSpec("PATH", "Path to file/folder to search"),
        ParameterSpec(
            "QUERY",
            'String to search for, all the stuff after the path wrap in "\'s if it contains spaces',
        ),
    ]


def help_requested(argv: Sequence[str], options: Sequence[OptionSpec]) -> bool:
    """Checks the leading options for a help flag without a full parse.

    The tokens are walked like the parser walks them: list and data
    options consume the following token as their value, so a help flag
    in value position does not count. Undeclared flags are stepped over
    to let ``-x -h`` still show the help.
    """
    table = build_flag_table(options)
    pos = 1
    while pos < len(argv) and argv[pos].startswith(FLAG_PREFIX):
        token = argv[pos]
        if token in HELP_FLAGS:
            return True
        spec = table.get(token)
        pos += 2 if spec is not None and spec.kind.takes_value else 1
    return False


def load_settings() -> Settings:
    # ValueError covers TOML syntax errors, pydantic validation errors and a bad $CLIA_LOGLEVEL.
    try:
        config, config_path = load_config_file()
        settings = Settings.from_config(config)
        setup_logging(settings.loglevel, settings.color)
    except (FileNotFoundError, ValueError) as e:
        print(f"invalid config: {e}", file=sys.stderr)
        sys.exit(exitcode.CONFIG)

    if config_path is not None:
        logger.debug(f"loaded config: {config_path}")
    return settings


def main(argv: Sequence[str] | None = None) -> None:
    argv = sys.argv if argv is None else argv
    settings = load_settings()

    prog = Path(argv[0]).name if len(argv) > 0 else PROG
    options = declare_options()
    parameters = declare_parameters()
    help_text = Parser.help(
        prog,
        settings.help.author or AUTHOR,
        settings.help.tagline or TAGLINE,
        options,
        parameters,
    )

    if help_requested(argv, options):
        print(help_text)
        sys.exit(exitcode.OK)

    try:
        result = Parser(options, parameters).parse(argv)
    except ParseFailure as e:
        print(help_text, file=sys.stderr)
        print(f"\nerror: {e}", file=sys.stderr)
        sys.exit(exitcode.USAGE)

    for option in result.options:
        print(f"option: {option}")
    for parameter in result.parameters:
        print(f"parameter: {parameter}")


if __name__ == "__main__":
    main()
