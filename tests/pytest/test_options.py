# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from clia import (
    InvalidFlagShape,
    MissingValueName,
    OptionInfo,
    OptionKind,
    OptionSpec,
    ParameterSpec,
)


@pytest.mark.parametrize(
    "short_flag,long_flag",
    [
        ("-r", "--recursive"),
        ("-R", "--Recursive"),
        ("-2", "--format"),
        ("-#", "--x"),
        ("-l", "--look-for"),
        ("-r", "--Recurse-through-subfolders"),
    ],
)
def test_option_info_valid(short_flag: str, long_flag: str) -> None:
    info = OptionInfo(short_flag, long_flag, "Search through subdirectories")
    assert info.short_flag == short_flag
    assert info.long_flag == long_flag
    assert info.description == "Search through subdirectories"
    assert info.flags == (short_flag, long_flag)


@pytest.mark.parametrize(
    "short_flag,long_flag",
    [
        ("-", "--recursive"),
        ("r", "--recursive"),
        ("rr", "--recursive"),
        ("-recursive", "--recursive"),
        ("--", "--recursive"),
        ("- ", "--recursive"),
        ("-\t", "--recursive"),
        ("", "--recursive"),
        ("-r", "-recursive"),
        ("-r", "recursive"),
        ("-r", "--"),
        ("-r", "---recursive"),
        ("-r", "--recursive-"),
        ("-r", "--look--for"),
        ("-r", "--look for"),
        ("", ""),
    ],
)
def test_option_info_invalid(short_flag: str, long_flag: str) -> None:
    with pytest.raises(InvalidFlagShape) as e:
        OptionInfo(short_flag, long_flag, "Search through subdirectories")

    assert e.value.short_flag == short_flag
    assert e.value.long_flag == long_flag


def test_option_info_keywords_and_new() -> None:
    info = OptionInfo(short_flag="-r", long_flag="--recursive", description="desc")
    assert info == OptionInfo.new("-r", "--recursive", "desc")


def test_option_info_immutable() -> None:
    info = OptionInfo("-r", "--recursive", "desc")
    with pytest.raises(ValidationError):
        info.short_flag = "-x"  # type: ignore[misc]


def test_option_info_matches() -> None:
    info = OptionInfo("-r", "--recursive", "desc")
    assert info.matches("-r")
    assert info.matches("--recursive")
    assert not info.matches("-R")
    assert not info.matches("recursive")


def test_option_spec_constructors() -> None:
    info = OptionInfo("-f", "--filter", "Comma separated list of extensions")

    flag = OptionSpec.flag(info)
    assert flag.kind is OptionKind.FLAG
    assert flag.value_name is None
    assert flag.info == info

    flag_list = OptionSpec.flag_with_list(info, "EXTENSIONS")
    assert flag_list.kind is OptionKind.FLAG_WITH_LIST
    assert flag_list.value_name == "EXTENSIONS"

    flag_data = OptionSpec.flag_with_data(info, "FORMAT")
    assert flag_data.kind is OptionKind.FLAG_WITH_DATA
    assert flag_data.value_name == "FORMAT"
    assert flag_data.short_flag == "-f"
    assert flag_data.long_flag == "--filter"
    assert flag_data.description == "Comma separated list of extensions"


@pytest.mark.parametrize(
    "kind,value_name",
    [
        (OptionKind.FLAG, "VALUE"),
        (OptionKind.FLAG_WITH_LIST, None),
        (OptionKind.FLAG_WITH_DATA, None),
    ],
)
def test_option_spec_value_name_mismatch(kind: OptionKind, value_name: str | None) -> None:
    info = OptionInfo("-f", "--filter", "desc")
    with pytest.raises(MissingValueName):
        OptionSpec(info=info, kind=kind, value_name=value_name)


def test_help_line() -> None:
    flag_option = OptionSpec.flag(
        OptionInfo("-r", "--recursive", "Search through subdirectories recursively")
    )
    flag_list_option = OptionSpec.flag_with_list(
        OptionInfo("-l", "--look-for", "Comma separated list of strings to look for"), "LIST"
    )
    flag_data_option = OptionSpec.flag_with_data(
        OptionInfo(
            "-f",
            "--format",
            "Format to print output in, valid formats are: DEFAULT, BULLET, and NUMERIC",
        ),
        "FORMAT",
    )

    assert (
        flag_option.help_line()
        == "    -r, --recursive                   Search through subdirectories recursively"
    )
    assert (
        flag_list_option.help_line()
        == "    -l, --look-for <LIST>...          Comma separated list of strings to look for"
    )
    assert (
        flag_data_option.help_line()
        == "    -f, --format <FORMAT>             Format to print output in, valid formats are: DEFAULT, BULLET, and NUMERIC"
    )


def test_help_line_wraps_long_label() -> None:
    option = OptionSpec.flag_with_data(
        OptionInfo("-a", "--a-very-long-option-name", "desc"), "VALUE"
    )
    assert option.help_label() == "-a, --a-very-long-option-name <VALUE>"
    assert option.help_line() == f"    -a, --a-very-long-option-name <VALUE>\n{' ' * 38}desc"


def test_parameter_spec() -> None:
    parameter = ParameterSpec("PATH", "Path to search in")
    assert parameter.name == "PATH"
    assert parameter.description == "Path to search in"
    assert parameter == ParameterSpec.new("PATH", "Path to search in")
    assert parameter.usage() == "[<PATH>]"
    assert parameter.help_line() == "    PATH:\n        Path to search in"


def test_parameter_spec_empty_name() -> None:
    assert ParameterSpec("", "").name == ""
