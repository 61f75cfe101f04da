# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

"""Configuration files for programs built on clia.

A ``clia.toml`` is searched for in this order:

1. the file named by ``$CLIA_CONFIG`` (which must exist),
2. the current working directory,
3. the root of the enclosing git repository,
4. the user config directory (e.g. ``~/.config/clia``).

Settings live under the ``[clia]`` table::

    [clia]
    verbosity = 1
    color = "auto"

    [clia.help]
    author = "Jane Doe"
    tagline = "Counts lines"
"""

import os
import subprocess
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_path
from pydantic import BaseModel, ConfigDict, Field

from clia.log import ColorMode, Loglevel

CONFIG_FILENAME = "clia.toml"
CONFIG_ENV = "CLIA_CONFIG"


class Config(dict[str, Any]):
    def get_value(self, key: str, default: Any | None = None) -> Any | None:
        """Looks up a dotted key such as ``clia.help.author``."""
        subdict: dict[str, Any] | None = self
        val: Any | None = None

        for part in key.split("."):
            if subdict is None:
                return default

            val = subdict.get(part)
            subdict = val if isinstance(val, dict) else None

        return val if val is not None else default


class HelpSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    author: str | None = None
    tagline: str | None = None


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    verbosity: int | None = Field(default=None, ge=0, le=2)
    color: ColorMode = ColorMode.AUTO
    help: HelpSettings = Field(default_factory=HelpSettings)

    @classmethod
    def from_config(cls, config: Config) -> "Settings":
        """Validates the ``[clia]`` table; raises pydantic's ValidationError."""
        return cls.model_validate(config.get_value("clia", {}))

    @property
    def loglevel(self) -> Loglevel | None:
        """None defers to $CLIA_LOGLEVEL, see :func:`clia.log.setup_logging`."""
        if self.verbosity is None:
            return None
        return Loglevel.from_verbosity(self.verbosity)


def get_git_root() -> Path | None:
    try:
        p = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            check=True,
        )
    except (FileNotFoundError, subprocess.CalledProcessError):
        return None
    return Path(p.stdout.decode().strip())


def get_config_dirs() -> list[Path]:
    dirs = [Path.cwd()]
    if (git_root := get_git_root()) is not None:
        dirs.append(git_root)
    dirs.append(user_config_path("clia"))
    return dirs


def search_config(
    filename: Path | None = None,
    extra_paths: list[Path] | None = None,
) -> Path | None:
    if (s := os.getenv(CONFIG_ENV)) is not None:
        if (path := Path(s)).exists():
            return path
        raise FileNotFoundError(s)

    name = filename if filename is not None else Path(CONFIG_FILENAME)
    for dir_ in get_config_dirs() + (extra_paths or []):
        if (path := dir_.joinpath(name)).exists():
            return path

    return None


def load_config_file(
    filename: Path | None = None,
    extra_paths: list[Path] | None = None,
) -> tuple[Config, Path | None]:
    if (path := search_config(filename, extra_paths)) is not None:
        return Config(tomllib.loads(path.read_text())), path
    return Config(), None
