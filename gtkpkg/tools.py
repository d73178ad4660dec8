#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# gtkpkg - Build and install GTK applications written in Rust
# Copyright (C) 2025 gtkpkg contributors
#
# This file is part of gtkpkg.
#
# gtkpkg is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# gtkpkg is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with gtkpkg.  If not, see <https://www.gnu.org/licenses/>.


"""Running external tools like msgfmt, glib-compile-resources and cargo.

Every step talks to external programs only through a ToolRunner, so that tests can
replace the SubprocessRunner with a fake.
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from gtkpkg.exceptions import ToolFailedError, ToolMissingError
from gtkpkg.logging.logger import logger

MSGFMT = "msgfmt"
GLIB_COMPILE_RESOURCES = "glib-compile-resources"
GLIB_COMPILE_SCHEMAS = "glib-compile-schemas"
CARGO = "cargo"

BUILD_TOOLS = (MSGFMT, GLIB_COMPILE_RESOURCES, GLIB_COMPILE_SCHEMAS, CARGO)
NEW_PROJECT_TOOLS = (CARGO,)


@dataclass(frozen=True)
class Command:
    name: str
    args: Tuple[str, ...] = ()
    cwd: Optional[str] = None
    # added to the environment of the child process only
    env: Dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> List[str]:
        return [self.name, *self.args]

    def __str__(self) -> str:
        return " ".join(shlex.quote(arg) for arg in self.argv)


class ToolRunner(Protocol):
    def run(self, command: Command, check: bool = True) -> int:
        """Run the command until it exits and return its exit code.

        Raises ToolFailedError for non-zero exit codes if check is True.
        """
        ...


class SubprocessRunner:
    """Runs commands for real, blocking until they finish."""

    def run(self, command: Command, check: bool = True) -> int:
        logger.debug("Running %s", command)

        # Fix the stdout ordering in case the output is piped somewhere
        sys.stdout.flush()
        sys.stderr.flush()

        env = None
        if command.env:
            env = dict(os.environ, **command.env)

        try:
            process = subprocess.run(command.argv, cwd=command.cwd, env=env)
        except FileNotFoundError as error:
            # not in PATH (anymore), or the cwd doesn't exist
            logger.debug(error)
            raise ToolFailedError(command.argv, None) from error

        if check and process.returncode != 0:
            raise ToolFailedError(command.argv, process.returncode)

        return process.returncode


def check_tools(tools: Sequence[str]) -> None:
    """Make sure all tools exist before anything is done."""
    missing = [tool for tool in tools if shutil.which(tool) is None]
    if len(missing) > 0:
        raise ToolMissingError(missing)

    logger.debug("Found %s", ", ".join(tools))
