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

from __future__ import annotations

import os
import shutil
from typing import List, Optional, Tuple

from gtkpkg.exceptions import ToolFailedError
from gtkpkg.tools import (
    CARGO,
    GLIB_COMPILE_RESOURCES,
    GLIB_COMPILE_SCHEMAS,
    MSGFMT,
    Command,
)

CARGO_NEW_MANIFEST = """[package]
name = "{name}"
version = "0.1.0"
edition = "2021"

[dependencies]
"""


def _arg_after(command: Command, flag: str) -> str:
    return command.args[command.args.index(flag) + 1]


def _write(path: str, contents: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as file:
        file.write(contents)


class FakeToolRunner:
    """Records commands instead of running them, and fakes what the tools create.

    Call `fail` to make a tool exit with an error code.
    """

    def __init__(self):
        self.commands: List[Command] = []
        self._failures: List[Tuple[str, Optional[str], int]] = []
        self.exit_code_of_binaries = 0

    def fail(self, name: str, argument: Optional[str] = None, returncode: int = 1):
        """Let the tool fail, optionally only if an argument contains a string."""
        self._failures.append((name, argument, returncode))

    def names(self) -> List[str]:
        return [command.name for command in self.commands]

    def find(self, name: str) -> List[Command]:
        return [command for command in self.commands if command.name == name]

    def _get_returncode(self, command: Command) -> int:
        for name, argument, returncode in self._failures:
            if name != command.name:
                continue

            if argument is None or any(argument in arg for arg in command.args):
                return returncode

        if os.path.isabs(command.name):
            return self.exit_code_of_binaries

        return 0

    def run(self, command: Command, check: bool = True) -> int:
        self.commands.append(command)

        returncode = self._get_returncode(command)
        if returncode != 0:
            if check:
                raise ToolFailedError(command.argv, returncode)

            return returncode

        self._simulate(command)
        return returncode

    def _simulate(self, command: Command) -> None:
        if command.name == MSGFMT:
            target = _arg_after(command, "-o")
            if "--template" in command.args:
                # pretend that nothing was translated
                shutil.copyfile(_arg_after(command, "--template"), target)
            else:
                _write(target, "mo")

        elif command.name == GLIB_COMPILE_RESOURCES:
            _write(_arg_after(command, "--target"), "gresource")

        elif command.name == GLIB_COMPILE_SCHEMAS:
            _write(os.path.join(command.args[0], "gschemas.compiled"), "compiled")

        elif command.name == CARGO and command.args[0] == "new":
            name = command.args[1]
            root = os.path.join(command.cwd, name)
            _write(
                os.path.join(root, "Cargo.toml"), CARGO_NEW_MANIFEST.format(name=name)
            )
            _write(os.path.join(root, "src", "main.rs"), 'fn main() {\n    println!("Hello, world!");\n}\n')

        elif command.name == CARGO and command.args[0] == "install":
            root = _arg_after(command, "--root")
            _write(os.path.join(root, "bin", "app"), "binary")
            _write(os.path.join(root, ".crates.toml"), "")
            _write(os.path.join(root, ".crates2.json"), "{}")
