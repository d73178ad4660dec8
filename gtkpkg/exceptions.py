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


"""Exceptions specific to gtkpkg"""

from __future__ import annotations

import os
from typing import Iterable, Optional, Sequence, Union


class Error(Exception):
    """Base class for exceptions in gtkpkg.

    We can catch all gtkpkg exceptions with this.
    """

    exit_code = 1


class ConfigError(Error):
    """The manifest is missing required fields, or a value is malformed."""

    def __init__(self, msg: str):
        super().__init__(msg)


class ToolMissingError(Error):
    """Required external tools could not be found in PATH."""

    def __init__(self, tools: Iterable[str]):
        self.tools = list(tools)
        super().__init__(
            f"Required tools not found in PATH: {', '.join(self.tools)}"
        )


class FileOperationError(Error):
    """Reading, writing, copying or creating something failed."""

    def __init__(
        self,
        action: str,
        path: os.PathLike,
        error: Union[OSError, UnicodeError],
    ):
        self.action = action
        self.path = path
        self.error = error
        reason = getattr(error, "strerror", None) or error
        super().__init__(f'Failed to {action} "{path}": {reason}')


class ToolFailedError(Error):
    """An external tool was started but did not exit with 0."""

    def __init__(self, argv: Sequence[str], returncode: Optional[int]):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(
            f'"{" ".join(self.argv)}" failed with exit code {returncode}'
        )

    @property
    def exit_code(self) -> int:
        # pass the exit code of e.g. cargo through, 101 means the build failed
        if self.returncode is not None and self.returncode > 0:
            return self.returncode

        return 1
