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


"""Exceptions that are thrown when values of a new project are incorrect."""

# pydantic only catches ValueError, TypeError, and AssertionError

from __future__ import annotations

from pydantic import ValidationError


class AppIdFormatError(ValueError):
    def __init__(self, app_id: str):
        super().__init__(
            f'The application id "{app_id}" is invalid. It needs to consist of '
            "exactly three segments separated by dots, for example "
            '"io.github.Example"'
        )


class BinaryNameError(ValueError):
    def __init__(self, binary: str):
        super().__init__(
            f'"{binary}" can not be used as the name of a binary. Use a plain '
            "name without slashes, for example \"example\""
        )


def format_validation_error(error: ValidationError) -> str:
    """Turn all messages of a pydantic ValidationError into one line each."""
    lines = []
    for details in error.errors():
        cause = (details.get("ctx") or {}).get("error")
        lines.append(str(cause) if cause is not None else details["msg"])

    return "\n".join(lines)
