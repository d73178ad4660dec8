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


"""File operations that turn OSErrors into FileOperationErrors."""

import os
import shutil

from gtkpkg.exceptions import FileOperationError
from gtkpkg.logging.logger import logger


class PathUtils:
    @staticmethod
    def mkdir(path: str) -> None:
        """Create a folder and all its parents."""
        if path == "" or path is None:
            return

        if os.path.isdir(path):
            return

        logger.debug('Creating dir "%s"', path)

        try:
            os.makedirs(path, exist_ok=True)
        except OSError as error:
            raise FileOperationError("create directory", path, error) from error

    @staticmethod
    def copy(source: str, destination: str) -> None:
        """Copy the contents of a file, creating the destination dir if needed."""
        PathUtils.mkdir(os.path.dirname(destination))
        logger.debug('Copying "%s" to "%s"', source, destination)

        try:
            shutil.copyfile(source, destination)
        except OSError as error:
            raise FileOperationError("copy", source, error) from error

    @staticmethod
    def read_text(path: str) -> str:
        try:
            with open(path, "r", encoding="utf-8") as file:
                return file.read()
        except OSError as error:
            raise FileOperationError("read", path, error) from error
        except UnicodeDecodeError as error:
            raise FileOperationError("decode", path, error) from error

    @staticmethod
    def write_text(path: str, contents: str) -> None:
        PathUtils.mkdir(os.path.dirname(path))
        logger.debug('Writing "%s"', path)

        try:
            with open(path, "w", encoding="utf-8") as file:
                file.write(contents)
        except OSError as error:
            raise FileOperationError("write", path, error) from error

    @staticmethod
    def remove_if_exists(path: str) -> bool:
        """Remove a file. Returns False if there was nothing to remove."""
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as error:
            raise FileOperationError("remove", path, error) from error

        logger.debug('Removed "%s"', path)
        return True
