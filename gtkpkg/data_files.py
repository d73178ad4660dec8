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


"""Find data files and fill the templates among them."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from gtkpkg.configs.paths import PathUtils
from gtkpkg.exceptions import FileOperationError
from gtkpkg.logging.logger import logger

TEMPLATE_SUFFIX = ".in"


class DataFileKind(str, enum.Enum):
    TEMPLATE = "template"
    DESKTOP = "desktop"
    APPDATA = "appdata"
    METAINFO = "metainfo"
    GSCHEMA = "gschema"
    GRESOURCE = "gresource"
    PO = "po"
    PLAIN = "plain"


# The first matching suffix wins, so foo.desktop.in is a template.
SUFFIXES = (
    (TEMPLATE_SUFFIX, DataFileKind.TEMPLATE),
    (".desktop", DataFileKind.DESKTOP),
    (".appdata.xml", DataFileKind.APPDATA),
    (".metainfo.xml", DataFileKind.METAINFO),
    (".gschema.xml", DataFileKind.GSCHEMA),
    (".gresource.xml", DataFileKind.GRESOURCE),
    (".po", DataFileKind.PO),
)


@dataclass(frozen=True)
class DataFile:
    path: str
    kind: DataFileKind

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def stem(self) -> str:
        """The name without the suffix that made it this kind of file.

        For example "de" for "po/de.po", or "foo.desktop" for "data/foo.desktop.in".
        """
        for suffix, kind in SUFFIXES:
            if kind == self.kind:
                return self.name[: -len(suffix)]

        return self.name


def get_kind(filename: str) -> DataFileKind:
    for suffix, kind in SUFFIXES:
        if filename.endswith(suffix) and len(filename) > len(suffix):
            return kind

    return DataFileKind.PLAIN


def scan_directory(
    path: str,
    kinds: Optional[Iterable[DataFileKind]] = None,
) -> List[DataFile]:
    """List the regular files directly within path.

    Subdirectories are not entered. A missing directory contains no files.

    Parameters
    ----------
    path
        The directory to scan
    kinds
        If set, only files of those kinds are returned
    """
    if not os.path.isdir(path):
        return []

    wanted = None if kinds is None else set(kinds)

    try:
        names = sorted(os.listdir(path))
    except OSError as error:
        raise FileOperationError("list", path, error) from error

    files = []
    for name in names:
        file_path = os.path.join(path, name)
        if not os.path.isfile(file_path):
            continue

        data_file = DataFile(path=file_path, kind=get_kind(name))
        if wanted is not None and data_file.kind not in wanted:
            continue

        files.append(data_file)

    return files


def fill_template(contents: str, variables: Dict[str, str]) -> str:
    """Replace each token literally. The tokens don't overlap, order doesn't matter."""
    for token, value in variables.items():
        contents = contents.replace(token, value)

    return contents


def expand_data_dir(data_dir: str, output_dir: str, variables: Dict[str, str]) -> int:
    """Fill all .in templates of data_dir into output_dir, copy everything else.

    Only the top level of data_dir is processed, subdirectories like data/icons
    are used by other steps.

    Returns how many files were written.
    """
    if not os.path.isdir(data_dir):
        logger.debug('No "%s" directory, nothing to expand', data_dir)
        return 0

    PathUtils.mkdir(output_dir)

    count = 0
    for data_file in scan_directory(data_dir):
        if data_file.kind == DataFileKind.TEMPLATE:
            destination = os.path.join(output_dir, data_file.stem)
            logger.info('Generating "%s"', destination)
            contents = PathUtils.read_text(data_file.path)
            PathUtils.write_text(destination, fill_template(contents, variables))
        else:
            destination = os.path.join(output_dir, data_file.name)
            PathUtils.copy(data_file.path, destination)

        count += 1

    return count
