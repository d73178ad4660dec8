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


"""Build language files and copy them to the target."""

import os
from typing import List

from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.configs.paths import PathUtils
from gtkpkg.data_files import DataFileKind, scan_directory
from gtkpkg.logging.logger import logger
from gtkpkg.tools import MSGFMT, Command, ToolRunner


def make_lang(po_dir: str, prefix: InstallPrefix, runner: ToolRunner) -> List[str]:
    """Compile each po/<lang>.po to share/locale/<lang>/LC_MESSAGES/<lang>.mo.

    Returns the languages. If any msgfmt call fails, the remaining languages are
    not compiled.
    """
    if not os.path.isdir(po_dir):
        logger.debug('No "%s" directory, skipping translations', po_dir)
        return []

    PathUtils.mkdir(prefix.locale_dir)

    languages = []
    for po_file in scan_directory(po_dir, [DataFileKind.PO]):
        lang = po_file.stem
        modir = prefix.lc_messages_dir(lang)
        PathUtils.mkdir(modir)

        target = os.path.join(modir, f"{lang}.mo")
        logger.info('Generating translation "%s"', target)
        runner.run(Command(MSGFMT, (po_file.path, "-o", target)))
        languages.append(lang)

    return languages


def install_desktop_files(
    output_dir: str,
    po_dir: str,
    prefix: InstallPrefix,
    runner: ToolRunner,
) -> List[str]:
    """Install .desktop, .appdata.xml and .metainfo.xml files of output_dir.

    If the project has translations, msgfmt merges them into the files. Otherwise
    they are copied as they are. Returns the installed paths.
    """
    destinations = {
        DataFileKind.DESKTOP: prefix.applications_dir,
        DataFileKind.APPDATA: prefix.appdata_dir,
        DataFileKind.METAINFO: prefix.metainfo_dir,
    }
    translate = os.path.isdir(po_dir)

    installed = []
    for data_file in scan_directory(output_dir, destinations.keys()):
        target_dir = destinations[data_file.kind]
        target = os.path.join(target_dir, data_file.name)

        if translate:
            PathUtils.mkdir(target_dir)
            file_type = "--desktop" if data_file.kind == DataFileKind.DESKTOP else "--xml"
            logger.info('Translating "%s"', target)
            runner.run(
                Command(
                    MSGFMT,
                    (
                        file_type,
                        "--template",
                        data_file.path,
                        "-d",
                        po_dir,
                        "-o",
                        target,
                    ),
                )
            )
        else:
            logger.info('Installing "%s"', target)
            PathUtils.copy(data_file.path, target)

        installed.append(target)

    return installed
