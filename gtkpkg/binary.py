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

import os
from typing import Sequence

from gtkpkg.config_file import GeneratedConfig
from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.configs.metadata import BuildProfile
from gtkpkg.configs.paths import PathUtils
from gtkpkg.exceptions import FileOperationError
from gtkpkg.logging.logger import logger
from gtkpkg.tools import CARGO, Command, ToolRunner

# cargo install keeps track of what it installed in those, they don't belong
# into a system prefix.
CARGO_BOOKKEEPING_FILES = (".crates.toml", ".crates2.json")


def install_binary(
    project_root: str,
    prefix: InstallPrefix,
    profile: BuildProfile,
    cargo_flags: Sequence[str],
    config: GeneratedConfig,
    runner: ToolRunner,
) -> str:
    """Build the application with cargo and put it into <prefix>/bin.

    Returns the path of the installed binary's directory.
    """
    args = (
        "install",
        "--force",
        *profile.cargo_flags,
        *cargo_flags,
        "--path",
        project_root,
        "--root",
        prefix.root,
    )
    logger.info('Installing into "%s"', prefix.bin_dir)
    try:
        runner.run(Command(CARGO, args, env=config.env))
    finally:
        # also after a failed build, cargo may have written them already
        for filename in CARGO_BOOKKEEPING_FILES:
            try:
                PathUtils.remove_if_exists(os.path.join(prefix.root, filename))
            except FileOperationError as error:
                logger.warning("%s", error)

    return prefix.bin_dir
