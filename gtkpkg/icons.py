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
from typing import List

from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.configs.paths import PathUtils
from gtkpkg.logging.logger import logger


def install_icons(icons_dir: str, prefix: InstallPrefix, app_id: str) -> List[str]:
    """Install <app-id>.svg and <app-id>-symbolic.svg into the hicolor theme.

    Either both icons are installed, or none.
    """
    scalable = os.path.join(icons_dir, f"{app_id}.svg")
    symbolic = os.path.join(icons_dir, f"{app_id}-symbolic.svg")

    missing = [path for path in (scalable, symbolic) if not os.path.isfile(path)]
    if len(missing) == 2:
        logger.debug("No icons found in %s", icons_dir)
        return []

    if len(missing) == 1:
        logger.warning('Not installing icons, "%s" is missing', missing[0])
        return []

    installed = []
    for source, target_dir in (
        (scalable, prefix.scalable_icons_dir),
        (symbolic, prefix.symbolic_icons_dir),
    ):
        target = os.path.join(target_dir, os.path.basename(source))
        logger.info('Installing icon "%s"', target)
        PathUtils.copy(source, target)
        installed.append(target)

    return installed
