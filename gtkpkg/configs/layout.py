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


"""Where files are read from, and where they are installed to.

A project looks like this:

    Cargo.toml
    src/main.rs
    data/                   templates, copied one level deep
    data/resources/         source dir of the gresource bundle
    data/icons/             <app-id>.svg and <app-id>-symbolic.svg
    po/                     <lang>.po, LINGUAS, POTFILES.in
"""

import os

from gtkpkg.configs.metadata import MANIFEST_NAME

DEFAULT_PREFIX = "/usr/local"


class ProjectLayout:
    """Fixed relative paths within the project that is being packaged."""

    def __init__(self, root: str):
        self.root = root

    @property
    def manifest(self) -> str:
        return os.path.join(self.root, MANIFEST_NAME)

    @property
    def data_dir(self) -> str:
        return os.path.join(self.root, "data")

    @property
    def resources_dir(self) -> str:
        return os.path.join(self.data_dir, "resources")

    @property
    def icons_dir(self) -> str:
        return os.path.join(self.data_dir, "icons")

    @property
    def po_dir(self) -> str:
        return os.path.join(self.root, "po")


class InstallPrefix:
    """The freedesktop directory tree below a prefix like /usr/local.

    Nothing is created here, each step creates the directories it writes to.
    """

    def __init__(self, root: str = DEFAULT_PREFIX):
        self.root = root

    @property
    def bin_dir(self) -> str:
        return os.path.join(self.root, "bin")

    @property
    def share_dir(self) -> str:
        return os.path.join(self.root, "share")

    @property
    def applications_dir(self) -> str:
        return os.path.join(self.share_dir, "applications")

    @property
    def appdata_dir(self) -> str:
        return os.path.join(self.share_dir, "appdata")

    @property
    def metainfo_dir(self) -> str:
        return os.path.join(self.share_dir, "metainfo")

    @property
    def schemas_dir(self) -> str:
        return os.path.join(self.share_dir, "glib-2.0", "schemas")

    @property
    def scalable_icons_dir(self) -> str:
        return os.path.join(self.share_dir, "icons", "hicolor", "scalable", "apps")

    @property
    def symbolic_icons_dir(self) -> str:
        return os.path.join(self.share_dir, "icons", "hicolor", "symbolic", "apps")

    @property
    def locale_dir(self) -> str:
        return os.path.join(self.share_dir, "locale")

    def lc_messages_dir(self, lang: str) -> str:
        return os.path.join(self.locale_dir, lang, "LC_MESSAGES")

    def pkgdata_dir(self, app_id: str) -> str:
        """For example /usr/local/share/io.github.Example."""
        return os.path.join(self.share_dir, app_id)

    def binary(self, binary: str) -> str:
        return os.path.join(self.bin_dir, binary)
