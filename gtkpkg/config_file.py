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


"""Generate config.rs, which the application includes via
`include!(env!("CONFIG_PATH"))` to know its id, version and installation paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict

from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.configs.metadata import BuildProfile, ProjectMetadata
from gtkpkg.configs.paths import PathUtils
from gtkpkg.exceptions import FileOperationError
from gtkpkg.logging.logger import logger

CONFIG_FILENAME = "config.rs"
CONFIG_PATH_VARIABLE = "CONFIG_PATH"


@dataclass(frozen=True)
class GeneratedConfig:
    path: str
    constants: Dict[str, str]

    @property
    def env(self) -> Dict[str, str]:
        """What the cargo build of the application needs to find the file."""
        return {CONFIG_PATH_VARIABLE: self.path}


def _rust_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _canonicalize(path: str) -> str:
    try:
        return os.path.realpath(path, strict=True)
    except OSError as error:
        raise FileOperationError("resolve", path, error) from error


def get_constants(
    metadata: ProjectMetadata,
    profile: BuildProfile,
    prefix: InstallPrefix,
) -> Dict[str, str]:
    constants = {
        "APP_ID": metadata.app_id,
        "APP_NAME": metadata.name,
        "PROFILE": profile.value,
        "VERSION": metadata.version,
        "GETTEXT_PACKAGE": metadata.gettext_domain,
    }

    # Only what has been installed already can be pointed to. So this has to run
    # after the other install steps.
    pkgdata_dir = prefix.pkgdata_dir(metadata.app_id)
    if os.path.isdir(pkgdata_dir):
        constants["PKGDATADIR"] = _canonicalize(pkgdata_dir)

    if os.path.isdir(prefix.locale_dir):
        constants["LOCALEDIR"] = _canonicalize(prefix.locale_dir)

    return constants


def write_config(
    metadata: ProjectMetadata,
    profile: BuildProfile,
    prefix: InstallPrefix,
) -> GeneratedConfig:
    """Write config.rs into the output dir of the profile."""
    constants = get_constants(metadata, profile, prefix)

    lines = [
        f"pub static {name}: &str = {_rust_string(value)};"
        for name, value in constants.items()
    ]

    path = os.path.join(metadata.output_dir(profile), CONFIG_FILENAME)
    logger.info('Writing "%s"', path)
    PathUtils.write_text(path, "\n".join(lines) + "\n")

    return GeneratedConfig(path=os.path.abspath(path), constants=constants)
