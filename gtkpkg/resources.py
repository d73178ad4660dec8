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


"""Compile the GResource bundle and the GSettings schemas."""

import os
from typing import List

from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.configs.paths import PathUtils
from gtkpkg.data_files import DataFileKind, scan_directory
from gtkpkg.logging.logger import logger
from gtkpkg.tools import GLIB_COMPILE_RESOURCES, GLIB_COMPILE_SCHEMAS, Command, ToolRunner


def compile_resources(
    output_dir: str,
    resources_dir: str,
    prefix: InstallPrefix,
    app_id: str,
    runner: ToolRunner,
) -> List[str]:
    """Pack data/resources into share/<app-id>/<app-id>.gresource.

    The manifest (<app-id>.gresource.xml) is taken from the expanded data files, so
    it may use @GRESOURCE_ID@ as its prefix.
    """
    manifests = scan_directory(output_dir, [DataFileKind.GRESOURCE])
    if len(manifests) == 0 or not os.path.isdir(resources_dir):
        logger.debug("No gresource manifest or no resources, skipping")
        return []

    install_dir = prefix.pkgdata_dir(app_id)
    PathUtils.mkdir(install_dir)

    bundles = []
    for manifest in manifests:
        # foo.gresource.xml -> foo.gresource
        target = os.path.join(install_dir, manifest.stem + ".gresource")
        logger.info('Compiling resources into "%s"', target)
        runner.run(
            Command(
                GLIB_COMPILE_RESOURCES,
                (
                    manifest.path,
                    "--sourcedir",
                    resources_dir,
                    "--internal",
                    "--generate",
                    "--target",
                    target,
                ),
            )
        )
        bundles.append(target)

    return bundles


def install_schemas(output_dir: str, prefix: InstallPrefix, runner: ToolRunner) -> List[str]:
    """Copy *.gschema.xml into share/glib-2.0/schemas and recompile that directory.

    glib-compile-schemas rewrites gschemas.compiled for every schema in there,
    including those that other applications installed into the same prefix.
    """
    schemas = scan_directory(output_dir, [DataFileKind.GSCHEMA])
    if len(schemas) == 0:
        logger.debug("No gschema, skipping")
        return []

    installed = []
    for schema in schemas:
        target = os.path.join(prefix.schemas_dir, schema.name)
        logger.info('Installing schema "%s"', target)
        PathUtils.copy(schema.path, target)
        installed.append(target)

    runner.run(Command(GLIB_COMPILE_SCHEMAS, (prefix.schemas_dir,)))
    return installed
