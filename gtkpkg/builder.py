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


"""Build the application including its translations and data files, and install
everything into the prefix.

The steps run one after another. The first one that fails stops the build, and
whatever was installed until then stays where it is.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from gtkpkg.binary import install_binary
from gtkpkg.config_file import GeneratedConfig, write_config
from gtkpkg.configs.build_options import BuildOptions
from gtkpkg.configs.layout import InstallPrefix, ProjectLayout
from gtkpkg.configs.metadata import ProjectMetadata
from gtkpkg.data_files import expand_data_dir
from gtkpkg.exceptions import Error
from gtkpkg.icons import install_icons
from gtkpkg.language import install_desktop_files, make_lang
from gtkpkg.logging.logger import logger
from gtkpkg.resources import compile_resources, install_schemas
from gtkpkg.tools import BUILD_TOOLS, Command, SubprocessRunner, ToolRunner, check_tools


class Builder:
    def __init__(
        self,
        project_root: str,
        options: BuildOptions,
        runner: Optional[ToolRunner] = None,
        metadata: Optional[ProjectMetadata] = None,
    ):
        self.layout = ProjectLayout(project_root)
        self.options = options
        self.prefix = InstallPrefix(options.prefix)
        self.runner = runner if runner is not None else SubprocessRunner()
        self.metadata = (
            metadata
            if metadata is not None
            else ProjectMetadata.from_manifest(self.layout.manifest)
        )

    @property
    def output_dir(self) -> str:
        return self.metadata.output_dir(self.options.profile)

    def _step(self, name: str, func: Callable[..., Any], *args) -> Any:
        logger.step(name)
        try:
            return func(*args)
        except Error:
            logger.error('Step "%s" failed', name)
            raise

    def install(self) -> GeneratedConfig:
        """Run all steps. Returns the config.rs that the binary was built with."""
        check_tools(BUILD_TOOLS)

        metadata = self.metadata
        layout = self.layout
        prefix = self.prefix
        profile = self.options.profile

        logger.info(
            "Installing %s %s (%s) into %s",
            metadata.app_id,
            metadata.version,
            profile.value,
            prefix.root,
        )

        self._step(
            "Processing data files",
            expand_data_dir,
            layout.data_dir,
            self.output_dir,
            metadata.template_variables(),
        )
        self._step("Compiling translations", make_lang, layout.po_dir, prefix, self.runner)
        self._step(
            "Installing desktop and appdata files",
            install_desktop_files,
            self.output_dir,
            layout.po_dir,
            prefix,
            self.runner,
        )
        self._step(
            "Compiling resources",
            compile_resources,
            self.output_dir,
            layout.resources_dir,
            prefix,
            metadata.app_id,
            self.runner,
        )
        self._step(
            "Installing schemas", install_schemas, self.output_dir, prefix, self.runner
        )
        self._step("Installing icons", install_icons, layout.icons_dir, prefix, metadata.app_id)

        # needs to know which directories the previous steps created
        config = self._step("Generating config", write_config, metadata, profile, prefix)

        self._step(
            "Installing binary",
            install_binary,
            layout.root,
            prefix,
            profile,
            self.options.cargo_flags,
            config,
            self.runner,
        )

        logger.info("Installed %s", prefix.binary(metadata.binary))
        return config

    def run(self) -> int:
        """Install, then start the installed binary. Returns its exit code."""
        self.install()

        binary = self.prefix.binary(self.metadata.binary)
        logger.step("Running %s", binary)
        return self.runner.run(Command(binary), check=False)
