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


"""Command line interface of gtkpkg.

gtkpkg new -id io.github.Example --name "Example" example
gtkpkg install [--release] [cargo flags...] [prefix]
gtkpkg run [--release] [cargo flags...] [prefix]
"""

from __future__ import annotations

import os
import sys
from argparse import ArgumentParser, Namespace
from typing import List, Optional, Sequence, Tuple

from gtkpkg.builder import Builder
from gtkpkg.configs.build_options import RELEASE_FLAG, BuildOptions
from gtkpkg.configs.layout import DEFAULT_PREFIX
from gtkpkg.configs.metadata import NewProject
from gtkpkg.exceptions import Error
from gtkpkg.logging.logger import logger
from gtkpkg.scaffold import create_project
from gtkpkg.tools import NEW_PROJECT_TOOLS, SubprocessRunner, ToolRunner, check_tools

NEW = "new"
INSTALL = "install"
RUN = "run"


class GtkPkgBin:
    @staticmethod
    def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[Namespace, List[str]]:
        """Returns the options and everything that is meant for cargo install."""
        parser = ArgumentParser(
            prog="gtkpkg",
            description="Build and install GTK applications written in Rust",
        )
        parser.add_argument(
            "-d",
            "--debug",
            action="store_true",
            dest="debug",
            help="Displays additional debug information",
            default=False,
        )
        parser.add_argument(
            "-C",
            "--directory",
            dest="directory",
            help="The project directory, defaults to the current directory",
            default=os.getcwd(),
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        new_parser = subparsers.add_parser(NEW, help="Create a new project")
        new_parser.add_argument(
            "-id",
            "--id",
            dest="app_id",
            required=True,
            help="Application id, for example io.github.Example",
        )
        new_parser.add_argument(
            "--name",
            dest="name",
            required=True,
            help="The name of the application that users see",
        )
        new_parser.add_argument("binary", help="Name of the binary and the crate")

        usage = f"[{RELEASE_FLAG}] [cargo flags...] [prefix, defaults to {DEFAULT_PREFIX}]"
        subparsers.add_parser(INSTALL, help="Build and install", usage=usage)
        subparsers.add_parser(RUN, help="Build, install and start", usage=usage)

        options, remaining = parser.parse_known_args(argv)

        if options.command == NEW and len(remaining) > 0:
            parser.error(f"unrecognized arguments: {' '.join(remaining)}")

        return options, remaining

    @staticmethod
    def execute(
        options: Namespace,
        remaining: Sequence[str],
        runner: Optional[ToolRunner] = None,
    ) -> int:
        """Do what the user asked for. Returns the exit code."""
        if runner is None:
            runner = SubprocessRunner()

        try:
            if options.command == NEW:
                project = NewProject.create(options.app_id, options.name, options.binary)
                check_tools(NEW_PROJECT_TOOLS)
                root = create_project(project, options.directory, runner)
                logger.info('Created "%s"', root)
                return 0

            builder = Builder(options.directory, BuildOptions.from_args(remaining), runner)

            if options.command == RUN:
                return builder.run()

            builder.install()
            return 0
        except Error as error:
            logger.error("%s", error)
            return error.exit_code

    @staticmethod
    def main(argv: Optional[Sequence[str]] = None) -> None:
        options, remaining = GtkPkgBin.parse_args(argv)

        logger.update_verbosity(options.debug)
        if options.debug:
            logger.log_info()

        sys.exit(GtkPkgBin.execute(options, remaining))


if __name__ == "__main__":
    GtkPkgBin.main()
