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
import unittest

from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.exceptions import ToolFailedError
from gtkpkg.resources import compile_resources, install_schemas
from gtkpkg.tools import GLIB_COMPILE_RESOURCES, GLIB_COMPILE_SCHEMAS
from tests.lib.fakes import FakeToolRunner
from tests.lib.project import read_file, write_file
from tests.lib.setup_tests import setup_tests


@setup_tests
class TestCompileResources(unittest.TestCase):
    def setUp(self):
        self.output = os.path.join(self.tmp, "target", "debug", "data")
        self.resources = os.path.join(self.tmp, "data", "resources")
        self.prefix = InstallPrefix(os.path.join(self.tmp, "prefix"))
        self.runner = FakeToolRunner()

    def test_compile(self):
        manifest = write_file(
            os.path.join(self.output, "io.foo.Bar.gresource.xml"), "<gresources/>"
        )
        write_file(os.path.join(self.resources, "window.ui"), "<interface/>")

        bundles = compile_resources(
            self.output, self.resources, self.prefix, "io.foo.Bar", self.runner
        )

        target = os.path.join(
            self.prefix.root, "share", "io.foo.Bar", "io.foo.Bar.gresource"
        )
        self.assertListEqual(bundles, [target])
        self.assertEqual(len(self.runner.commands), 1)
        command = self.runner.commands[0]
        self.assertEqual(command.name, GLIB_COMPILE_RESOURCES)
        self.assertTupleEqual(
            command.args,
            (
                manifest,
                "--sourcedir",
                self.resources,
                "--internal",
                "--generate",
                "--target",
                target,
            ),
        )

    def test_no_resources_dir(self):
        write_file(os.path.join(self.output, "io.foo.Bar.gresource.xml"), "<gresources/>")
        self.assertListEqual(
            compile_resources(
                self.output, self.resources, self.prefix, "io.foo.Bar", self.runner
            ),
            [],
        )
        self.assertListEqual(self.runner.commands, [])

    def test_no_manifest(self):
        write_file(os.path.join(self.resources, "window.ui"), "<interface/>")
        compile_resources(self.output, self.resources, self.prefix, "io.foo.Bar", self.runner)
        self.assertListEqual(self.runner.commands, [])
        self.assertFalse(os.path.exists(self.prefix.pkgdata_dir("io.foo.Bar")))

    def test_fails(self):
        write_file(os.path.join(self.output, "io.foo.Bar.gresource.xml"), "<gresources/>")
        write_file(os.path.join(self.resources, "window.ui"), "<interface/>")
        self.runner.fail(GLIB_COMPILE_RESOURCES)
        self.assertRaises(
            ToolFailedError,
            compile_resources,
            self.output,
            self.resources,
            self.prefix,
            "io.foo.Bar",
            self.runner,
        )


@setup_tests
class TestInstallSchemas(unittest.TestCase):
    def setUp(self):
        self.output = os.path.join(self.tmp, "target", "debug", "data")
        self.prefix = InstallPrefix(os.path.join(self.tmp, "prefix"))
        self.runner = FakeToolRunner()

    def test_install(self):
        write_file(os.path.join(self.output, "io.foo.Bar.gschema.xml"), "<schemalist/>")
        # installed by some other application
        write_file(
            os.path.join(self.prefix.schemas_dir, "org.other.App.gschema.xml"),
            "<schemalist/>",
        )

        installed = install_schemas(self.output, self.prefix, self.runner)

        target = os.path.join(self.prefix.schemas_dir, "io.foo.Bar.gschema.xml")
        self.assertListEqual(installed, [target])
        self.assertEqual(read_file(target), "<schemalist/>")
        self.assertEqual(len(self.runner.commands), 1)
        self.assertEqual(self.runner.commands[0].name, GLIB_COMPILE_SCHEMAS)
        self.assertTupleEqual(self.runner.commands[0].args, (self.prefix.schemas_dir,))
        self.assertTrue(
            os.path.exists(os.path.join(self.prefix.schemas_dir, "gschemas.compiled"))
        )

    def test_no_schema(self):
        write_file(os.path.join(self.output, "io.foo.Bar.desktop"), "")
        self.assertListEqual(install_schemas(self.output, self.prefix, self.runner), [])
        self.assertListEqual(self.runner.commands, [])
        self.assertFalse(os.path.exists(self.prefix.schemas_dir))


if __name__ == "__main__":
    unittest.main()
