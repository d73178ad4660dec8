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

from gtkpkg.config_file import CONFIG_PATH_VARIABLE, get_constants, write_config
from gtkpkg.configs.layout import InstallPrefix
from gtkpkg.configs.metadata import BuildProfile
from tests.lib.project import make_metadata, read_file
from tests.lib.setup_tests import setup_tests


@setup_tests
class TestConfigFile(unittest.TestCase):
    def setUp(self):
        self.prefix = InstallPrefix(os.path.join(self.tmp, "prefix"))
        self.metadata = make_metadata(self.tmp)

    def test_without_installed_dirs(self):
        constants = get_constants(self.metadata, BuildProfile.DEBUG, self.prefix)
        self.assertDictEqual(
            constants,
            {
                "APP_ID": "io.foo.Bar",
                "APP_NAME": "Foo Bar",
                "PROFILE": "debug",
                "VERSION": "1.0.0",
                "GETTEXT_PACKAGE": "foobar",
            },
        )

    def test_with_installed_dirs(self):
        os.makedirs(self.prefix.pkgdata_dir("io.foo.Bar"))
        os.makedirs(self.prefix.locale_dir)

        constants = get_constants(self.metadata, BuildProfile.RELEASE, self.prefix)
        self.assertEqual(constants["PROFILE"], "release")
        self.assertEqual(
            constants["PKGDATADIR"],
            os.path.realpath(os.path.join(self.tmp, "prefix", "share", "io.foo.Bar")),
        )
        self.assertEqual(
            constants["LOCALEDIR"],
            os.path.realpath(os.path.join(self.tmp, "prefix", "share", "locale")),
        )

    def test_canonical_paths(self):
        os.makedirs(self.prefix.locale_dir)
        os.symlink(self.prefix.root, os.path.join(self.tmp, "link"))
        prefix = InstallPrefix(os.path.join(self.tmp, "link", "..", "link"))

        constants = get_constants(self.metadata, BuildProfile.DEBUG, prefix)
        self.assertEqual(
            constants["LOCALEDIR"], os.path.realpath(self.prefix.locale_dir)
        )
        self.assertNotIn("..", constants["LOCALEDIR"])

    def test_write_config(self):
        os.makedirs(self.prefix.locale_dir)

        config = write_config(self.metadata, BuildProfile.DEBUG, self.prefix)

        path = os.path.join(self.tmp, "target", "debug", "data", "config.rs")
        self.assertEqual(config.path, path)
        self.assertDictEqual(config.env, {CONFIG_PATH_VARIABLE: path})
        self.assertEqual(config.env, {"CONFIG_PATH": path})

        lines = read_file(path).splitlines()
        self.assertIn('pub static APP_ID: &str = "io.foo.Bar";', lines)
        self.assertIn('pub static APP_NAME: &str = "Foo Bar";', lines)
        self.assertIn('pub static PROFILE: &str = "debug";', lines)
        self.assertIn('pub static VERSION: &str = "1.0.0";', lines)
        self.assertIn('pub static GETTEXT_PACKAGE: &str = "foobar";', lines)
        self.assertIn(
            f'pub static LOCALEDIR: &str = "{os.path.realpath(self.prefix.locale_dir)}";',
            lines,
        )
        self.assertFalse(any("PKGDATADIR" in line for line in lines))
        self.assertEqual(len(lines), 6)

    def test_escaping(self):
        metadata = make_metadata(self.tmp, name='Say "hi" \\o/')
        config = write_config(metadata, BuildProfile.DEBUG, self.prefix)
        self.assertIn(
            'pub static APP_NAME: &str = "Say \\"hi\\" \\\\o/";',
            read_file(config.path).splitlines(),
        )
        self.assertEqual(config.constants["APP_NAME"], 'Say "hi" \\o/')

    def test_does_not_touch_the_environment(self):
        write_config(self.metadata, BuildProfile.DEBUG, self.prefix)
        self.assertNotEqual(
            os.environ.get(CONFIG_PATH_VARIABLE),
            os.path.join(self.tmp, "target", "debug", "data", "config.rs"),
        )


if __name__ == "__main__":
    unittest.main()
