#!/usr/bin/python3
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
import re
from setuptools import setup


def get_packages(base="gtkpkg"):
    """Return all modules used in gtkpkg.

    For example 'gtkpkg.configs' or 'gtkpkg.logging'
    """
    if not os.path.exists(os.path.join(base, "__init__.py")):
        # only python modules
        return []

    result = [base.replace("/", ".")]
    for name in os.listdir(base):
        if not os.path.isdir(os.path.join(base, name)):
            continue

        if name == "__pycache__":
            continue

        # find more python submodules in that directory
        result += get_packages(os.path.join(base, name))

    return result


def get_version():
    with open(os.path.join("gtkpkg", "installation_info.py"), "r") as f:
        return re.search(r'VERSION\s*=\s*"(.+?)"', f.read()).group(1)


setup(
    name="gtkpkg",
    version=get_version(),
    description="Build and install GTK applications written in Rust",
    license="GPL-3.0",
    packages=get_packages(),
    python_requires=">=3.11",
    install_requires=["pydantic>=2"],
    entry_points={
        "console_scripts": [
            "gtkpkg = gtkpkg.bin.gtkpkg_cli:GtkPkgBin.main",
        ],
    },
)
