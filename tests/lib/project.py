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

"""Write projects for tests to install."""

from __future__ import annotations

import os
from typing import Dict, Optional, Union

from gtkpkg.configs.metadata import ProjectMetadata

MANIFEST = """[package]
name = "{binary}"
version = "{version}"
edition = "2021"

[package.metadata.gtkpkg]
id = "{app_id}"
name = "{name}"

[dependencies]
"""


def write_file(path: str, contents: Union[str, bytes] = "") -> str:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    mode = "wb" if isinstance(contents, bytes) else "w"
    with open(path, mode) as file:
        file.write(contents)

    return path


def read_file(path: str) -> str:
    with open(path, "r") as file:
        return file.read()


def write_project(
    root: str,
    app_id: str = "io.foo.Bar",
    name: str = "Foo Bar",
    version: str = "1.0.0",
    binary: str = "foobar",
    files: Optional[Dict[str, Union[str, bytes]]] = None,
) -> str:
    """Create Cargo.toml and the given files (relative paths) in root."""
    write_file(
        os.path.join(root, "Cargo.toml"),
        MANIFEST.format(binary=binary, version=version, app_id=app_id, name=name),
    )

    for relative_path, contents in (files or {}).items():
        write_file(os.path.join(root, relative_path), contents)

    return root


def make_metadata(root: str, **kwargs) -> ProjectMetadata:
    values = dict(
        app_id="io.foo.Bar",
        binary="foobar",
        name="Foo Bar",
        version="1.0.0",
        target_dir=os.path.join(root, "target"),
    )
    values.update(kwargs)
    return ProjectMetadata(**values)
