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

from __future__ import annotations

import os
from typing import Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from gtkpkg.configs.layout import DEFAULT_PREFIX
from gtkpkg.configs.metadata import BuildProfile

RELEASE_FLAG = "--release"


class BuildOptions(BaseModel):
    """How gtkpkg install and gtkpkg run were invoked."""

    model_config = ConfigDict(frozen=True)

    profile: BuildProfile = BuildProfile.DEBUG
    prefix: str = DEFAULT_PREFIX
    # forwarded to cargo install as they are
    cargo_flags: Tuple[str, ...] = ()

    @classmethod
    def from_args(cls, args: Sequence[str]) -> BuildOptions:
        """Split `[flags...] [prefix]` into its parts.

        The last argument is the prefix, unless it looks like a flag.
        """
        args = list(args)

        prefix = DEFAULT_PREFIX
        if len(args) > 0 and not args[-1].startswith("-"):
            prefix = os.path.abspath(args.pop())

        profile = BuildProfile.DEBUG
        cargo_flags = []
        for arg in args:
            if arg == RELEASE_FLAG:
                profile = BuildProfile.RELEASE
                continue

            cargo_flags.append(arg)

        return cls(profile=profile, prefix=prefix, cargo_flags=tuple(cargo_flags))
