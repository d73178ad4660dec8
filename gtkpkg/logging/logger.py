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


"""Logging setup for gtkpkg."""

import logging
from typing import cast

from gtkpkg.installation_info import VERSION
from gtkpkg.logging.formatter import ColorfulFormatter


class Logger(logging.Logger):
    def step(self, msg: str, *args) -> None:
        """Announce that a step of the build pipeline begins."""
        if not self.isEnabledFor(logging.INFO):
            return

        self._log(logging.INFO, msg, args, extra={"step": True}, stacklevel=2)

    def is_debug(self) -> bool:
        """True, if the logger is currently in DEBUG mode."""
        return self.level <= logging.DEBUG

    def log_info(self, name: str = "gtkpkg") -> None:
        """Log version and name to the console."""
        logger.info("%s %s", name, VERSION)

    def update_verbosity(self, debug: bool) -> None:
        """Set the logging verbosity."""
        if debug:
            self.setLevel(logging.DEBUG)
        else:
            self.setLevel(logging.INFO)

        for handler in self.handlers:
            handler.setFormatter(ColorfulFormatter(debug))

    @classmethod
    def bootstrap_logger(cls):
        # https://github.com/python/typeshed/issues/1801
        logging.setLoggerClass(cls)
        logger = cast(cls, logging.getLogger("gtkpkg"))
        logging.setLoggerClass(logging.Logger)

        handler = logging.StreamHandler()
        handler.setFormatter(ColorfulFormatter(False))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        return logger


logger = Logger.bootstrap_logger()
