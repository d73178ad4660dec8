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
from datetime import datetime
from typing import Dict

STEP_COLOR = 10
DEBUG_COLOR = 8


class ColorfulFormatter(logging.Formatter):
    """Overwritten Formatter to print nicer logs.

    Progress lines of the build pipeline are printed as a bold, colored "==>" line.
    In debug mode, every record also gets the time, the file and the line-number,
    and all logs from the same file share the same color.
    """

    def __init__(self, debug_mode: bool = False):
        super().__init__()

        self.debug_mode = debug_mode
        self.file_color_mapping: Dict[str, int] = {}

        # see https://en.wikipedia.org/wiki/ANSI_escape_code#8-bit
        self.allowed_colors = []
        for r in range(0, 6):
            for g in range(0, 6):
                for b in range(0, 6):
                    brightness = 0.2126 * r + 0.7152 * g + 0.0722 * b
                    if brightness < 1:
                        # most terminals have a dark background
                        continue

                    if g + b <= 1:
                        # red looks like an error
                        continue

                    if abs(g - b) < 2 and abs(b - r) < 2 and abs(r - g) < 2:
                        # too grey
                        continue

                    self.allowed_colors.append(16 + b + (6 * g) + (36 * r))

        self.level_based_colors = {
            logging.WARNING: 11,
            logging.ERROR: 9,
            logging.FATAL: 9,
        }

    def _word_to_color(self, word: str) -> int:
        """Convert a word to a 8bit ansi color code."""
        digit_sum = sum([ord(char) for char in word])
        index = digit_sum % len(self.allowed_colors)
        return self.allowed_colors[index]

    def _allocate_debug_log_color(self, record: logging.LogRecord) -> int:
        """Get the color that represents the source file of the log."""
        color = self.file_color_mapping.get(record.filename)
        if color is None:
            color = self._word_to_color(record.filename)
            self.file_color_mapping[record.filename] = color

        return color

    def _get_format(self, record: logging.LogRecord) -> str:
        """Generate a message format string."""
        is_step = getattr(record, "step", False)

        if not self.debug_mode:
            if is_step:
                return f"\033[1;38;5;{STEP_COLOR}m==>\033[0m\033[1m %(message)s\033[0m"

            if record.levelno == logging.INFO:
                # if not launched with --debug, then don't print "INFO:"
                return "%(message)s"

            if record.levelno == logging.DEBUG:
                return f"\033[38;5;{DEBUG_COLOR}m%(message)s\033[0m"

            color = self.level_based_colors.get(record.levelno, 9)
            return f"\033[38;5;{color}m%(levelname)s\033[0m: %(message)s"

        color = self._allocate_debug_log_color(record)
        if is_step:
            style = f"\033[1;38;5;{STEP_COLOR}m==> "
        elif record.levelno in [logging.ERROR, logging.WARNING, logging.FATAL]:
            # underline
            style = f"\033[4;38;5;{color}m"
        else:
            style = f"\033[38;5;{color}m"

        return (
            f'{datetime.now().strftime("%H:%M:%S.%f")} '
            f"{style}"
            "%(levelname)s "
            "%(filename)s:%(lineno)d: "
            "%(message)s"
            "\033[0m"  # end style
        )

    def format(self, record: logging.LogRecord) -> str:
        """Overwritten format function."""
        # pylint: disable=protected-access
        self._style._fmt = self._get_format(record)
        return super().format(record)
