#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from ..canvas import Canvas
from ..layout.spec import FontSpec
from ..layout.text import line_height


class Fonts:
    """Font style and size switching on top of a canvas."""

    def __init__(self, canvas: Canvas, spec: FontSpec) -> None:
        self._canvas = canvas
        self._spec = spec

    @property
    def spec(self) -> FontSpec:
        return self._spec

    def normal_style(self) -> None:
        self._canvas.set_font(self._spec.family, bold=False)

    def bold_style(self) -> None:
        self._canvas.set_font(self._spec.family, bold=True)

    def style(self, *, bold: bool) -> None:
        self._canvas.set_font(self._spec.family, bold=bold)

    def size(self, size: float) -> None:
        self._canvas.set_font_size(size)

    def normal_size(self) -> None:
        self.size(self._spec.normal_size)

    def medium_size(self) -> None:
        self.size(self._spec.medium_size)

    def small_size(self) -> None:
        self.size(self._spec.small_size)

    def big_size(self) -> None:
        self.size(self._spec.big_size)

    def line_height(self) -> float:
        return line_height(self._canvas.font_size, self._spec.line_height_multiplier)

    def reset(self) -> None:
        self.normal_size()
        self.normal_style()
