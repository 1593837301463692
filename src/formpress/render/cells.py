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

from typing import Sequence

from ..canvas import Canvas
from ..layout.options import CellOptions
from ..layout.spec import LayoutSpec
from ..layout.text import align_offset, wrap_text
from ..layout.types import Cursor
from .fonts import Fonts


class CellRenderer:
    def __init__(self, canvas: Canvas, spec: LayoutSpec, fonts: Fonts) -> None:
        self._canvas = canvas
        self._spec = spec
        self._fonts = fonts

    def draw_borders(
        self,
        pos: Cursor,
        width: float,
        height: float,
        options: CellOptions | None = None,
    ) -> None:
        opts = CellOptions.coerce(options)
        line_width = self._spec.line_width
        left, top = pos.x, pos.y
        right, bottom = pos.x + width, pos.y + height
        if opts.horizontal_border:
            self._canvas.line(left, top, right, top, line_width=line_width)
            self._canvas.line(left, bottom, right, bottom, line_width=line_width)
        if opts.vertical_border:
            self._canvas.line(left, top, left, bottom, line_width=line_width)
            self._canvas.line(right, top, right, bottom, line_width=line_width)

    def draw_cell(
        self,
        text: str,
        pos: Cursor,
        width: float,
        height: float,
        options: CellOptions | None = None,
        children: Sequence[str] | None = None,
        value_gap_y: float = 0.0,
        value_gap_x: float = 0.0,
    ) -> None:
        """Draw one bordered cell; ``pos`` is not advanced.

        With ``children`` the bottom half is split into ``len(children)``
        sub-cells of ``width`` each, so the cell spans ``width * len(children)``.
        Text lines are anchored near mid-height and grow downward.
        """
        opts = CellOptions.coerce(options)
        if children:
            child_opts = opts.merged(vertical_border=True, horizontal_border=False)
            for index, child in enumerate(children):
                self.draw_cell(
                    child,
                    Cursor(pos.x + width * index, pos.y + height / 2),
                    width,
                    height / 2,
                    child_opts,
                )

        span = width * max(len(children or ()), 1)
        self.draw_borders(pos.copy(), span, height, opts)
        if children:
            self.draw_borders(pos.copy(), span, height / 2, opts)

        self._fonts.style(bold=opts.bold)
        font_size = (
            opts.input_font_size
            if opts.input_font_size is not None
            else self._fonts.spec.label_size
        )
        self._fonts.size(font_size)

        gap = opts.gap if opts.gap is not None else 0.0
        padding = self._spec.table.cell_padding
        measure = self._canvas.string_width
        for index, line in enumerate(wrap_text(text, span, measure)):
            x = pos.x + align_offset(line, span, gap, opts.align, measure) + value_gap_x
            y = pos.y + padding + index * font_size + value_gap_y + (height / 2 - font_size)
            self._canvas.text(line, x, y)
