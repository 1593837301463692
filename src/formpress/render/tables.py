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

from typing import Any, Mapping, Sequence

from ..canvas import Canvas
from ..layout.geometry import column_width, flatten_columns
from ..layout.spec import LayoutSpec
from ..layout.types import Cursor, DataCell, HeaderSpec, coerce_rows
from .cells import CellRenderer
from .fonts import Fonts
from .pages import PageManager

HeaderInput = HeaderSpec | Mapping[str, Any]
CellInput = DataCell | Mapping[str, Any] | str


class TableRenderer:
    def __init__(
        self,
        canvas: Canvas,
        spec: LayoutSpec,
        fonts: Fonts,
        pages: PageManager,
        cells: CellRenderer,
    ) -> None:
        self._canvas = canvas
        self._spec = spec
        self._fonts = fonts
        self._pages = pages
        self._cells = cells

    def print_table(
        self,
        pos: Cursor,
        headers: Sequence[HeaderInput],
        rows: Sequence[Sequence[CellInput]],
        row_height: float | None = None,
        final_border: bool = True,
    ) -> None:
        """Draw a header row and data rows, advancing ``pos.y`` past the table.

        Rows are checked against the page bottom one at a time. Cells beyond
        the header columns are drawn with the large-gap fallback width.
        """
        height = self._spec.table.row_height if row_height is None else row_height
        header_specs = [HeaderSpec.coerce(header) for header in headers]

        self._fonts.bold_style()
        self._fonts.small_size()
        offset = 0.0
        for header in header_specs:
            self._cells.draw_cell(
                header.text,
                Cursor(pos.x + offset, pos.y),
                header.width,
                height,
                header.options,
                header.children or None,
            )
            offset += header.width * header.span

        columns = flatten_columns(header_specs)
        fallback = self._spec.gaps.large

        pos.y += height
        for row in coerce_rows(rows):
            offset = 0.0
            self._pages.ensure_space(pos, height)
            for index, cell in enumerate(row):
                width = column_width(columns, index, fallback)
                self._cells.draw_cell(
                    cell.text,
                    Cursor(pos.x + offset, pos.y),
                    width,
                    height,
                    cell.options,
                )
                offset += width
            pos.y += height

        if final_border:
            self._canvas.line(
                pos.x,
                pos.y,
                pos.x + sum(columns),
                pos.y,
                line_width=self._spec.line_width,
            )
