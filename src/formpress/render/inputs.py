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
from ..layout.geometry import rounded_rect_outline
from ..layout.options import CellOptions
from ..layout.spec import LayoutSpec
from ..layout.text import align_offset, wrap_text
from ..layout.types import Cursor, TextInputField
from .fonts import Fonts
from .pages import PageManager

FieldInput = TextInputField | Mapping[str, Any]


class InputFieldRenderer:
    def __init__(self, canvas: Canvas, spec: LayoutSpec, fonts: Fonts, pages: PageManager) -> None:
        self._canvas = canvas
        self._spec = spec
        self._fonts = fonts
        self._pages = pages

    def print_input(
        self,
        pos: Cursor,
        width: float,
        height: float | None = None,
        radius: float | None = None,
        stroke_opacity: float = 1.0,
    ) -> None:
        """Stroke a rounded box at ``pos`` and move ``pos.y`` below it."""
        height = self._spec.inputs.height if height is None else height
        radius = self._spec.inputs.radius if radius is None else radius
        self._canvas.stroke_path(
            rounded_rect_outline(pos.x, pos.y, width, height, radius),
            line_width=self._spec.line_width,
            stroke_opacity=stroke_opacity,
        )
        pos.y += height

    def print_input_text(
        self,
        pos: Cursor,
        label: str | None = None,
        value: str | None = None,
        width: float = 0.0,
        height: float | None = None,
        options: CellOptions | None = None,
    ) -> None:
        """Draw an input box with its label and value overlaid.

        ``pos.y`` only moves when ``fit_overflow`` is set; otherwise the
        caller owns row advancement.
        """
        opts = CellOptions.coerce(options)
        default_height = self._spec.inputs.height
        height = default_height if height is None else height
        self._pages.ensure_space(pos, height - self._spec.margin)

        self._fonts.normal_style()
        self._fonts.size(self._fonts.spec.input_size)

        if opts.fit_overflow:
            lines = wrap_text(value or "", width, self._canvas.string_width)
            height = max((len(lines) + 1) * self._fonts.line_height(), default_height)

        self.print_input(pos.copy(), width, height)
        self.print_label_and_value(pos, height, label, value, width, opts)

        if opts.fit_overflow:
            pos.y += height

    def print_label_and_value(
        self,
        pos: Cursor,
        input_height: float,
        label: str | None = None,
        value: str | None = None,
        input_width: float | None = None,
        options: CellOptions | None = None,
    ) -> None:
        opts = CellOptions.coerce(options)
        fonts = self._fonts.spec
        gap = self._spec.gaps.small
        inner_width = input_width - gap if input_width else 0.0

        value_gap_y = self._spec.inputs.value_offset
        if label:
            value_gap_y += fonts.label_size

        if opts.bold:
            self._fonts.bold_style()
        self._fonts.size(fonts.label_size)
        if label:
            self._canvas.text(label, pos.x + gap, pos.y + gap)
        self._fonts.normal_style()

        text_size = opts.input_font_size if opts.input_font_size is not None else fonts.input_size
        self._fonts.size(text_size)
        measure = self._canvas.string_width
        value_gap_x = align_offset(value or "", inner_width, gap, opts.align, measure)

        text_pos = pos.copy()
        # Lines below the box are dropped.
        # TODO: carry dropped value lines into a continuation box on the next page.
        writable_height = input_height - fonts.label_size
        for index, line in enumerate(wrap_text(value or "", inner_width, measure)):
            if self._pages.ensure_space(text_pos, self._fonts.line_height()):
                self._fonts.normal_style()
                self._fonts.size(text_size)
            if self._fonts.line_height() * (index + 1) > writable_height:
                break
            self._canvas.text(line, text_pos.x + value_gap_x, text_pos.y + value_gap_y)
            text_pos.y += text_size

        self._fonts.normal_size()

    def print_multiple_input_text(self, pos: Cursor, rows: Sequence[Sequence[FieldInput]]) -> None:
        """Lay out rows of fields left to right.

        After each row ``pos.x`` returns to the margin and ``pos.y`` moves down
        by the default input height.
        """
        default_height = self._spec.inputs.height
        for row in rows:
            for item in row:
                field = TextInputField.coerce(item)
                self.print_input_text(
                    pos,
                    field.label,
                    field.value,
                    field.width,
                    default_height if field.height is None else field.height,
                    field.options,
                )
                pos.x += field.width
            pos.x = self._spec.margin
            pos.y += default_height
