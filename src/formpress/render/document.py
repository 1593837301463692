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

"""Paginated form documents.

A :class:`Document` owns a drawing canvas and the page state of one PDF.
Every ``print_*`` method takes a caller-held :class:`~formpress.layout.types.Cursor`
and may advance it in place; see each method for what moves.
"""

from __future__ import annotations

import functools
import io
from typing import Any, Callable, Sequence, TypeVar, cast

from ..canvas import Canvas, FpdfCanvas
from ..layout.options import Align, CellOptions
from ..layout.spec import LayoutSpec, PageSize
from ..layout.text import align_offset, wrap_text
from ..layout.types import Cursor
from .cells import CellRenderer
from .fonts import Fonts
from .inputs import FieldInput, InputFieldRenderer
from .pages import PageManager
from .tables import CellInput, HeaderInput, TableRenderer

_F = TypeVar("_F", bound=Callable[..., Any])


class DocumentFinalizedError(RuntimeError):
    """Raised when a finalized document is drawn on or finalized again."""


def _drawing(method: _F) -> _F:
    @functools.wraps(method)
    def wrapper(self: "Document", *args: Any, **kwargs: Any) -> Any:
        self._ensure_open()
        return method(self, *args, **kwargs)

    return cast(_F, wrapper)


class Document:
    def __init__(
        self,
        page_size: PageSize = "A4",
        margin: float | None = None,
        *,
        spec: LayoutSpec | None = None,
        canvas: Canvas | None = None,
    ) -> None:
        spec = spec or LayoutSpec()
        if margin is not None:
            spec = spec.with_margin(margin)
        self.spec = spec
        self.canvas: Canvas = canvas if canvas is not None else FpdfCanvas(page_size)
        self.fonts = Fonts(self.canvas, spec.fonts)
        self.pages = PageManager(self.canvas, spec, self.fonts)
        self.cells = CellRenderer(self.canvas, spec, self.fonts)
        self.tables = TableRenderer(self.canvas, spec, self.fonts, self.pages, self.cells)
        self.inputs = InputFieldRenderer(self.canvas, spec, self.fonts, self.pages)
        self._buffer: bytes | None = None
        self._closed = False
        self.fonts.normal_style()
        self.fonts.normal_size()

    # page state -----------------------------------------------------------

    @property
    def margin(self) -> float:
        return self.spec.margin

    @property
    def page_width(self) -> float:
        return self.pages.page_width

    @property
    def page_height(self) -> float:
        return self.pages.page_height

    @property
    def input_height(self) -> float:
        return self.spec.inputs.height

    @property
    def current_page_number(self) -> int:
        return self.pages.state.current_page_number

    @property
    def total_page_number(self) -> int:
        return self.pages.state.total_page_number

    @property
    def watermark(self) -> str | None:
        return self.pages.watermark

    @property
    def finalized(self) -> bool:
        return self._buffer is not None

    @property
    def buffer(self) -> bytes:
        if self._buffer is None:
            if self._closed:
                raise DocumentFinalizedError("document failed to finalize")
            raise DocumentFinalizedError("document has not been finalized yet")
        return self._buffer

    def cursor(self) -> Cursor:
        """A cursor at the top-left margin."""
        return Cursor(self.margin, self.margin)

    # fonts ----------------------------------------------------------------

    @_drawing
    def set_big_font_size(self) -> "Document":
        self.fonts.big_size()
        return self

    @_drawing
    def set_normal_font_size(self) -> "Document":
        self.fonts.normal_size()
        return self

    @_drawing
    def set_medium_font_size(self) -> "Document":
        self.fonts.medium_size()
        return self

    @_drawing
    def set_small_font_size(self) -> "Document":
        self.fonts.small_size()
        return self

    @_drawing
    def set_normal_font_style(self) -> "Document":
        self.fonts.normal_style()
        return self

    @_drawing
    def set_bold_font_style(self) -> "Document":
        self.fonts.bold_style()
        return self

    # text helpers ---------------------------------------------------------

    def split_text_to_lines(self, text: str | None, max_width: float) -> list[str]:
        return wrap_text(text, max_width, self.canvas.string_width)

    def get_gap_by_align(
        self, text: str, width: float, gap: float, align: Align | None = None
    ) -> float:
        return align_offset(text, width, gap, align, self.canvas.string_width)

    @_drawing
    def print_text(
        self, pos: Cursor, texts: Sequence[str], font_gap: float | None = None
    ) -> "Document":
        """Draw each string at ``pos`` and step ``pos.y`` by the normal size plus ``font_gap``."""
        gap = self.spec.gaps.small if font_gap is None else font_gap
        for text in texts:
            self.canvas.text(text, pos.x, pos.y)
            pos.y += self.spec.fonts.normal_size + gap
        return self

    # pages ----------------------------------------------------------------

    @_drawing
    def set_watermark(self, text: str | None) -> "Document":
        self.pages.watermark = text or None
        return self

    @_drawing
    def print_watermark(self) -> "Document":
        self.pages.stamp_watermark()
        return self

    @_drawing
    def add_page(self) -> "Document":
        self.pages.create_page()
        return self

    @_drawing
    def add_page_if_needed(self, pos: Cursor, increment: float = 0.0) -> bool:
        return self.pages.ensure_space(pos, increment)

    # cells and tables -----------------------------------------------------

    @_drawing
    def draw_cell_borders(
        self,
        pos: Cursor,
        width: float,
        height: float,
        options: CellOptions | None = None,
    ) -> None:
        self.cells.draw_borders(pos, width, height, options)

    @_drawing
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
        self.cells.draw_cell(text, pos, width, height, options, children, value_gap_y, value_gap_x)

    @_drawing
    def print_table(
        self,
        pos: Cursor,
        headers: Sequence[HeaderInput],
        rows: Sequence[Sequence[CellInput]],
        row_height: float | None = None,
        final_border: bool = True,
    ) -> "Document":
        self.tables.print_table(pos, headers, rows, row_height, final_border)
        return self

    # inputs ---------------------------------------------------------------

    @_drawing
    def print_input(
        self,
        pos: Cursor,
        width: float,
        height: float | None = None,
        radius: float | None = None,
        stroke_opacity: float = 1.0,
    ) -> "Document":
        self.inputs.print_input(pos, width, height, radius, stroke_opacity)
        return self

    @_drawing
    def print_input_text(
        self,
        pos: Cursor,
        label: str | None = None,
        value: str | None = None,
        width: float = 0.0,
        height: float | None = None,
        options: CellOptions | None = None,
    ) -> "Document":
        self.inputs.print_input_text(pos, label, value, width, height, options)
        return self

    @_drawing
    def print_label_and_value(
        self,
        pos: Cursor,
        input_height: float,
        label: str | None = None,
        value: str | None = None,
        input_width: float | None = None,
        options: CellOptions | None = None,
    ) -> "Document":
        self.inputs.print_label_and_value(pos, input_height, label, value, input_width, options)
        return self

    @_drawing
    def print_multiple_input_text(
        self, pos: Cursor, rows: Sequence[Sequence[FieldInput]]
    ) -> "Document":
        self.inputs.print_multiple_input_text(pos, rows)
        return self

    # output ---------------------------------------------------------------

    def finalize(self) -> bytes:
        """Stamp the open page, close the canvas and return the PDF bytes.

        Later draw and finalize calls are rejected from the first call on,
        even when closing the canvas raises.
        """
        self._ensure_open()
        self._closed = True
        self.pages.stamp_watermark()
        with io.BytesIO() as sink:
            for chunk in self.canvas.close():
                sink.write(chunk)
            self._buffer = sink.getvalue()
        return self._buffer

    def _ensure_open(self) -> None:
        if self._closed:
            raise DocumentFinalizedError("document is already finalized")
