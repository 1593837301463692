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

"""Drawing backends.

The layout engine talks to a :class:`Canvas`; :class:`FpdfCanvas` is the
fpdf2 implementation. Coordinates are points with a top-left origin and the
``y`` passed to :meth:`Canvas.text` is the top of the text line.
"""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence

from fpdf import FPDF
from fpdf.enums import PathPaintRule

from .layout.spec import PageSize, page_dimensions

PathSegment = tuple[str, tuple[float, ...]]

# Helvetica ascender (718/1000 em); shifts a top-anchored y to the baseline.
_TEXT_ASCENT = 0.718
# Core fonts are WinAnsi encoded; other characters render as "?".
_CORE_FONT_ENCODING = "windows-1252"


class Canvas(Protocol):
    width: float
    height: float

    @property
    def font_size(self) -> float: ...

    def set_font(self, family: str, *, bold: bool = False) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def string_width(self, text: str) -> float: ...

    def text(self, text: str, x: float, y: float) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float, *, line_width: float) -> None: ...

    def stroke_path(
        self,
        segments: Sequence[PathSegment],
        *,
        line_width: float,
        stroke_opacity: float = 1.0,
    ) -> None: ...

    def rotated_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        angle: float,
        origin: tuple[float, float],
        opacity: float,
    ) -> None: ...

    def add_page(self) -> None: ...

    def close(self) -> Iterator[bytes]: ...


class FpdfCanvas:
    def __init__(self, page_size: PageSize = "A4") -> None:
        self.width, self.height = page_dimensions(page_size)
        pdf = FPDF(unit="pt", format=(self.width, self.height))
        pdf.set_auto_page_break(False)
        pdf.core_fonts_encoding = _CORE_FONT_ENCODING
        pdf.set_margins(0, 0, 0)
        pdf.add_page()
        self._pdf = pdf

    @property
    def font_size(self) -> float:
        return float(self._pdf.font_size_pt)

    @property
    def page_count(self) -> int:
        return self._pdf.pages_count

    def set_font(self, family: str, *, bold: bool = False) -> None:
        self._pdf.set_font(family, style="B" if bold else "")

    def set_font_size(self, size: float) -> None:
        self._pdf.set_font_size(size)

    def string_width(self, text: str) -> float:
        return float(self._pdf.get_string_width(_encodable(text)))

    def text(self, text: str, x: float, y: float) -> None:
        if not text:
            return
        self._pdf.text(x, y + self._pdf.font_size * _TEXT_ASCENT, _encodable(text))

    def line(self, x1: float, y1: float, x2: float, y2: float, *, line_width: float) -> None:
        self._pdf.set_line_width(line_width)
        self._pdf.set_dash_pattern()
        self._pdf.line(x1, y1, x2, y2)

    def stroke_path(
        self,
        segments: Sequence[PathSegment],
        *,
        line_width: float,
        stroke_opacity: float = 1.0,
    ) -> None:
        with self._pdf.new_path(paint_rule=PathPaintRule.STROKE) as path:
            path.style.stroke_width = line_width
            path.style.stroke_opacity = stroke_opacity
            for kind, coords in segments:
                if kind == "move":
                    path.move_to(*coords)
                elif kind == "line":
                    path.line_to(*coords)
                elif kind == "quad":
                    path.quadratic_curve_to(*coords)
                else:
                    raise ValueError(f"unknown path segment: {kind}")
            path.close()

    def rotated_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        angle: float,
        origin: tuple[float, float],
        opacity: float,
    ) -> None:
        with self._pdf.local_context(fill_opacity=opacity):
            with self._pdf.rotation(angle, x=origin[0], y=origin[1]):
                self.text(text, x, y)

    def add_page(self) -> None:
        self._pdf.add_page()

    def close(self) -> Iterator[bytes]:
        yield bytes(self._pdf.output())


def _encodable(text: str) -> str:
    return text.encode(_CORE_FONT_ENCODING, "replace").decode(_CORE_FONT_ENCODING)
