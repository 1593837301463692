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

from .types import HeaderSpec


def flatten_columns(headers: Sequence[HeaderSpec]) -> list[float]:
    """One width per data column; a header with children yields one per child."""
    widths: list[float] = []
    for header in headers:
        widths.extend([header.width] * header.span)
    return widths


def header_cell_count(headers: Sequence[HeaderSpec]) -> int:
    return len(headers) + sum(len(header.children) for header in headers)


def column_width(columns: Sequence[float], index: int, fallback: float) -> float:
    if index < len(columns):
        return columns[index]
    return fallback


def rounded_rect_outline(
    x: float, y: float, width: float, height: float, radius: float
) -> list[tuple[str, tuple[float, ...]]]:
    """Path segments for a rounded rectangle, clockwise from the top edge.

    Each segment is ``("move" | "line", (x, y))`` or
    ``("quad", (cx, cy, x, y))`` for a quadratic curve.
    """
    right = x + width
    bottom = y + height
    return [
        ("move", (x + radius, y)),
        ("line", (right - radius, y)),
        ("quad", (right, y, right, y + radius)),
        ("line", (right, bottom - radius)),
        ("quad", (right, bottom, right - radius, bottom)),
        ("line", (x + radius, bottom)),
        ("quad", (x, bottom, x, bottom - radius)),
        ("line", (x, y + radius)),
        ("quad", (x, y, x + radius, y)),
    ]
