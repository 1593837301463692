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

from dataclasses import dataclass, field, replace

# Page sizes in points (portrait).
PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A3": (841.89, 1190.55),
    "A4": (595.28, 841.89),
    "A5": (420.94, 595.28),
    "LETTER": (612.0, 792.0),
    "LEGAL": (612.0, 1008.0),
}

PageSize = str | tuple[float, float]


@dataclass(frozen=True)
class FontSpec:
    family: str = "Helvetica"
    input_size: float = 9.0
    label_size: float = 5.0
    small_size: float = 5.0
    normal_size: float = 7.0
    medium_size: float = 6.0
    big_size: float = 10.0
    line_height_multiplier: float = 1.2


@dataclass(frozen=True)
class GapSpec:
    small: float = 2.5
    medium: float = 5.0
    large: float = 15.0


@dataclass(frozen=True)
class InputSpec:
    height: float = 23.0
    radius: float = 5.0
    value_offset: float = 6.0


@dataclass(frozen=True)
class TableSpec:
    row_height: float = 13.0
    cell_padding: float = 1.5


@dataclass(frozen=True)
class WatermarkSpec:
    font_size: float = 48.0
    opacity: float = 0.2
    angle: float = 90.0
    origin: tuple[float, float] = (250.0, 421.0)
    position: tuple[float, float] = (72.0, 400.0)


@dataclass(frozen=True)
class LayoutSpec:
    margin: float = 12.0
    line_width: float = 0.1
    fonts: FontSpec = field(default_factory=FontSpec)
    gaps: GapSpec = field(default_factory=GapSpec)
    inputs: InputSpec = field(default_factory=InputSpec)
    table: TableSpec = field(default_factory=TableSpec)
    watermark: WatermarkSpec = field(default_factory=WatermarkSpec)

    def with_margin(self, margin: float) -> "LayoutSpec":
        return replace(self, margin=float(margin))


def page_dimensions(size: PageSize) -> tuple[float, float]:
    if isinstance(size, str):
        key = size.strip().upper()
        if key not in PAGE_SIZES:
            raise ValueError(f"unknown page size: {size}")
        return PAGE_SIZES[key]
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError("page dimensions must be positive")
    return (float(width), float(height))
