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

"""Per-draw cell options.

Options are resolved once per draw call. Missing fields fall back to the
documented defaults: normal font style, both borders on, left alignment, no
gap, no font size override and a fixed field height.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Literal, Mapping

Align = Literal["left", "center", "right"]
FontStyle = Literal["normal", "bold"]

ALIGNMENTS: tuple[str, ...] = ("left", "center", "right")
FONT_STYLES: tuple[str, ...] = ("normal", "bold")

_KEY_ALIASES = {
    "fontStyle": "font_style",
    "horizontalBorder": "horizontal_border",
    "verticalBorder": "vertical_border",
    "inputFontSize": "input_font_size",
    "fitOverflow": "fit_overflow",
}


@dataclass(frozen=True)
class CellOptions:
    font_style: FontStyle = "normal"
    horizontal_border: bool = True
    vertical_border: bool = True
    align: Align = "left"
    input_font_size: float | None = None
    gap: float | None = None
    fit_overflow: bool = False

    def __post_init__(self) -> None:
        if self.align not in ALIGNMENTS:
            raise ValueError(f"align must be one of {', '.join(ALIGNMENTS)}")
        if self.font_style not in FONT_STYLES:
            raise ValueError(f"font_style must be one of {', '.join(FONT_STYLES)}")

    @property
    def bold(self) -> bool:
        return self.font_style == "bold"

    def merged(self, **overrides: Any) -> "CellOptions":
        return replace(self, **overrides)

    @classmethod
    def coerce(cls, value: "CellOptions | Mapping[str, Any] | None") -> "CellOptions":
        if value is None:
            return DEFAULT_OPTIONS
        if isinstance(value, CellOptions):
            return value
        if not isinstance(value, Mapping):
            raise TypeError("options must be a mapping or CellOptions")
        known = {item.name for item in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, raw_value in value.items():
            key = _KEY_ALIASES.get(str(raw_key), str(raw_key))
            if key not in known or raw_value is None:
                continue
            kwargs[key] = raw_value
        if "font_style" in kwargs and kwargs["font_style"] != "bold":
            kwargs["font_style"] = "normal"
        for key in ("input_font_size", "gap"):
            if key in kwargs:
                kwargs[key] = float(kwargs[key])
        for key in ("horizontal_border", "vertical_border", "fit_overflow"):
            if key in kwargs:
                kwargs[key] = bool(kwargs[key])
        return cls(**kwargs)


DEFAULT_OPTIONS = CellOptions()
