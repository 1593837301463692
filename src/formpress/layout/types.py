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

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .options import CellOptions


@dataclass
class Cursor:
    """Next free drawing position.

    Renderers advance a cursor in place, so sibling calls in a loop see the
    updated position. Use ``copy()`` for a position that must not move.
    """

    x: float
    y: float

    def copy(self) -> "Cursor":
        return Cursor(self.x, self.y)


@dataclass(frozen=True)
class HeaderSpec:
    text: str
    width: float
    children: tuple[str, ...] = ()
    options: CellOptions | None = None

    @property
    def span(self) -> int:
        return max(len(self.children), 1)

    @classmethod
    def coerce(cls, value: "HeaderSpec | Mapping[str, Any]") -> "HeaderSpec":
        if isinstance(value, HeaderSpec):
            return value
        children = value.get("children") or ()
        return cls(
            text=str(value.get("text", "")),
            width=float(value["width"]),
            children=tuple(str(child) for child in children),
            options=_coerce_options(value.get("options")),
        )


@dataclass(frozen=True)
class DataCell:
    text: str
    options: CellOptions | None = None

    @classmethod
    def coerce(cls, value: "DataCell | Mapping[str, Any] | str") -> "DataCell":
        if isinstance(value, DataCell):
            return value
        if isinstance(value, str):
            return cls(text=value)
        return cls(text=str(value.get("text", "")), options=_coerce_options(value.get("options")))


@dataclass(frozen=True)
class TextInputField:
    width: float
    label: str | None = None
    value: str | None = None
    height: float | None = None
    options: CellOptions | None = None

    @classmethod
    def coerce(cls, value: "TextInputField | Mapping[str, Any]") -> "TextInputField":
        if isinstance(value, TextInputField):
            return value
        height = value.get("height")
        label = value.get("label")
        text = value.get("value")
        return cls(
            width=float(value.get("width", 0)),
            label=None if label is None else str(label),
            value=None if text is None else str(text),
            height=None if height is None else float(height),
            options=_coerce_options(value.get("options")),
        )


@dataclass
class PageState:
    current_page_number: int = 1
    total_page_number: int = 1

    def advance(self) -> None:
        self.current_page_number += 1
        self.total_page_number += 1


def coerce_rows(rows: Sequence[Sequence[Any]]) -> list[list[DataCell]]:
    return [[DataCell.coerce(cell) for cell in row] for row in rows]


def _coerce_options(value: object) -> CellOptions | None:
    if value is None:
        return None
    return CellOptions.coerce(value)  # type: ignore[arg-type]
