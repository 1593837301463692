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

from typing import Callable

from .options import Align

Measure = Callable[[str], float]


def wrap_text(text: str | None, max_width: float, measure: Measure) -> list[str]:
    """Greedy word wrap.

    Explicit line breaks are honoured first and each segment is wrapped on its
    own. Words are never split: a word wider than ``max_width`` is placed alone
    on its line and allowed to overflow.
    """
    if not text:
        return []
    if "\n" in text:
        wrapped: list[str] = []
        for segment in text.split("\n"):
            wrapped.extend(wrap_text(segment, max_width, measure))
        return wrapped
    return _wrap_segment(text, max_width, measure)


def _wrap_segment(segment: str, max_width: float, measure: Measure) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in segment.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    lines.append(current)
    return lines


def align_offset(
    text: str,
    width: float,
    gap: float,
    align: Align | None,
    measure: Measure,
) -> float:
    if align == "center":
        return max(0.0, gap + (width - measure(text)) / 2)
    if align == "right":
        return max(0.0, width - measure(text) - gap)
    return gap


def line_height(font_size: float, multiplier: float = 1.2) -> float:
    return float(font_size) * multiplier
