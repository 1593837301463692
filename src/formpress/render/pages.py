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

from ..canvas import Canvas
from ..layout.spec import LayoutSpec
from ..layout.types import Cursor, PageState
from .fonts import Fonts


class PageManager:
    """Page breaks, page counters and watermark stamping for one document."""

    def __init__(self, canvas: Canvas, spec: LayoutSpec, fonts: Fonts) -> None:
        self._canvas = canvas
        self._spec = spec
        self._fonts = fonts
        self.state = PageState()
        self.watermark: str | None = None

    @property
    def margin(self) -> float:
        return self._spec.margin

    @property
    def page_width(self) -> float:
        return self._canvas.width - self._spec.margin * 2

    @property
    def page_height(self) -> float:
        return self._canvas.height - self._spec.margin * 2

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self._spec.margin

    def ensure_space(self, cursor: Cursor, required: float = 0.0) -> bool:
        """Start a new page when ``required`` points do not fit below ``cursor``.

        On a break ``cursor.y`` moves to the top margin and the small body
        style is reapplied; ``cursor.x`` is left alone.
        """
        if cursor.y + required > self.bottom_limit:
            self.create_page()
            self._fonts.normal_style()
            self._fonts.small_size()
            cursor.y = self._spec.margin
            return True
        return False

    def create_page(self) -> None:
        self.stamp_watermark()
        self._canvas.add_page()
        self.state.advance()
        self._fonts.reset()

    def stamp_watermark(self) -> None:
        if not self.watermark:
            return
        cfg = self._spec.watermark
        self._fonts.size(cfg.font_size)
        x, y = cfg.position
        self._canvas.rotated_text(
            self.watermark,
            x,
            y,
            angle=cfg.angle,
            origin=cfg.origin,
            opacity=cfg.opacity,
        )
        self._fonts.reset()
