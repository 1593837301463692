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

"""Declarative job files.

A job is a mapping with an optional ``page`` table (``size``, ``margin``), an
optional ``watermark`` and a ``blocks`` list drawn top to bottom with one
shared cursor. Block types: ``text``, ``input``, ``inputs``, ``table``,
``spacer`` and ``page_break``.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping

from .config.loader import AppConfig
from .layout.spec import PAGE_SIZES
from .layout.types import Cursor, TextInputField
from .render.document import Document

BlockHandler = Callable[[Document, Cursor, Mapping[str, Any]], None]


def load_job(path: str | Path) -> dict[str, Any]:
    job_path = Path(path)
    suffix = job_path.suffix.lower()
    if suffix == ".toml":
        with job_path.open("rb") as handle:
            data = tomllib.load(handle)
    elif suffix == ".json":
        with job_path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"invalid job file {job_path}: {exc}") from exc
    else:
        raise ValueError(f"unsupported job file type: {job_path.suffix or job_path.name}")
    if not isinstance(data, dict):
        raise ValueError("job file must contain a table/object at the top level")
    return data


def build_document(job: Mapping[str, Any], config: AppConfig | None = None) -> Document:
    config = config or AppConfig()
    page = job.get("page") or {}
    if not isinstance(page, Mapping):
        raise ValueError("job.page must be a table")
    page_size = _page_size(page.get("size"), default=config.paper_size)
    margin = page.get("margin")
    document = Document(
        page_size,
        None if margin is None else float(margin),
        spec=config.layout,
    )
    watermark = job.get("watermark", config.watermark)
    if watermark:
        document.set_watermark(str(watermark))

    blocks = job.get("blocks") or []
    if not isinstance(blocks, list):
        raise ValueError("job.blocks must be a list")
    cursor = document.cursor()
    for index, block in enumerate(blocks):
        if not isinstance(block, Mapping):
            raise ValueError(f"block {index} must be a table")
        kind = str(block.get("type", "")).strip().lower()
        handler = _BLOCK_HANDLERS.get(kind)
        if handler is None:
            raise ValueError(f"block {index}: unknown type {kind or '<missing>'!r}")
        handler(document, cursor, block)
    return document


def render_job(job: Mapping[str, Any], config: AppConfig | None = None) -> bytes:
    return build_document(job, config).finalize()


def _page_size(value: object, *, default: str) -> str | tuple[float, float]:
    if value is None:
        return default
    if isinstance(value, str):
        if value.strip().upper() not in PAGE_SIZES:
            raise ValueError(f"unknown page size: {value}")
        return value
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    raise ValueError("page.size must be a name or [width, height]")


def _move(cursor: Cursor, block: Mapping[str, Any]) -> None:
    if "x" in block:
        cursor.x = float(block["x"])
    if "y" in block:
        cursor.y = float(block["y"])


def _text_block(document: Document, cursor: Cursor, block: Mapping[str, Any]) -> None:
    _move(cursor, block)
    lines = block.get("lines") or []
    if isinstance(lines, str):
        lines = lines.split("\n")
    gap = block.get("gap")
    document.print_text(cursor, [str(line) for line in lines], None if gap is None else float(gap))


def _input_block(document: Document, cursor: Cursor, block: Mapping[str, Any]) -> None:
    _move(cursor, block)
    field = TextInputField.coerce(block)
    document.print_input_text(
        cursor,
        field.label,
        field.value,
        field.width,
        field.height,
        field.options,
    )
    if not (field.options and field.options.fit_overflow):
        cursor.y += document.input_height if field.height is None else field.height


def _inputs_block(document: Document, cursor: Cursor, block: Mapping[str, Any]) -> None:
    _move(cursor, block)
    rows = block.get("rows") or []
    document.print_multiple_input_text(cursor, rows)


def _table_block(document: Document, cursor: Cursor, block: Mapping[str, Any]) -> None:
    _move(cursor, block)
    row_height = block.get("row_height")
    document.print_table(
        cursor,
        block.get("headers") or [],
        block.get("rows") or [],
        None if row_height is None else float(row_height),
        bool(block.get("final_border", True)),
    )


def _spacer_block(document: Document, cursor: Cursor, block: Mapping[str, Any]) -> None:
    height = float(block.get("height", 0))
    if not document.add_page_if_needed(cursor, height):
        cursor.y += height


def _page_break_block(document: Document, cursor: Cursor, block: Mapping[str, Any]) -> None:
    document.add_page()
    cursor.x = document.margin
    cursor.y = document.margin


_BLOCK_HANDLERS: dict[str, BlockHandler] = {
    "text": _text_block,
    "input": _input_block,
    "inputs": _inputs_block,
    "table": _table_block,
    "spacer": _spacer_block,
    "page_break": _page_break_block,
}
