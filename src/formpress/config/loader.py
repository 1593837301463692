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

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..layout.spec import PAGE_SIZES, FontSpec, InputSpec, LayoutSpec, TableSpec
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path


@dataclass(frozen=True)
class AppConfig:
    paper_size: str = DEFAULT_PAPER_SIZE
    layout: LayoutSpec = field(default_factory=LayoutSpec)
    watermark: str | None = None
    source: Path | None = None


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    return parse_app_config(data, paper_size=paper_size, source=config_path)


def parse_app_config(
    data: dict[str, object],
    *,
    paper_size: str | None = None,
    source: Path | None = None,
) -> AppConfig:
    page_cfg = _get_dict(data, "page")
    resolved_paper = paper_size or _parse_optional_str(page_cfg.get("size")) or DEFAULT_PAPER_SIZE
    resolved_paper = resolved_paper.strip().upper()
    if resolved_paper not in PAGE_SIZES:
        raise ValueError(f"page.size must be one of {', '.join(sorted(PAGE_SIZES))}")

    defaults = LayoutSpec()
    margin = _parse_float(page_cfg.get("margin"), default=defaults.margin, field="page.margin")
    if margin < 0:
        raise ValueError("page.margin must not be negative")

    layout = replace(
        defaults,
        margin=margin,
        fonts=_parse_fonts(_get_dict(data, "fonts"), defaults.fonts),
        inputs=_parse_inputs(_get_dict(data, "input"), defaults.inputs),
        table=_parse_table(_get_dict(data, "table"), defaults.table),
    )
    watermark = _parse_optional_str(_get_dict(data, "document").get("watermark"))
    return AppConfig(
        paper_size=resolved_paper,
        layout=layout,
        watermark=watermark or None,
        source=source,
    )


def _parse_fonts(cfg: dict[str, object], defaults: FontSpec) -> FontSpec:
    family = _parse_optional_str(cfg.get("family")) or defaults.family
    sizes = {
        name: _parse_positive_float(
            cfg.get(name), default=getattr(defaults, name), field=f"fonts.{name}"
        )
        for name in (
            "input_size",
            "label_size",
            "small_size",
            "normal_size",
            "medium_size",
            "big_size",
        )
    }
    return replace(defaults, family=family, **sizes)


def _parse_inputs(cfg: dict[str, object], defaults: InputSpec) -> InputSpec:
    return replace(
        defaults,
        height=_parse_positive_float(
            cfg.get("height"), default=defaults.height, field="input.height"
        ),
        radius=_parse_float(cfg.get("radius"), default=defaults.radius, field="input.radius"),
    )


def _parse_table(cfg: dict[str, object], defaults: TableSpec) -> TableSpec:
    return replace(
        defaults,
        row_height=_parse_positive_float(
            cfg.get("row_height"), default=defaults.row_height, field="table.row_height"
        ),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return None


def _parse_float(value: object, *, default: float, field: str) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise ValueError(f"{field} must be a number") from None
    raise ValueError(f"{field} must be a number")


def _parse_positive_float(value: object, *, default: float, field: str) -> float:
    parsed = _parse_float(value, default=default, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be positive")
    return parsed
