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

import io
import zipfile
from typing import Any, Iterable, Mapping

from .render.document import Document

_FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)

ArchiveEntry = tuple[str, bytes | bytearray | Document] | Mapping[str, Any]


def zip_documents(entries: Iterable[ArchiveEntry]) -> bytes:
    """Bundle finished documents into one deflated ZIP archive.

    Entries are ``(name, data)`` pairs where ``data`` is PDF bytes or a
    finalized :class:`Document`, or mappings with ``name`` and ``buffer``.
    """
    seen: set[str] = set()
    with io.BytesIO() as sink:
        with zipfile.ZipFile(sink, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for entry in entries:
                name, payload = _entry_parts(entry)
                if name in seen:
                    raise ValueError(f"duplicate archive entry: {name}")
                seen.add(name)
                info = zipfile.ZipInfo(filename=name, date_time=_FIXED_DATE_TIME)
                archive.writestr(info, payload, compress_type=zipfile.ZIP_DEFLATED)
        return sink.getvalue()


def _entry_parts(entry: ArchiveEntry) -> tuple[str, bytes]:
    if isinstance(entry, Mapping):
        name = entry.get("name")
        data = entry.get("buffer")
    else:
        name, data = entry
    if not isinstance(name, str) or not name.strip():
        raise ValueError("archive entry name cannot be empty")
    if isinstance(data, Document):
        data = data.buffer
    if not isinstance(data, (bytes, bytearray)):
        raise ValueError(f"archive entry {name} has no document bytes")
    return name.strip(), bytes(data)
