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

import unittest

from formpress.layout.types import Cursor
from tests.test_support import recording_document


class TestPageManager(unittest.TestCase):
    def setUp(self) -> None:
        self.doc, self.canvas = recording_document()

    def test_page_geometry(self) -> None:
        pages = self.doc.pages
        self.assertAlmostEqual(pages.page_width, 595.28 - 24)
        self.assertAlmostEqual(pages.page_height, 841.89 - 24)
        self.assertAlmostEqual(pages.bottom_limit, 841.89 - 36)

    def test_break_when_content_overflows(self) -> None:
        pos = Cursor(50, 1000)
        self.assertTrue(self.doc.add_page_if_needed(pos, 10))
        self.assertEqual(pos, Cursor(50, 12))
        self.assertEqual(self.doc.current_page_number, 2)
        self.assertEqual(self.doc.total_page_number, 2)
        self.assertEqual(len(self.canvas.named("add_page")), 1)
        self.assertEqual(self.canvas.font_size, 5.0)
        self.assertFalse(self.canvas.bold)

    def test_no_break_when_content_fits(self) -> None:
        pos = Cursor(50, 80)
        self.assertFalse(self.doc.add_page_if_needed(pos, 10))
        self.assertEqual(pos, Cursor(50, 80))
        self.assertEqual(self.doc.total_page_number, 1)
        self.assertEqual(self.canvas.named("add_page"), [])

    def test_break_boundary_is_exclusive(self) -> None:
        limit = self.doc.pages.bottom_limit
        self.assertFalse(self.doc.add_page_if_needed(Cursor(12, limit - 10), 10))
        self.assertTrue(self.doc.add_page_if_needed(Cursor(12, limit - 10), 10.5))

    def test_add_page_resets_fonts(self) -> None:
        self.doc.set_bold_font_style().set_big_font_size()
        self.doc.add_page()
        self.assertEqual(self.canvas.font_size, 7.0)
        self.assertFalse(self.canvas.bold)
        self.assertEqual(self.doc.current_page_number, 2)


class TestWatermark(unittest.TestCase):
    def test_stamp_uses_configured_style(self) -> None:
        doc, canvas = recording_document()
        doc.set_watermark("Watermark Text")
        doc.print_watermark()

        stamps = canvas.named("rotated_text")
        self.assertEqual(len(stamps), 1)
        args, kwargs = stamps[0]
        self.assertEqual(args, ("Watermark Text", 72.0, 400.0))
        self.assertEqual(kwargs["size"], 48.0)
        self.assertEqual(kwargs["opacity"], 0.2)
        self.assertEqual(kwargs["angle"], 90.0)
        self.assertEqual(kwargs["origin"], (250.0, 421.0))
        self.assertEqual(canvas.font_size, 7.0)

    def test_every_page_is_stamped_once(self) -> None:
        doc, canvas = recording_document()
        doc.set_watermark("DRAFT")
        doc.add_page()
        doc.add_page_if_needed(Cursor(12, 2000), 0)
        doc.finalize()
        self.assertEqual(doc.total_page_number, 3)
        self.assertEqual(len(canvas.named("rotated_text")), 3)

    def test_stamp_precedes_new_page(self) -> None:
        doc, canvas = recording_document()
        doc.set_watermark("DRAFT")
        doc.add_page()
        names = [name for name, _, _ in canvas.calls]
        self.assertLess(names.index("rotated_text"), names.index("add_page"))

    def test_no_watermark_no_stamp(self) -> None:
        doc, canvas = recording_document()
        doc.add_page()
        doc.finalize()
        self.assertEqual(canvas.named("rotated_text"), [])

    def test_empty_text_clears_watermark(self) -> None:
        doc, canvas = recording_document()
        doc.set_watermark("DRAFT").set_watermark("")
        self.assertIsNone(doc.watermark)
        doc.finalize()
        self.assertEqual(canvas.named("rotated_text"), [])


if __name__ == "__main__":
    unittest.main()
