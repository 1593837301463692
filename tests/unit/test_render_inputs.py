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
from unittest import mock

from formpress.layout.options import CellOptions
from formpress.layout.types import Cursor, TextInputField
from tests.test_support import recording_document


def _box_origins(canvas) -> list[tuple[float, float]]:
    origins = []
    for args, _ in canvas.named("stroke_path"):
        kind, (x, y) = args[0][0]
        assert kind == "move"
        origins.append((x - 5, y))
    return origins


class TestPrintInput(unittest.TestCase):
    def setUp(self) -> None:
        self.doc, self.canvas = recording_document()

    def test_rounded_box_advances_cursor(self) -> None:
        pos = Cursor(50, 100)
        self.doc.print_input(pos, 150, 30)

        self.assertEqual(pos, Cursor(50, 130))
        (args, kwargs), = self.canvas.named("stroke_path")
        segments = args[0]
        self.assertEqual(segments[0], ("move", (55, 100)))
        self.assertEqual(segments[3], ("line", (200, 125)))
        self.assertEqual(kwargs["line_width"], 0.1)
        self.assertEqual(kwargs["stroke_opacity"], 1.0)

    def test_default_height(self) -> None:
        pos = Cursor(12, 12)
        self.doc.print_input(pos, 100)
        self.assertEqual(pos.y, 35)


class TestPrintInputText(unittest.TestCase):
    def setUp(self) -> None:
        self.doc, self.canvas = recording_document()

    def test_label_and_value_positions(self) -> None:
        pos = Cursor(50, 100)
        options = CellOptions(align="center", font_style="bold")
        self.doc.print_input_text(pos, "Label", "Value", 150, 30, options)

        self.assertEqual(pos, Cursor(50, 100))
        self.assertEqual(_box_origins(self.canvas), [(50, 100)])
        label, value = self.canvas.named("text")
        self.assertEqual(label[0], ("Label", 52.5, 102.5))
        self.assertEqual(label[1]["size"], 5.0)
        self.assertTrue(label[1]["bold"])
        self.assertEqual(value[0], ("Value", 115.0, 111.0))
        self.assertEqual(value[1]["size"], 9.0)
        self.assertFalse(value[1]["bold"])
        self.assertEqual(self.canvas.font_size, 7.0)

    def test_breaks_page_before_drawing(self) -> None:
        pos = Cursor(12, 800)
        self.doc.print_input_text(pos, "Label", "Value", 100)
        self.assertEqual(self.doc.total_page_number, 2)
        self.assertEqual(pos.y, 12)
        self.assertEqual(_box_origins(self.canvas), [(12, 12)])

    def test_fit_overflow_grows_box(self) -> None:
        pos = Cursor(12, 100)
        options = CellOptions(fit_overflow=True)
        self.doc.print_input_text(pos, None, "a\nb\nc\nd", 100, None, options)

        (args, _), = self.canvas.named("stroke_path")
        self.assertAlmostEqual(args[0][3][1][1], 100 + 54 - 5)
        self.assertAlmostEqual(pos.y, 154)
        self.assertEqual([text for text, _, _ in self.canvas.texts()], ["a", "b", "c", "d"])
        self.assertEqual([y for _, _, y in self.canvas.texts()], [106, 115, 124, 133])

    def test_fit_overflow_keeps_minimum_height(self) -> None:
        pos = Cursor(12, 100)
        self.doc.print_input_text(pos, "L", "x", 100, None, CellOptions(fit_overflow=True))
        self.assertEqual(pos.y, 123)

    def test_explicit_height_used_without_fit_overflow(self) -> None:
        pos = Cursor(12, 100)
        self.doc.print_input_text(pos, "L", "x", 100, 40)
        (args, _), = self.canvas.named("stroke_path")
        self.assertEqual(args[0][3], ("line", (112, 135)))


class TestPrintLabelAndValue(unittest.TestCase):
    def setUp(self) -> None:
        self.doc, self.canvas = recording_document()

    def test_centered_value_with_font_override(self) -> None:
        options = CellOptions(font_style="bold", align="center", input_font_size=12)
        self.doc.print_label_and_value(Cursor(50, 100), 23, "Label:", "Value", 200, options)

        self.assertEqual(self.canvas.texts(), [("Label:", 52.5, 102.5), ("Value", 136.25, 111.0)])
        size_calls = [args[0] for args, _ in self.canvas.named("set_font_size")]
        self.assertEqual(size_calls, [5.0, 12.0, 7.0])

    def test_missing_width_clamps_offset(self) -> None:
        options = CellOptions(align="center", input_font_size=12)
        self.doc.print_label_and_value(Cursor(50, 100), 23, "Label:", "Value", None, options)
        self.assertEqual(self.canvas.texts()[-1], ("Value", 50, 111.0))

    def test_without_label(self) -> None:
        self.doc.print_label_and_value(Cursor(50, 100), 23, None, "Value", 200)
        self.assertEqual(self.canvas.texts(), [("Value", 52.5, 106.0)])

    def test_value_lines_below_box_are_dropped(self) -> None:
        self.doc.print_label_and_value(Cursor(50, 100), 23, None, "one\ntwo\nthree", 200)
        self.assertEqual([text for text, _, _ in self.canvas.texts()], ["one"])

    def test_empty_value_draws_label_only(self) -> None:
        self.doc.print_label_and_value(Cursor(50, 100), 23, "Label", None, 200)
        self.assertEqual([text for text, _, _ in self.canvas.texts()], ["Label"])


class TestPrintMultipleInputText(unittest.TestCase):
    def setUp(self) -> None:
        self.doc, self.canvas = recording_document()
        self.rows = [
            [
                {"label": "Label 1", "value": "Value 1", "width": 100},
                {"label": "Label 2", "value": "Value 2", "width": 150},
                TextInputField(width=200, label="Label 3", value="Value 3", height=30),
            ],
            [
                {"label": "Label 4", "value": "Value 4", "width": 80},
                {"label": "Label 5", "value": "Value 5", "width": 60},
                {"label": "Label 6", "value": "Value 6", "height": 10},
            ],
        ]

    def test_grid_layout(self) -> None:
        pos = Cursor(50, 100)
        inputs = self.doc.inputs
        with mock.patch.object(inputs, "print_input_text", wraps=inputs.print_input_text) as spy:
            self.doc.print_multiple_input_text(pos, self.rows)

        self.assertEqual(spy.call_count, 6)
        self.assertEqual(spy.call_args_list[2].args[1:5], ("Label 3", "Value 3", 200.0, 30.0))
        self.assertEqual(spy.call_args_list[5].args[1:6], ("Label 6", "Value 6", 0.0, 10.0, None))
        self.assertEqual(pos, Cursor(12, 146))
        self.assertEqual(
            _box_origins(self.canvas),
            [(50, 100), (150, 100), (300, 100), (12, 123), (92, 123), (152, 123)],
        )

    def test_empty_rows_leave_cursor(self) -> None:
        pos = Cursor(50, 100)
        self.doc.print_multiple_input_text(pos, [])
        self.assertEqual(pos, Cursor(50, 100))


if __name__ == "__main__":
    unittest.main()
