import os
from contextlib import contextmanager
from typing import Any, Iterator
from unittest import mock

from formpress.render.document import Document

A4_WIDTH = 595.28
A4_HEIGHT = 841.89


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


# =============================================================================
# Canvas Fakes
# =============================================================================


class RecordingCanvas:
    """Canvas that records every drawing call instead of producing a PDF.

    Text width is ``len(text) * char_width``; without an explicit
    ``char_width`` each character is half the current font size wide.
    """

    def __init__(
        self,
        width: float = A4_WIDTH,
        height: float = A4_HEIGHT,
        *,
        char_width: float | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.char_width = char_width
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.family = "Helvetica"
        self.bold = False
        self.page_count = 1
        self.closed = False
        self._font_size = 12.0

    @property
    def font_size(self) -> float:
        return self._font_size

    def _record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))

    def set_font(self, family: str, *, bold: bool = False) -> None:
        self.family = family
        self.bold = bold
        self._record("set_font", family, bold=bold)

    def set_font_size(self, size: float) -> None:
        self._font_size = float(size)
        self._record("set_font_size", size)

    def string_width(self, text: str) -> float:
        per_char = self.char_width if self.char_width is not None else self._font_size * 0.5
        return len(text) * per_char

    def text(self, text: str, x: float, y: float) -> None:
        self._record("text", text, x, y, size=self._font_size, bold=self.bold)

    def line(self, x1: float, y1: float, x2: float, y2: float, *, line_width: float) -> None:
        self._record("line", x1, y1, x2, y2, line_width=line_width)

    def stroke_path(self, segments, *, line_width: float, stroke_opacity: float = 1.0) -> None:
        self._record(
            "stroke_path",
            list(segments),
            line_width=line_width,
            stroke_opacity=stroke_opacity,
        )

    def rotated_text(self, text, x, y, *, angle, origin, opacity) -> None:
        self._record(
            "rotated_text",
            text,
            x,
            y,
            angle=angle,
            origin=origin,
            opacity=opacity,
            size=self._font_size,
        )

    def add_page(self) -> None:
        self.page_count += 1
        self._record("add_page")

    def close(self) -> Iterator[bytes]:
        self.closed = True
        self._record("close")
        yield b"%PDF-1.3\n"
        yield b"%%EOF\n"

    # query helpers ---------------------------------------------------------

    def named(self, name: str) -> list[tuple[tuple[Any, ...], dict[str, Any]]]:
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]

    def texts(self) -> list[tuple[str, float, float]]:
        return [(args[0], args[1], args[2]) for args, _ in self.named("text")]

    def lines(self) -> list[tuple[float, float, float, float]]:
        return [args for args, _ in self.named("line")]

    def reset(self) -> None:
        self.calls.clear()


def recording_document(**kwargs: Any) -> tuple[Document, RecordingCanvas]:
    char_width = kwargs.pop("char_width", None)
    canvas = RecordingCanvas(char_width=char_width)
    document = Document(canvas=canvas, **kwargs)
    canvas.reset()
    return document, canvas
