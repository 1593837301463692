from .geometry import flatten_columns, header_cell_count
from .options import Align, CellOptions, FontStyle
from .spec import LayoutSpec, page_dimensions
from .text import align_offset, line_height, wrap_text
from .types import Cursor, DataCell, HeaderSpec, PageState, TextInputField

__all__ = [
    "Align",
    "CellOptions",
    "Cursor",
    "DataCell",
    "FontStyle",
    "HeaderSpec",
    "LayoutSpec",
    "PageState",
    "TextInputField",
    "align_offset",
    "flatten_columns",
    "header_cell_count",
    "line_height",
    "page_dimensions",
    "wrap_text",
]
