from .document import Document, DocumentFinalizedError
from .pages import PageManager

__all__ = [
    "Document",
    "DocumentFinalizedError",
    "PageManager",
]
