"""Pydantic models for the document tree inkcheck validates."""

from inkcheck.models.document import (
    Document,
    DocumentCollection,
    LineOffset,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
    TokenElement,
)

__all__ = [
    "Document",
    "DocumentCollection",
    "LineOffset",
    "ListBlock",
    "ListElement",
    "Paragraph",
    "Section",
    "Sentence",
    "TokenElement",
]
