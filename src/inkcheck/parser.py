"""Plain text parser producing the document tree.

Understands a small markdown-like subset:

- ``#`` headers start a new section (the number of ``#`` is the level)
- blank lines separate paragraphs
- lines starting with ``-``, ``*`` or ``+`` are list elements; indentation
  by two spaces increases the element level
- everything else is paragraph text, split into sentences on terminal
  punctuation
"""

import logging
import re
from pathlib import Path

from inkcheck.errors import ParseError
from inkcheck.models import (
    Document,
    DocumentCollection,
    LineOffset,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
)

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"^(#{1,6})\s+(.*)$")
_LIST_ITEM = re.compile(r"^(\s*)[-*+]\s+(.*)$")
_SENTENCE_END = re.compile(r"[.!?](?=\s|$)|[。！？]")


class PlainTextParser:
    """Parses plain text files into ``Document`` trees."""

    def parse_file(self, path: Path) -> Document:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Failed to read {path}: {e}")
        return self.parse(text, file_name=str(path))

    def parse_files(self, paths: list[Path]) -> DocumentCollection:
        collection = DocumentCollection()
        for path in paths:
            collection.add(self.parse_file(path))
        logger.info(f"Parsed {len(collection)} documents")
        return collection

    def parse(self, text: str, file_name: str | None = None) -> Document:
        document = Document(file_name=file_name)
        section = Section(level=0)
        # (line_number, column, text) pieces of the paragraph being read
        paragraph_lines: list[tuple[int, int, str]] = []
        list_block: ListBlock | None = None

        def close_paragraph():
            if paragraph_lines:
                section.paragraphs.append(Paragraph(sentences=split_sentences(paragraph_lines)))
                paragraph_lines.clear()

        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                close_paragraph()
                list_block = None
                continue

            header = _HEADER.match(line)
            if header:
                close_paragraph()
                list_block = None
                if section.header_contents or section.paragraphs or section.list_blocks:
                    document.sections.append(section)
                section = Section(level=len(header.group(1)))
                section.header_contents = split_sentences([(line_number, header.start(2), header.group(2))])
                continue

            item = _LIST_ITEM.match(line)
            if item:
                close_paragraph()
                if list_block is None:
                    list_block = ListBlock()
                    section.list_blocks.append(list_block)
                level = len(item.group(1).expandtabs(2)) // 2 + 1
                list_block.list_elements.append(ListElement(
                    level=level,
                    sentences=split_sentences([(line_number, item.start(2), item.group(2))]),
                ))
                continue

            list_block = None
            stripped = line.lstrip()
            paragraph_lines.append((line_number, len(line) - len(stripped), stripped.rstrip()))

        close_paragraph()
        if section.header_contents or section.paragraphs or section.list_blocks or not document.sections:
            document.sections.append(section)
        return document


def split_sentences(lines: list[tuple[int, int, str]]) -> list[Sentence]:
    """Split consecutive source lines into sentences.

    Lines are joined with a single space; every character keeps the source
    position it came from so findings can point back into the file.
    """
    text = ""
    positions: list[LineOffset] = []
    for line_number, column, content in lines:
        if text:
            text += " "
            positions.append(positions[-1])
        text += content
        positions.extend(LineOffset(line_number=line_number, offset=column + i) for i in range(len(content)))

    sentences = []
    start = 0
    for match in _SENTENCE_END.finditer(text):
        sentences.append(_make_sentence(text, positions, start, match.end()))
        start = match.end()
    if text[start:].strip():
        sentences.append(_make_sentence(text, positions, start, len(text)))
    return [sentence for sentence in sentences if sentence is not None]


def _make_sentence(text: str, positions: list[LineOffset], start: int, end: int) -> Sentence | None:
    while start < end and text[start].isspace():
        start += 1
    if start >= end:
        return None
    first = positions[start]
    return Sentence(
        content=text[start:end],
        line_number=first.line_number,
        start_position_offset=first.offset,
        offset_map=positions[start:end],
    )
