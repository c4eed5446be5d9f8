"""Models for the parsed document tree.

The tree is built by a parser and handed to the pipeline read-only. The only
fields validators are expected to write are ``Sentence.tokens`` and the
``annotations`` dictionaries, which pre-processors use to cache derived data
for the validation pass.
"""

from typing import Any

from pydantic import BaseModel, Field


class LineOffset(BaseModel):
    """Position in the source file: 1-based line, 0-based column."""
    line_number: int = Field(alias="lineNumber")
    offset: int

    model_config = {"populate_by_name": True, "frozen": True}

    def __str__(self) -> str:
        return f"{self.line_number}:{self.offset}"


class TokenElement(BaseModel):
    """A single token produced by a tokenizer."""
    surface: str
    offset: int = 0
    tags: list[str] = Field(default_factory=list)


class Sentence(BaseModel):
    """A sentence and its location in the source file."""
    content: str
    line_number: int = Field(alias="lineNumber", default=1)
    start_position_offset: int = Field(alias="startPositionOffset", default=0)
    offset_map: list[LineOffset] = Field(alias="offsetMap", default_factory=list)
    tokens: list[TokenElement] = Field(default_factory=list)
    annotations: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def get_offset(self, position: int) -> LineOffset:
        """Map a character position within the sentence to a source location."""
        if 0 <= position < len(self.offset_map):
            return self.offset_map[position]
        return LineOffset(line_number=self.line_number,
                          offset=self.start_position_offset + position)


class Paragraph(BaseModel):
    """A run of sentences separated from its neighbours by blank lines."""
    sentences: list[Sentence] = Field(default_factory=list)


class ListElement(BaseModel):
    """One item of a list block."""
    level: int = 1
    sentences: list[Sentence] = Field(default_factory=list)


class ListBlock(BaseModel):
    """A contiguous list of elements."""
    list_elements: list[ListElement] = Field(alias="listElements", default_factory=list)

    model_config = {"populate_by_name": True}


class Section(BaseModel):
    """A section: header content, paragraphs and list blocks."""
    level: int = 0
    header_contents: list[Sentence] = Field(alias="headerContents", default_factory=list)
    paragraphs: list[Paragraph] = Field(default_factory=list)
    list_blocks: list[ListBlock] = Field(alias="listBlocks", default_factory=list)
    annotations: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def sentence_blocks(self) -> list[list[Sentence]]:
        """Sentence lists in traversal order: header, paragraphs, list elements."""
        blocks = [self.header_contents]
        blocks.extend(paragraph.sentences for paragraph in self.paragraphs)
        for list_block in self.list_blocks:
            blocks.extend(element.sentences for element in list_block.list_elements)
        return blocks

    def iter_sentences(self):
        """Yield every sentence of the section in traversal order."""
        for block in self.sentence_blocks():
            yield from block

    @property
    def header_text(self) -> str:
        return " ".join(sentence.content for sentence in self.header_contents)


class Document(BaseModel):
    """A single input file."""
    file_name: str | None = Field(alias="fileName", default=None)
    sections: list[Section] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class DocumentCollection(BaseModel):
    """Ordered set of documents validated in one run."""
    documents: list[Document] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.documents)

    def add(self, document: Document) -> None:
        self.documents.append(document)
