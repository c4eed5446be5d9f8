"""Pytest configuration and fixtures for inkcheck tests."""

import pytest

from inkcheck.distributor import ResultDistributor
from inkcheck.models import (
    Document,
    DocumentCollection,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
)


class RecordingDistributor(ResultDistributor):
    """Distributor remembering every notification it receives."""

    def __init__(self):
        self.events = []

    def flush_header(self):
        self.events.append(("header", None))

    def flush_result(self, error):
        self.events.append(("result", error))

    def flush_footer(self):
        self.events.append(("footer", None))

    @property
    def results(self):
        return [error for kind, error in self.events if kind == "result"]


def make_sentences(*contents, line_number=1):
    return [Sentence(content=content, line_number=line_number) for content in contents]


@pytest.fixture
def distributor():
    """Recording result distributor."""
    return RecordingDistributor()


@pytest.fixture
def structured_section():
    """Section with a header, two paragraphs and a two element list."""
    return Section(
        level=1,
        header_contents=make_sentences("Header."),
        paragraphs=[
            Paragraph(sentences=make_sentences("P1 first.", "P1 second.", line_number=2)),
            Paragraph(sentences=make_sentences("P2 only.", line_number=4)),
        ],
        list_blocks=[
            ListBlock(list_elements=[
                ListElement(sentences=make_sentences("E1 item.", line_number=6)),
                ListElement(sentences=make_sentences("E2 item.", line_number=7)),
            ]),
        ],
    )


@pytest.fixture
def single_sentence_collection():
    """Build a collection with one document holding one sentence."""
    def build(content, file_name="doc.txt"):
        section = Section(paragraphs=[Paragraph(sentences=make_sentences(content))])
        return DocumentCollection(documents=[Document(file_name=file_name, sections=[section])])
    return build
