"""Tests for the built-in validation rules."""

import pytest

from inkcheck.config import InkcheckConfig, ValidatorConfig
from inkcheck.models import (
    Document,
    LineOffset,
    ListBlock,
    ListElement,
    Paragraph,
    Section,
    Sentence,
    TokenElement,
)
from inkcheck.validation import format_message
from inkcheck.validation.rules import (
    DuplicateSectionValidator,
    EmptySectionValidator,
    EndOfSentenceValidator,
    InvalidWordValidator,
    SectionLengthValidator,
    SentenceLengthValidator,
    tokenize,
)


def config(name, **attributes):
    return ValidatorConfig(name=name, attributes=attributes)


def section(header=None, paragraphs=(), lists=()):
    return Section(
        header_contents=[Sentence(content=header)] if header else [],
        paragraphs=[Paragraph(sentences=[Sentence(content=text) for text in p]) for p in paragraphs],
        list_blocks=[
            ListBlock(list_elements=[ListElement(sentences=[Sentence(content=item)]) for item in items])
            for items in lists
        ],
    )


class TestFormatMessage:
    """Test positional message formatting."""

    def test_positional_arguments(self):
        assert format_message("{1} before {0}", ("a", "b")) == "b before a"

    def test_missing_argument_is_left_in_place(self):
        assert format_message("{0} and {1}", ("a",)) == "a and {1}"

    def test_other_braces_are_untouched(self):
        assert format_message("{name} {0}", (1,)) == "{name} 1"


class TestSentenceLength:
    """Test SentenceLengthValidator."""

    def test_long_sentence(self):
        validator = SentenceLengthValidator(config("SentenceLength", max_len=10))
        errors = validator.validate(Sentence(content="This sentence is too long."))

        assert len(errors) == 1
        assert errors[0].message == "The length of the sentence (26) exceeds the maximum of 10."
        assert errors[0].validator_name == "SentenceLength"

    def test_short_sentence(self):
        validator = SentenceLengthValidator(config("SentenceLength", max_len=100))
        assert validator.validate(Sentence(content="Short.")) == []

    def test_default_limit(self):
        assert SentenceLengthValidator().max_length == 120

    def test_japanese_message(self):
        validator = SentenceLengthValidator(config("SentenceLength", max_len=1), InkcheckConfig(lang="ja"))
        errors = validator.validate(Sentence(content="長い文。"))
        assert errors[0].message == "文長（4）が最大値 （1）を超えています。"


class TestEndOfSentence:
    """Test EndOfSentenceValidator."""

    @pytest.mark.parametrize("content", ["Done.", "Really?", "Wow!", "終わり。", "Trailing space.  "])
    def test_terminated(self, content):
        assert EndOfSentenceValidator().validate(Sentence(content=content)) == []

    def test_unterminated(self):
        sentence = Sentence(content="Hello world", line_number=3, start_position_offset=4)
        errors = EndOfSentenceValidator().validate(sentence)

        assert len(errors) == 1
        assert errors[0].start_position == LineOffset(line_number=3, offset=14)
        assert errors[0].end_position == LineOffset(line_number=3, offset=15)
        assert errors[0].line_number == 3

    def test_custom_symbols(self):
        validator = EndOfSentenceValidator(config("EndOfSentence", end_symbols=";"))
        assert validator.validate(Sentence(content="Clause;")) == []
        assert len(validator.validate(Sentence(content="Clause."))) == 1


class TestInvalidWord:
    """Test InvalidWordValidator."""

    def test_tokenize(self):
        assert tokenize("a  bc d") == [
            TokenElement(surface="a", offset=0),
            TokenElement(surface="bc", offset=3),
            TokenElement(surface="d", offset=6),
        ]

    def test_preprocess_then_validate(self):
        validator = InvalidWordValidator(config("InvalidWord", list="foo, bar"))
        sentence = Sentence(content="This is Foo, not baz.", line_number=2)

        validator.preprocess_sentence(sentence)
        errors = validator.validate(sentence)

        assert len(sentence.tokens) == 5
        assert len(errors) == 1
        assert errors[0].message == 'Found invalid word "Foo,".'
        assert errors[0].start_position == LineOffset(line_number=2, offset=8)
        assert errors[0].end_position == LineOffset(line_number=2, offset=12)

    def test_existing_tokens_are_kept(self):
        validator = InvalidWordValidator(config("InvalidWord", list="x"))
        sentence = Sentence(content="x y", tokens=[TokenElement(surface="y", offset=2)])

        validator.preprocess_sentence(sentence)
        assert validator.validate(sentence) == []

    def test_without_preprocessing_nothing_is_found(self):
        validator = InvalidWordValidator(config("InvalidWord", list="foo"))
        assert validator.validate(Sentence(content="foo")) == []


class TestSectionRules:
    """Test section level rules."""

    def test_section_length(self):
        validator = SectionLengthValidator(config("SectionLength", max_num=10))
        errors = validator.validate(section("Title", paragraphs=[["Twelve chars", "more"]]))

        assert len(errors) == 1
        assert errors[0].sentence.content == "Title"
        assert errors[0].message == 'The number of the character exceeds the maximum "10".'

    def test_section_length_within_limit(self):
        validator = SectionLengthValidator(config("SectionLength", max_num=100))
        assert validator.validate(section("Title", paragraphs=[["Short."]])) == []

    def test_empty_section(self):
        errors = EmptySectionValidator().validate(section("Lonely header"))
        assert len(errors) == 1
        assert errors[0].message == 'The section "Lonely header" has no content.'

    def test_section_with_list_is_not_empty(self):
        assert EmptySectionValidator().validate(section("Header", lists=[["item"]])) == []

    def test_headerless_section_is_ignored(self):
        assert EmptySectionValidator().validate(section()) == []

    def test_duplicate_section(self):
        document = Document(file_name="a.txt", sections=[
            section("Intro", paragraphs=[["a"]]),
            section("Usage", paragraphs=[["b"]]),
            section("intro", paragraphs=[["c"]]),
        ])
        errors = DuplicateSectionValidator().validate(document)

        assert len(errors) == 1
        assert errors[0].message == 'Found duplicated section header "intro".'
