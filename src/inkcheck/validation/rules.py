"""Built-in validation rules.

Each rule checks one aspect of the text and registers itself with the
validator factory under the name used in configuration files.
"""

import logging
import re

from inkcheck.models import Document, Section, Sentence, TokenElement
from inkcheck.validation.error import ValidationError
from inkcheck.validation.registry import register_validator
from inkcheck.validation.validator import Granularity, SentencePreProcessor, Validator

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\S+")
_TRAILING_PUNCTUATION = ",.;:!?\"'()[]"


def tokenize(content: str) -> list[TokenElement]:
    """Split a sentence into whitespace separated tokens with offsets."""
    return [
        TokenElement(surface=match.group(0), offset=match.start())
        for match in _WORD.finditer(content)
    ]


@register_validator("SentenceLength")
class SentenceLengthValidator(Validator):
    """Flag sentences longer than ``max_len`` characters."""

    granularity = Granularity.SENTENCE
    messages = {
        "en": {"default": "The length of the sentence ({0}) exceeds the maximum of {1}."},
        "ja": {"default": "文長（{0}）が最大値 （{1}）を超えています。"},
    }

    def init(self) -> None:
        self.max_length = self.get_int_attribute("max_len", 120)

    def validate(self, sentence: Sentence) -> list[ValidationError]:
        length = len(sentence.content)
        if length > self.max_length:
            return [self.create_validation_error(sentence, length, self.max_length)]
        return []


@register_validator("EndOfSentence")
class EndOfSentenceValidator(Validator):
    """Flag sentences that do not end with terminal punctuation."""

    granularity = Granularity.SENTENCE
    messages = {
        "en": {"default": "The sentence \"{0}\" does not end with one of \"{1}\"."},
        "ja": {"default": "文 \"{0}\" が \"{1}\" のいずれかで終わっていません。"},
    }

    def init(self) -> None:
        self.end_symbols = self.get_attribute("end_symbols", ".!?。！？")

    def validate(self, sentence: Sentence) -> list[ValidationError]:
        content = sentence.content.rstrip()
        if not content or content[-1] in self.end_symbols:
            return []
        end = sentence.get_offset(len(content))
        return [
            self.create_validation_error_with_position(
                sentence, sentence.get_offset(len(content) - 1), end, content, self.end_symbols
            )
        ]


@register_validator("InvalidWord")
class InvalidWordValidator(Validator, SentencePreProcessor):
    """Flag words from a configured deny list.

    Sentences are tokenized in the pre-processing pass; tokens a parser
    already attached are kept.
    """

    granularity = Granularity.SENTENCE
    messages = {
        "en": {"default": "Found invalid word \"{0}\"."},
        "ja": {"default": "不正な単語 \"{0}\" がみつかりました。"},
    }

    def init(self) -> None:
        words = self.get_attribute("list", "") or ""
        self.invalid_words = {word.strip().lower() for word in words.split(",") if word.strip()}

    def preprocess_sentence(self, sentence: Sentence) -> None:
        if not sentence.tokens:
            sentence.tokens = tokenize(sentence.content)

    def validate(self, sentence: Sentence) -> list[ValidationError]:
        errors = []
        for token in sentence.tokens:
            if token.surface.strip(_TRAILING_PUNCTUATION).lower() in self.invalid_words:
                errors.append(self.create_validation_error_from_token(sentence, token))
        return errors


@register_validator("SectionLength")
class SectionLengthValidator(Validator):
    """Flag sections whose body exceeds ``max_num`` characters."""

    granularity = Granularity.SECTION
    messages = {
        "en": {"default": "The number of the character exceeds the maximum \"{0}\"."},
        "ja": {"default": "セクションの文字数が最大値 \"{0}\" を超えています。"},
    }

    def init(self) -> None:
        self.max_characters = self.get_int_attribute("max_num", 1000)

    def validate(self, section: Section) -> list[ValidationError]:
        total = sum(
            len(sentence.content)
            for paragraph in section.paragraphs
            for sentence in paragraph.sentences
        )
        if total > self.max_characters:
            anchor = section.header_contents[0] if section.header_contents else None
            return [self.create_validation_error(anchor, self.max_characters)]
        return []


@register_validator("EmptySection")
class EmptySectionValidator(Validator):
    """Flag headed sections that contain no paragraphs or lists."""

    granularity = Granularity.SECTION
    messages = {
        "en": {"default": "The section \"{0}\" has no content."},
        "ja": {"default": "セクション \"{0}\" に内容がありません。"},
    }

    def validate(self, section: Section) -> list[ValidationError]:
        if not section.header_contents:
            return []
        if section.paragraphs or section.list_blocks:
            return []
        return [self.create_validation_error(section.header_contents[0], section.header_text)]


@register_validator("DuplicateSection")
class DuplicateSectionValidator(Validator):
    """Flag section headers repeated within one document."""

    granularity = Granularity.DOCUMENT
    messages = {
        "en": {"default": "Found duplicated section header \"{0}\"."},
        "ja": {"default": "重複したセクション見出し \"{0}\" がみつかりました。"},
    }

    def validate(self, document: Document) -> list[ValidationError]:
        errors = []
        seen = set()
        for section in document.sections:
            header = section.header_text.strip().lower()
            if not header:
                continue
            if header in seen:
                errors.append(self.create_validation_error(section.header_contents[0], section.header_text))
            seen.add(header)
        return errors
