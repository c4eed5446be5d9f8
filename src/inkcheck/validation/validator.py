"""Base classes for validators.

Every validator declares the granularity it works on as class data and
returns a (possibly empty) list of findings from ``validate``. Pre-processing
is a separate capability: a validator opts in by also inheriting from
``SentencePreProcessor`` or ``SectionPreProcessor``.
"""

import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from inkcheck.config import InkcheckConfig, ValidatorConfig
from inkcheck.models import LineOffset, Section, Sentence, TokenElement
from inkcheck.validation.error import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_KEY = "default"
DEFAULT_LOCALE = "en"

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


class Granularity(str, Enum):
    """Structural level a validator operates on."""
    DOCUMENT = "document"
    SECTION = "section"
    SENTENCE = "sentence"


def format_message(template: str, args: tuple[Any, ...]) -> str:
    """Substitute ``{0}``-style positional placeholders.

    Placeholders without a matching argument are left as they are, so a
    message template never fails to render.
    """
    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(replace, template)


class Validator(ABC):
    """Base class for validation rules."""

    name: str = ""
    granularity: Granularity | None = None
    # locale -> message key -> template
    messages: dict[str, dict[str, str]] = {}

    def __init__(self, config: ValidatorConfig | None = None,
                 settings: InkcheckConfig | None = None):
        self.config = config or ValidatorConfig(name=self.name or type(self).__name__)
        self.locale = settings.lang if settings is not None else DEFAULT_LOCALE
        self.init()

    def init(self) -> None:
        """Hook for subclasses to read attributes after construction."""
        pass

    @abstractmethod
    def validate(self, target: Any) -> list[ValidationError]:
        """Validate a document, section or sentence.

        Args:
            target: Node matching the validator's granularity

        Returns:
            Findings for the node, empty when it passes
        """
        pass

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.config.get_attribute(name, default)

    def get_int_attribute(self, name: str, default: int) -> int:
        return self.config.get_int(name, default)

    def get_localized_error_message(self, key: str | None, *args: Any) -> str:
        catalog = self.messages.get(self.locale) or self.messages.get(DEFAULT_LOCALE, {})
        message_key = key or DEFAULT_MESSAGE_KEY
        template = catalog.get(message_key)
        if template is None:
            template = self.messages.get(DEFAULT_LOCALE, {}).get(message_key)
        if template is None:
            raise LookupError(f"No message '{message_key}' defined for validator {self.name}")
        return format_message(template, args)

    def create_validation_error(self, sentence: Sentence | None, *args: Any) -> ValidationError:
        return ValidationError(
            message=self.get_localized_error_message(None, *args),
            validator_name=self.name,
            sentence=sentence,
        )

    def create_validation_error_with_key(self, message_key: str, sentence: Sentence | None,
                                         *args: Any) -> ValidationError:
        return ValidationError(
            message=self.get_localized_error_message(message_key, *args),
            validator_name=self.name,
            sentence=sentence,
        )

    def create_validation_error_from_token(self, sentence: Sentence,
                                           token: TokenElement) -> ValidationError:
        return self.create_validation_error_with_position(
            sentence,
            sentence.get_offset(token.offset),
            sentence.get_offset(token.offset + len(token.surface)),
            token.surface,
        )

    def create_validation_error_with_position(self, sentence: Sentence,
                                              start: LineOffset | None,
                                              end: LineOffset | None,
                                              *args: Any) -> ValidationError:
        return ValidationError(
            message=self.get_localized_error_message(None, *args),
            validator_name=self.name,
            sentence=sentence,
            start_position=start,
            end_position=end,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, granularity={self.granularity})"


class SentencePreProcessor(ABC):
    """Capability: annotate sentences before the sentence validation pass."""

    @abstractmethod
    def preprocess_sentence(self, sentence: Sentence) -> None:
        pass


class SectionPreProcessor(ABC):
    """Capability: annotate sections before the section validation pass."""

    @abstractmethod
    def preprocess_section(self, section: Section) -> None:
        pass
