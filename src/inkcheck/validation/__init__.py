"""Validator contract, granularity resolution and the validator registry."""

from .error import ValidationError
from .granularity import resolve_granularity, supports_preprocessing
from .registry import (
    ValidatorBuckets,
    ValidatorFactory,
    ValidatorInfo,
    ValidatorRegistry,
    register_validator,
    register_validator_builder,
)
from .validator import (
    Granularity,
    SectionPreProcessor,
    SentencePreProcessor,
    Validator,
    format_message,
)

__all__ = [
    "Granularity",
    "SectionPreProcessor",
    "SentencePreProcessor",
    "ValidationError",
    "Validator",
    "ValidatorBuckets",
    "ValidatorFactory",
    "ValidatorInfo",
    "ValidatorRegistry",
    "format_message",
    "register_validator",
    "register_validator_builder",
    "resolve_granularity",
    "supports_preprocessing",
]
