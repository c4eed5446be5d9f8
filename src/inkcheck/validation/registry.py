"""Validator factory and registry.

The factory maps a validator name from the configuration to a builder that
returns one or more validator instances. The registry turns a configuration
into three ordered buckets, one per granularity.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from inkcheck.config import InkcheckConfig, ValidatorConfig
from inkcheck.errors import RegistrationError
from inkcheck.validation.granularity import resolve_granularity
from inkcheck.validation.validator import Granularity, Validator

logger = logging.getLogger(__name__)

ValidatorBuilder = Callable[[ValidatorConfig, InkcheckConfig], list[Validator]]


@dataclass
class ValidatorInfo:
    """Catalog entry describing a registered validator."""
    name: str
    granularities: list[Granularity]
    description: str = ""


_builtin_builders: dict[str, ValidatorBuilder] = {}
_builtin_info: dict[str, ValidatorInfo] = {}


def _first_line(doc: str | None) -> str:
    return (doc or "").strip().split("\n")[0]


def register_validator(name: str):
    """Register a validator class under ``name`` in the built-in catalog."""
    def decorator(cls):
        cls.name = name
        _builtin_builders[name] = lambda config, settings: [cls(config, settings)]
        _builtin_info[name] = ValidatorInfo(name, [cls.granularity], _first_line(cls.__doc__))
        return cls
    return decorator


def register_validator_builder(name: str, granularities: list[Granularity]):
    """Register a function building several validators from one entry."""
    def decorator(func: ValidatorBuilder) -> ValidatorBuilder:
        _builtin_builders[name] = func
        _builtin_info[name] = ValidatorInfo(name, list(granularities), _first_line(func.__doc__))
        return func
    return decorator


def _load_builtin_validators() -> None:
    # Importing the modules runs their registration decorators.
    from inkcheck import plugins  # noqa: F401
    from inkcheck.validation import rules  # noqa: F401


class ValidatorFactory:
    """Creates validators by configured name."""

    def __init__(self, builders: dict[str, ValidatorBuilder] | None = None):
        if builders is None:
            _load_builtin_validators()
            builders = _builtin_builders
        self.builders: dict[str, ValidatorBuilder] = dict(builders)

    def register(self, name: str, builder: ValidatorBuilder) -> None:
        self.builders[name] = builder

    def names(self) -> list[str]:
        return sorted(self.builders)

    def describe(self, name: str) -> ValidatorInfo | None:
        return _builtin_info.get(name)

    def create(self, config: ValidatorConfig, settings: InkcheckConfig) -> list[Validator]:
        builder = self.builders.get(config.name)
        if builder is None:
            raise RegistrationError(
                f"There is no validator like {config.name}. "
                f"Known validators: {', '.join(self.names())}"
            )
        return builder(config, settings)


@dataclass
class ValidatorBuckets:
    """Validators partitioned by granularity, in registration order."""
    document: list[Validator] = field(default_factory=list)
    section: list[Validator] = field(default_factory=list)
    sentence: list[Validator] = field(default_factory=list)

    def add(self, validator: Validator) -> Granularity:
        granularity = resolve_granularity(validator)
        if granularity == Granularity.DOCUMENT:
            self.document.append(validator)
        elif granularity == Granularity.SECTION:
            self.section.append(validator)
        else:
            self.sentence.append(validator)
        return granularity

    def __len__(self) -> int:
        return len(self.document) + len(self.section) + len(self.sentence)


class ValidatorRegistry:
    """Builds validator buckets from configuration."""

    def __init__(self, factory: ValidatorFactory | None = None):
        self.factory = factory or ValidatorFactory()

    def build(self, settings: InkcheckConfig | None) -> ValidatorBuckets:
        """Instantiate every configured validator and sort it into a bucket.

        Raises:
            RegistrationError: If configuration is missing, a validator is
                unknown, or its granularity cannot be resolved
        """
        if settings is None:
            raise RegistrationError("Configuration object is missing")

        buckets = ValidatorBuckets()
        for validator_config in settings.validators:
            for validator in self.factory.create(validator_config, settings):
                granularity = buckets.add(validator)
                logger.debug(f"Registered {validator.name} as {granularity.value} validator")

        logger.info(
            f"Registered {len(buckets)} validators "
            f"(document={len(buckets.document)}, section={len(buckets.section)}, "
            f"sentence={len(buckets.sentence)})"
        )
        return buckets
