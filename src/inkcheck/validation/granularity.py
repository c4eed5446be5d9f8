"""Granularity resolution for configured validators."""

from inkcheck.errors import RegistrationError
from inkcheck.validation.validator import (
    Granularity,
    SectionPreProcessor,
    SentencePreProcessor,
    Validator,
)

_PREPROCESSOR_CAPABILITIES = {
    Granularity.SENTENCE: SentencePreProcessor,
    Granularity.SECTION: SectionPreProcessor,
}


def resolve_granularity(validator: Validator) -> Granularity:
    """Return the granularity a validator declares.

    Raises:
        RegistrationError: If the validator declares none or an unknown one
    """
    if validator is None:
        raise RegistrationError("Cannot resolve granularity of a missing validator")

    declared = getattr(validator, "granularity", None)
    if declared is None:
        raise RegistrationError(f"No granularity declared for validator {type(validator).__name__}")
    try:
        return Granularity(declared)
    except ValueError:
        raise RegistrationError(
            f"Unknown granularity {declared!r} declared for validator {type(validator).__name__}"
        )


def supports_preprocessing(validator: Validator, granularity: Granularity) -> bool:
    """Whether ``validator`` carries the pre-processing capability for ``granularity``."""
    capability = _PREPROCESSOR_CAPABILITIES.get(granularity)
    return capability is not None and isinstance(validator, capability)
