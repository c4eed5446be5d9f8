"""Validators dispatching to plugin scripts.

A ``Script`` entry in the configuration expands into three validators, one
per granularity, that share the same plugin list. From the pipeline's point
of view they are ordinary validators; the sentence and section variants
also carry pre-processing capability.
"""

import logging

from inkcheck.config import InkcheckConfig, ValidatorConfig
from inkcheck.models import Document, Section, Sentence
from inkcheck.plugins.loader import DEFAULT_SCRIPT_PATH, ScriptPluginLoader
from inkcheck.plugins.script import (
    PRE_VALIDATE_SECTION,
    PRE_VALIDATE_SENTENCE,
    SCRIPT_MESSAGES,
    VALIDATE_DOCUMENT,
    VALIDATE_SECTION,
    VALIDATE_SENTENCE,
    ScriptPlugin,
    default_message_resolver,
)
from inkcheck.validation.error import ValidationError
from inkcheck.validation.registry import register_validator_builder
from inkcheck.validation.validator import (
    Granularity,
    SectionPreProcessor,
    SentencePreProcessor,
    Validator,
)

logger = logging.getLogger(__name__)

SCRIPT_VALIDATOR_NAME = "Script"


class ScriptValidator(Validator):
    """Base for validators backed by plugin scripts."""

    name = SCRIPT_VALIDATOR_NAME
    messages = SCRIPT_MESSAGES

    def __init__(self, plugins: list[ScriptPlugin], config: ValidatorConfig | None = None,
                 settings: InkcheckConfig | None = None):
        self.plugins = plugins
        super().__init__(config, settings)

    def _dispatch(self, hook: str, *args) -> None:
        for plugin in self.plugins:
            plugin.call(hook, *args)

    def _collect(self, hook: str, target) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for plugin in self.plugins:
            reported = []
            plugin.call(hook, reported, target)
            for item in reported:
                if isinstance(item, ValidationError):
                    errors.append(item)
                else:
                    logger.error(f"[{plugin.name}] {hook} reported {item!r}, expected a ValidationError; ignored")
        return errors


class ScriptDocumentValidator(ScriptValidator):
    granularity = Granularity.DOCUMENT

    def validate(self, document: Document) -> list[ValidationError]:
        return self._collect(VALIDATE_DOCUMENT, document)


class ScriptSectionValidator(ScriptValidator, SectionPreProcessor):
    granularity = Granularity.SECTION

    def preprocess_section(self, section: Section) -> None:
        self._dispatch(PRE_VALIDATE_SECTION, section)

    def validate(self, section: Section) -> list[ValidationError]:
        return self._collect(VALIDATE_SECTION, section)


class ScriptSentenceValidator(ScriptValidator, SentencePreProcessor):
    granularity = Granularity.SENTENCE

    def preprocess_sentence(self, sentence: Sentence) -> None:
        self._dispatch(PRE_VALIDATE_SENTENCE, sentence)

    def validate(self, sentence: Sentence) -> list[ValidationError]:
        return self._collect(VALIDATE_SENTENCE, sentence)


def create_script_validators(plugins: list[ScriptPlugin], config: ValidatorConfig | None = None,
                             settings: InkcheckConfig | None = None) -> list[ScriptValidator]:
    """Wrap a plugin list in document, section and sentence validators."""
    return [
        ScriptDocumentValidator(plugins, config, settings),
        ScriptSectionValidator(plugins, config, settings),
        ScriptSentenceValidator(plugins, config, settings),
    ]


@register_validator_builder(
    SCRIPT_VALIDATOR_NAME,
    [Granularity.DOCUMENT, Granularity.SECTION, Granularity.SENTENCE],
)
def build_script_validators(config: ValidatorConfig, settings: InkcheckConfig) -> list[ScriptValidator]:
    """Run plugin scripts from the ``script-path`` directory."""
    script_path = config.get_attribute("script-path", DEFAULT_SCRIPT_PATH)
    loader = ScriptPluginLoader(script_path, resolver=default_message_resolver(settings.lang))
    plugins = loader.load()
    return create_script_validators(plugins, config, settings)
