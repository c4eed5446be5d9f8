"""Compiled plugin scripts and the hook contract they expose.

A plugin is a Python file defining any of the hook functions below and,
optionally, a module-level ``message`` template::

    message = "Sentence contains the word {0}"

    def validateSentence(errors, sentence):
        if "foo" in sentence.content:
            errors.append(create_validation_error(sentence, "foo"))

The host binds the error construction helpers into the script's namespace
before it runs. Scripts run with the same privileges as inkcheck itself.
"""

import logging
from collections.abc import Callable
from typing import Any

from inkcheck.errors import PluginLoadError, PluginRuntimeError
from inkcheck.models import LineOffset, Sentence, TokenElement
from inkcheck.validation.error import ValidationError
from inkcheck.validation.validator import DEFAULT_LOCALE, DEFAULT_MESSAGE_KEY, format_message

logger = logging.getLogger(__name__)

PRE_VALIDATE_SENTENCE = "preValidateSentence"
PRE_VALIDATE_SECTION = "preValidateSection"
VALIDATE_DOCUMENT = "validateDocument"
VALIDATE_SENTENCE = "validateSentence"
VALIDATE_SECTION = "validateSection"

HOOK_NAMES = (
    PRE_VALIDATE_SENTENCE,
    PRE_VALIDATE_SECTION,
    VALIDATE_DOCUMENT,
    VALIDATE_SENTENCE,
    VALIDATE_SECTION,
)

SCRIPT_MESSAGES = {
    "en": {"default": "{0}"},
    "ja": {"default": "{0}"},
}

MessageResolver = Callable[..., str]


def default_message_resolver(locale: str = DEFAULT_LOCALE) -> MessageResolver:
    """Build the localized fallback used when a script declares no ``message``."""
    def resolve(key: str | None, *args: Any) -> str:
        message_key = key or DEFAULT_MESSAGE_KEY
        catalog = SCRIPT_MESSAGES.get(locale) or SCRIPT_MESSAGES[DEFAULT_LOCALE]
        template = catalog.get(message_key, SCRIPT_MESSAGES[DEFAULT_LOCALE].get(message_key))
        if template is None:
            raise LookupError(f"No script message '{message_key}' for locale {locale}")
        return format_message(template, args)

    return resolve


class ScriptPlugin:
    """A compiled plugin script.

    Hook lookups are memoized per hook name: once a hook is found missing it
    is never looked up again for this plugin.
    """

    def __init__(self, name: str, source: str, resolver: MessageResolver | None = None):
        self.name = name
        self._resolver = resolver or default_message_resolver()
        # hook name -> True (defined) / False (absent); unknown until first call
        self._hooks: dict[str, bool] = {}
        self._namespace = self._compile(source)

        message = self._namespace.get("message")
        self.message: str | None = message if isinstance(message, str) else None

    def _compile(self, source: str) -> dict[str, Any]:
        namespace = {"__name__": f"inkcheck.plugins.{self.name}", "__file__": self.name}
        namespace.update(self._helpers())
        try:
            code = compile(source, self.name, "exec")
            exec(code, namespace)
        except (Exception, SystemExit) as e:
            raise PluginLoadError(f"Failed to compile script {self.name}: {e}", plugin=self.name) from e
        return namespace

    def _helpers(self) -> dict[str, Callable]:
        helpers = {
            "create_validation_error": self.create_validation_error,
            "create_validation_error_with_key": self.create_validation_error_with_key,
            "create_validation_error_from_token": self.create_validation_error_from_token,
            "create_validation_error_with_position": self.create_validation_error_with_position,
        }
        helpers.update({
            "createValidationError": self.create_validation_error,
            "createValidationErrorWithKey": self.create_validation_error_with_key,
            "createValidationErrorFromToken": self.create_validation_error_from_token,
            "createValidationErrorWithPosition": self.create_validation_error_with_position,
        })
        return helpers

    def hook_state(self, hook: str) -> bool | None:
        """True if defined, False if known absent, None if not probed yet."""
        return self._hooks.get(hook)

    def _lookup(self, hook: str) -> Callable | None:
        function = self._namespace.get(hook)
        return function if callable(function) else None

    def call(self, hook: str, *args: Any) -> None:
        """Invoke ``hook`` if the script defines it.

        Failures inside the hook are logged and contained so that one
        misbehaving script cannot abort a validation run.
        """
        if self._hooks.get(hook) is False:
            return

        function = self._lookup(hook)
        if function is None:
            self._hooks[hook] = False
            logger.debug(f"Script {self.name} does not define {hook}")
            return

        self._hooks[hook] = True
        try:
            function(*args)
        except Exception as e:
            error = PluginRuntimeError(f"Failed to invoke {hook}: {e}", plugin=self.name, hook=hook)
            logger.error(f"[{self.name}] {error}", exc_info=True)

    def get_error_message(self, key: str | None, *args: Any) -> str:
        if self.message is not None:
            formatted = format_message(self.message, args)
        else:
            formatted = self._resolver(key, *args)
        return f"[{self.name}] {formatted}"

    def create_validation_error(self, sentence: Sentence | None, *args: Any) -> ValidationError:
        return ValidationError(
            message=self.get_error_message(None, *args),
            validator_name=self.name,
            sentence=sentence,
        )

    def create_validation_error_with_key(self, message_key: str, sentence: Sentence | None,
                                         *args: Any) -> ValidationError:
        return ValidationError(
            message=self.get_error_message(message_key, *args),
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
            message=self.get_error_message(None, *args),
            validator_name=self.name,
            sentence=sentence,
            start_position=start,
            end_position=end,
        )

    def __repr__(self) -> str:
        return f"ScriptPlugin(name={self.name!r})"
