"""Tests for granularity resolution and the validator registry."""

import pytest

from inkcheck.config import InkcheckConfig, ValidatorConfig
from inkcheck.errors import RegistrationError
from inkcheck.plugins import ScriptDocumentValidator, ScriptSectionValidator, ScriptSentenceValidator
from inkcheck.validation import (
    Granularity,
    SentencePreProcessor,
    Validator,
    ValidatorBuckets,
    ValidatorFactory,
    ValidatorRegistry,
    resolve_granularity,
    supports_preprocessing,
)


class UndeclaredValidator(Validator):
    name = "Undeclared"

    def validate(self, target):
        return []


class BogusGranularityValidator(Validator):
    name = "Bogus"
    granularity = "paragraph"

    def validate(self, target):
        return []


class SentenceRule(Validator, SentencePreProcessor):
    name = "SentenceRule"
    granularity = Granularity.SENTENCE

    def preprocess_sentence(self, sentence):
        pass

    def validate(self, sentence):
        return []


class TestResolveGranularity:
    """Test resolve_granularity."""

    def test_declared_granularity(self):
        assert resolve_granularity(SentenceRule()) == Granularity.SENTENCE

    def test_string_granularity_is_accepted(self):
        class SectionByName(UndeclaredValidator):
            granularity = "section"

        assert resolve_granularity(SectionByName()) == Granularity.SECTION

    def test_missing_granularity_raises(self):
        with pytest.raises(RegistrationError, match="UndeclaredValidator"):
            resolve_granularity(UndeclaredValidator())

    def test_unknown_granularity_raises(self):
        with pytest.raises(RegistrationError, match="paragraph"):
            resolve_granularity(BogusGranularityValidator())

    def test_none_raises(self):
        with pytest.raises(RegistrationError):
            resolve_granularity(None)

    def test_supports_preprocessing(self):
        rule = SentenceRule()
        assert supports_preprocessing(rule, Granularity.SENTENCE) is True
        assert supports_preprocessing(rule, Granularity.SECTION) is False
        assert supports_preprocessing(rule, Granularity.DOCUMENT) is False


class TestValidatorFactory:
    """Test the name keyed validator factory."""

    def test_builtin_names(self):
        names = ValidatorFactory().names()
        for name in ["DuplicateSection", "EmptySection", "EndOfSentence",
                     "InvalidWord", "Script", "SectionLength", "SentenceLength"]:
            assert name in names

    def test_create_known_validator(self):
        validators = ValidatorFactory().create(ValidatorConfig(name="SentenceLength"), InkcheckConfig())
        assert len(validators) == 1
        assert validators[0].name == "SentenceLength"

    def test_create_unknown_validator(self):
        with pytest.raises(RegistrationError, match="There is no validator like Missing"):
            ValidatorFactory().create(ValidatorConfig(name="Missing"), InkcheckConfig())

    def test_describe(self):
        info = ValidatorFactory().describe("Script")
        assert info.granularities == [Granularity.DOCUMENT, Granularity.SECTION, Granularity.SENTENCE]


class TestValidatorRegistry:
    """Test partitioning of configured validators."""

    def test_missing_configuration(self):
        with pytest.raises(RegistrationError, match="missing"):
            ValidatorRegistry().build(None)

    def test_configuration_order_is_kept_per_bucket(self):
        settings = InkcheckConfig(validators=[
            ValidatorConfig(name="SentenceLength"),
            ValidatorConfig(name="SectionLength"),
            ValidatorConfig(name="EndOfSentence"),
            ValidatorConfig(name="DuplicateSection"),
            ValidatorConfig(name="EmptySection"),
            ValidatorConfig(name="InvalidWord"),
        ])
        buckets = ValidatorRegistry().build(settings)

        assert [v.name for v in buckets.sentence] == ["SentenceLength", "EndOfSentence", "InvalidWord"]
        assert [v.name for v in buckets.section] == ["SectionLength", "EmptySection"]
        assert [v.name for v in buckets.document] == ["DuplicateSection"]
        assert len(buckets) == 6

    def test_unresolvable_granularity_aborts_build(self):
        factory = ValidatorFactory({"Undeclared": lambda config, settings: [UndeclaredValidator(config, settings)]})
        settings = InkcheckConfig(validators=[ValidatorConfig(name="Undeclared")])

        with pytest.raises(RegistrationError):
            ValidatorRegistry(factory).build(settings)

    def test_custom_builder(self):
        factory = ValidatorFactory({})
        factory.register("SentenceRule", lambda config, settings: [SentenceRule(config, settings)])
        settings = InkcheckConfig(validators=[ValidatorConfig(name="SentenceRule")])

        buckets = ValidatorRegistry(factory).build(settings)
        assert [type(v) for v in buckets.sentence] == [SentenceRule]

    def test_script_entry_expands_to_three_granularities(self, tmp_path):
        settings = InkcheckConfig(validators=[
            ValidatorConfig(name="Script", attributes={"script-path": str(tmp_path / "plugins")}),
        ])
        buckets = ValidatorRegistry().build(settings)

        assert [type(v) for v in buckets.document] == [ScriptDocumentValidator]
        assert [type(v) for v in buckets.section] == [ScriptSectionValidator]
        assert [type(v) for v in buckets.sentence] == [ScriptSentenceValidator]
        assert (tmp_path / "plugins").is_dir()

    def test_locale_is_passed_to_validators(self):
        settings = InkcheckConfig(lang="ja", validators=[ValidatorConfig(name="EndOfSentence")])
        buckets = ValidatorRegistry().build(settings)
        assert buckets.sentence[0].locale == "ja"


class TestValidatorBuckets:
    """Test ValidatorBuckets."""

    def test_add_returns_granularity(self):
        buckets = ValidatorBuckets()
        assert buckets.add(SentenceRule()) == Granularity.SENTENCE
        assert len(buckets.sentence) == 1
