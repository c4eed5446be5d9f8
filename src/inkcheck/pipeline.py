"""Validation pipeline: applies configured validators to a document collection.

A run has three phases executed in a fixed order, each over every document
of the collection:

1. document validators on each document
2. section pre-processors, then section validators, on each section
3. sentence pre-processors, then sentence validators, on each section's
   sentences (header content, paragraphs, list elements)

Findings are streamed to the distributor as they are produced and returned
as one list in the same order.
"""

import logging

from inkcheck.config import InkcheckConfig
from inkcheck.distributor import NullResultDistributor, ResultDistributor
from inkcheck.models import Document, DocumentCollection, Section
from inkcheck.validation.error import ValidationError
from inkcheck.validation.granularity import supports_preprocessing
from inkcheck.validation.registry import ValidatorBuckets, ValidatorRegistry
from inkcheck.validation.validator import Granularity, Validator

logger = logging.getLogger(__name__)


class ValidationPipeline:
    """Runs document, section and sentence validators over documents."""

    def __init__(self, settings: InkcheckConfig | None,
                 distributor: ResultDistributor | None = None,
                 registry: ValidatorRegistry | None = None):
        """Build validators from configuration.

        Args:
            settings: Loaded configuration
            distributor: Receives findings as they are produced
            registry: Registry used to instantiate validators

        Raises:
            RegistrationError: If the configuration is missing or a validator
                cannot be registered
        """
        registry = registry or ValidatorRegistry()
        self._setup(registry.build(settings), distributor)

    @classmethod
    def from_buckets(cls, buckets: ValidatorBuckets,
                     distributor: ResultDistributor | None = None) -> "ValidationPipeline":
        """Create a pipeline from already instantiated validators."""
        pipeline = cls.__new__(cls)
        pipeline._setup(buckets, distributor)
        return pipeline

    def _setup(self, buckets: ValidatorBuckets, distributor: ResultDistributor | None) -> None:
        self.buckets = buckets
        self.distributor = distributor or NullResultDistributor()
        # Capability is decided once here, not per section or sentence.
        self.section_preprocessors = [
            v for v in buckets.section if supports_preprocessing(v, Granularity.SECTION)
        ]
        self.sentence_preprocessors = [
            v for v in buckets.sentence if supports_preprocessing(v, Granularity.SENTENCE)
        ]

    @property
    def document_validators(self) -> list[Validator]:
        return self.buckets.document

    @property
    def section_validators(self) -> list[Validator]:
        return self.buckets.section

    @property
    def sentence_validators(self) -> list[Validator]:
        return self.buckets.sentence

    def check(self, collection: DocumentCollection) -> list[ValidationError]:
        """Validate every document of the collection.

        Args:
            collection: Parsed documents

        Returns:
            All findings, document phase first, then section and sentence phases
        """
        logger.info(f"Starting validation of {len(collection)} documents")
        self.distributor.flush_header()

        errors: list[ValidationError] = []
        self._run_document_validators(collection, errors)
        self._run_section_validators(collection, errors)
        self._run_sentence_validators(collection, errors)

        self.distributor.flush_footer()
        logger.info(f"Validation completed with {len(errors)} errors")
        return errors

    def _report(self, document: Document, new_errors: list[ValidationError],
                errors: list[ValidationError]) -> None:
        for error in new_errors:
            error.file_name = document.file_name
            self.distributor.flush_result(error)
        errors.extend(new_errors)

    def _run_document_validators(self, collection: DocumentCollection,
                                 errors: list[ValidationError]) -> None:
        logger.debug(f"Running {len(self.document_validators)} document validators")
        for document in collection.documents:
            for validator in self.document_validators:
                self._report(document, validator.validate(document), errors)

    def _run_section_validators(self, collection: DocumentCollection,
                                errors: list[ValidationError]) -> None:
        logger.debug(f"Running {len(self.section_validators)} section validators")
        for document in collection.documents:
            for section in document.sections:
                for preprocessor in self.section_preprocessors:
                    preprocessor.preprocess_section(section)

                for validator in self.section_validators:
                    self._report(document, validator.validate(section), errors)

    def _run_sentence_validators(self, collection: DocumentCollection,
                                 errors: list[ValidationError]) -> None:
        logger.debug(f"Running {len(self.sentence_validators)} sentence validators")
        for document in collection.documents:
            for section in document.sections:
                self._preprocess_sentences(section)
                self._validate_section_sentences(document, section, errors)

    def _preprocess_sentences(self, section: Section) -> None:
        for preprocessor in self.sentence_preprocessors:
            for sentence in section.iter_sentences():
                preprocessor.preprocess_sentence(sentence)

    def _validate_section_sentences(self, document: Document, section: Section,
                                    errors: list[ValidationError]) -> None:
        for sentences in section.sentence_blocks():
            for validator in self.sentence_validators:
                new_errors = []
                for sentence in sentences:
                    new_errors.extend(validator.validate(sentence))
                self._report(document, new_errors, errors)
