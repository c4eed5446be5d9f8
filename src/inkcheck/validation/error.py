"""Validation findings reported by validators."""

from dataclasses import dataclass

from inkcheck.models import LineOffset, Sentence


@dataclass
class ValidationError:
    """A single rule violation.

    ``file_name`` is filled in by the pipeline once the error is attributed
    to a document; validators leave it unset.
    """
    message: str
    validator_name: str
    sentence: Sentence | None = None
    start_position: LineOffset | None = None
    end_position: LineOffset | None = None
    file_name: str | None = None

    @property
    def line_number(self) -> int | None:
        if self.start_position is not None:
            return self.start_position.line_number
        if self.sentence is not None:
            return self.sentence.line_number
        return None

    def __str__(self) -> str:
        location = self.file_name or "<unknown>"
        if self.line_number is not None:
            location += f":{self.line_number}"
            if self.start_position is not None:
                location += f":{self.start_position.offset}"
        return f"{location}: ValidationError[{self.validator_name}], {self.message}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "validator": self.validator_name,
            "message": self.message,
            "file": self.file_name,
            "line": self.line_number,
            "sentence": self.sentence.content if self.sentence else None,
            "start": (
                {"line": self.start_position.line_number, "offset": self.start_position.offset}
                if self.start_position else None
            ),
            "end": (
                {"line": self.end_position.line_number, "offset": self.end_position.offset}
                if self.end_position else None
            ),
        }
