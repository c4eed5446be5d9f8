"""Result distributors receive findings as the pipeline produces them."""

import json
from abc import ABC, abstractmethod
from typing import TextIO

from inkcheck.validation.error import ValidationError


class ResultDistributor(ABC):
    """Sink for streamed validation results."""

    @abstractmethod
    def flush_header(self) -> None:
        """Called once before the first result of a run."""
        pass

    @abstractmethod
    def flush_result(self, error: ValidationError) -> None:
        """Called once per finding, in pipeline order."""
        pass

    @abstractmethod
    def flush_footer(self) -> None:
        """Called once after the last result of a run."""
        pass


class NullResultDistributor(ResultDistributor):
    """Discards everything; used when the caller only needs the returned list."""

    def flush_header(self) -> None:
        pass

    def flush_result(self, error: ValidationError) -> None:
        pass

    def flush_footer(self) -> None:
        pass


class PlainResultDistributor(ResultDistributor):
    """Writes one line per finding."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def flush_header(self) -> None:
        pass

    def flush_result(self, error: ValidationError) -> None:
        self.stream.write(f"{error}\n")

    def flush_footer(self) -> None:
        self.stream.flush()


class JsonResultDistributor(ResultDistributor):
    """Writes a JSON array of findings, streaming each element."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._count = 0

    def flush_header(self) -> None:
        self._count = 0
        self.stream.write("[")

    def flush_result(self, error: ValidationError) -> None:
        separator = "," if self._count else ""
        self.stream.write(f"{separator}\n  {json.dumps(error.to_dict(), ensure_ascii=False)}")
        self._count += 1

    def flush_footer(self) -> None:
        self.stream.write("\n]\n" if self._count else "]\n")
        self.stream.flush()
