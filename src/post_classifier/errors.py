"""Exception types raised by the post classifier.

Every error derives from :class:`ClassifierError` and also from the
builtin exception it specializes, so callers can catch either.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ClassifierError(Exception):
    """Base class for all post-classifier errors."""


class FileAccessError(ClassifierError, OSError):
    """A training or test file could not be opened."""

    def __init__(self, path: str | Path, reason: str = "cannot open file") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error opening file: {self.path} ({reason})")


class MalformedRecordError(ClassifierError, ValueError):
    """A CSV record is missing a field or the file is not valid CSV."""

    def __init__(
        self,
        message: str,
        path: Optional[str | Path] = None,
        line: Optional[int] = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.line = line
        location = ""
        if self.path is not None:
            location = f"{self.path}"
            if line is not None:
                location += f":{line}"
            location += ": "
        super().__init__(f"{location}{message}")


class UntrainedModelError(ClassifierError, RuntimeError):
    """A query was made against a model that has seen no documents."""

    def __init__(self, message: str = "Classifier has not been trained. Call train() first.") -> None:
        super().__init__(message)


class UnknownLabelError(ClassifierError, KeyError):
    """``log_prior`` was asked about a label absent from the training data."""

    def __init__(self, label: str, known: list[str]) -> None:
        self.label = label
        self.known = known
        super().__init__(label)

    def __str__(self) -> str:
        return f"Unknown label: {self.label!r}. Known: {self.known}"
