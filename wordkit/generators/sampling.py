#!/usr/bin/env python3
"""
Sampling Strategies
===================
Supply the sample strings a generator learns from.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from ..errors import ConfigurationError
from .strategy import Strategy


class SamplingStrategy(Strategy):
    """Base class for sample providers."""

    kind = 'sampling'

    @abstractmethod
    def get_samples(self) -> List[str]:
        """Return the list of sample strings."""

    @abstractmethod
    def is_fully_configured(self) -> bool:
        """Return True if ``get_samples`` can produce a usable sample set."""


def _split_samples(text: str, separator: str) -> List[str]:
    return [sample.strip() for sample in text.split(separator) if sample.strip()]


class WordListSamplingStrategy(SamplingStrategy):
    """
    Samples given as a single separator-delimited text.

    Args:
        sample_set: Text holding all samples, e.g. "Bob, Bobby, Steve".
            A list of strings is joined with ``separator``.
        separator: Separator between samples (default: ",")
    """

    definition_id = 'WordListSamplingStrategy'

    def __init__(self, sample_set: Union[str, List[str], None] = "", separator: str = ","):
        if not isinstance(separator, str) or separator == "":
            raise ConfigurationError(f"`separator` must be a non-empty string, got {separator!r}")
        if sample_set is None:
            sample_set = ""
        elif isinstance(sample_set, (list, tuple)):
            if not all(isinstance(sample, str) for sample in sample_set):
                raise ConfigurationError("`sample_set` list entries must all be strings")
            sample_set = separator.join(sample_set)
        elif not isinstance(sample_set, str):
            raise ConfigurationError(
                f"`sample_set` must be a string or a list of strings, got {type(sample_set).__name__}"
            )
        self.sample_set = sample_set
        self.separator = separator

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'WordListSamplingStrategy':
        """Create a strategy from an iterable of samples."""
        return cls(sample_set="\n".join(words), separator="\n")

    def settings(self) -> Dict[str, Any]:
        return {'sample_set': self.sample_set, 'separator': self.separator}

    def get_samples(self) -> List[str]:
        return _split_samples(self.sample_set, self.separator)

    def is_fully_configured(self) -> bool:
        return bool(self.sample_set.strip())


class FileSamplingStrategy(SamplingStrategy):
    """Samples read from a text file, one per line by default."""

    definition_id = 'FileSamplingStrategy'

    def __init__(self, path: str = "", separator: str = "\n", encoding: str = "utf-8"):
        if not isinstance(separator, str) or separator == "":
            raise ConfigurationError(f"`separator` must be a non-empty string, got {separator!r}")
        self.path = str(path) if path else ""
        self.separator = separator
        self.encoding = encoding

    def settings(self) -> Dict[str, Any]:
        return {'path': self.path, 'separator': self.separator, 'encoding': self.encoding}

    def get_samples(self) -> List[str]:
        try:
            text = Path(self.path).expanduser().read_text(encoding=self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise ConfigurationError(f"Cannot decode {self.path} as {self.encoding}: {e}") from e
        return _split_samples(text, self.separator)

    def is_fully_configured(self) -> bool:
        return bool(self.path) and Path(self.path).expanduser().is_file()


__all__ = [
    'SamplingStrategy',
    'WordListSamplingStrategy',
    'FileSamplingStrategy',
]
