#!/usr/bin/env python3
"""
Sequencing Strategies
=====================
Cut sample strings into ordered chunks tagged with their position in the
sample (start, middle, end).

- CharDepthSequencingStrategy: fixed-width windows of ``depth`` characters
- DelimiterSequencingStrategy: tokens split on a delimiter string

Example:
    >>> CharDepthSequencingStrategy(depth=2).get_sequences_of_sample("Bob")
    [Chunk(text='bo', is_start=True, ...), Chunk(text='b', ..., is_end=True)]
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from ..errors import ConfigurationError
from .strategy import Strategy


@dataclass(frozen=True)
class Chunk:
    """A contiguous fragment of one sample."""
    text: str
    is_start: bool = False
    is_middle: bool = False
    is_end: bool = False


def _flag_chunks(texts: List[str]) -> List[Chunk]:
    last = len(texts) - 1
    return [
        Chunk(
            text=text,
            is_start=i == 0,
            is_middle=0 < i < last,
            is_end=i == last,
        )
        for i, text in enumerate(texts)
    ]


class SequencingStrategy(Strategy):
    """Base class for segmentation strategies."""

    kind = 'sequencing'

    @abstractmethod
    def get_sequences_of_sample(self, sample: str) -> List[Chunk]:
        """Return the chunks of a single sample, in order."""

    def get_sequences_of_set(self, samples: Iterable[str]) -> List[List[Chunk]]:
        """Return the chunk list of every sample."""
        return [self.get_sequences_of_sample(sample) for sample in samples]


class CharDepthSequencingStrategy(SequencingStrategy):
    """
    Splits samples into non-overlapping windows of ``depth`` characters.

    The last window is shorter when the sample length is not a multiple of
    ``depth``. Windows are lower-cased unless ``preserve_case`` is set.
    """

    definition_id = 'CharDepthSequencingStrategy'

    def __init__(self, depth: int = 1, preserve_case: bool = False):
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise ConfigurationError(f"`depth` must be an integer >= 1, got {depth!r}")
        self.depth = depth
        self.preserve_case = bool(preserve_case)

    def settings(self) -> Dict[str, Any]:
        return {'depth': self.depth, 'preserve_case': self.preserve_case}

    def get_sequences_of_sample(self, sample: str) -> List[Chunk]:
        windows = [sample[i:i + self.depth] for i in range(0, len(sample), self.depth)]
        if not self.preserve_case:
            windows = [window.lower() for window in windows]
        return _flag_chunks(windows)


class DelimiterSequencingStrategy(SequencingStrategy):
    """
    Splits samples on a delimiter, e.g. syllables separated by '-'.

    Empty tokens (doubled or leading/trailing delimiters) are dropped before
    positions are assigned.
    """

    definition_id = 'DelimiterSequencingStrategy'

    def __init__(self, delimiter: str = ",", preserve_case: bool = False):
        if not isinstance(delimiter, str) or delimiter == "":
            raise ConfigurationError(f"`delimiter` must be a non-empty string, got {delimiter!r}")
        self.delimiter = delimiter
        self.preserve_case = bool(preserve_case)

    def settings(self) -> Dict[str, Any]:
        return {'delimiter': self.delimiter, 'preserve_case': self.preserve_case}

    def get_sequences_of_sample(self, sample: str) -> List[Chunk]:
        tokens = [token for token in sample.split(self.delimiter) if token]
        if not self.preserve_case:
            tokens = [token.lower() for token in tokens]
        return _flag_chunks(tokens)


__all__ = [
    'Chunk',
    'SequencingStrategy',
    'CharDepthSequencingStrategy',
    'DelimiterSequencingStrategy',
]
