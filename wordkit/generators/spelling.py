#!/usr/bin/env python3
"""
Spelling Strategies
===================
Post-processing applied to every accepted word.
"""

from abc import abstractmethod
from typing import Any, Dict

from .strategy import Strategy


class SpellingStrategy(Strategy):
    """Base class for word post-processing."""

    kind = 'spelling'

    @abstractmethod
    def apply(self, word: str) -> str:
        """Return the post-processed word."""

    def settings(self) -> Dict[str, Any]:
        return {}


class NoneSpellingStrategy(SpellingStrategy):
    """Leaves words unchanged."""

    definition_id = 'NoneSpellingStrategy'

    def apply(self, word: str) -> str:
        return word


class BeginningCapitalsSpellingStrategy(SpellingStrategy):
    """Upper-cases the first letter; the rest of the word is kept as is."""

    definition_id = 'BeginningCapitalsSpellingStrategy'

    def apply(self, word: str) -> str:
        return word[:1].upper() + word[1:]


__all__ = [
    'SpellingStrategy',
    'NoneSpellingStrategy',
    'BeginningCapitalsSpellingStrategy',
]
