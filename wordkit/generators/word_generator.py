#!/usr/bin/env python3
"""
Word Generator
==============
Generates batches of unique pseudo-random words that resemble a sample set.

Pipeline per call:
    samples -> chunks -> transition model -> words -> spelling

Usage:
    from wordkit.generators import (
        WordGenerator, WordListSamplingStrategy,
        CharDepthSequencingStrategy, BeginningCapitalsSpellingStrategy,
    )

    generator = WordGenerator(
        sampling_strategy=WordListSamplingStrategy("Bob, Bobby, Steve"),
        sequencing_strategy=CharDepthSequencingStrategy(depth=2),
        spelling_strategy=BeginningCapitalsSpellingStrategy(),
        target_length_min=3,
        target_length_max=7,
        seed="Test",
    )
    words = generator.generate(5)
"""

import inspect
import logging
from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

from ..errors import ConfigurationError, GenerationLookupError, RetryExhaustedError
from ..settings import get_setting
from .concatenator import ChunkConcatenator
from .parameters import GenerationParameters
from .probability import TransitionModel, TransitionModelBuilder
from .random_seeded import SeededRandom, new_seed
from .sampling import SamplingStrategy
from .sequencing import SequencingStrategy
from .spelling import SpellingStrategy

if TYPE_CHECKING:
    from .registry import StrategyRegistry

logger = logging.getLogger(__name__)

# Attempts allowed per batch slot before giving up
MAX_ATTEMPTS = 1000


def _require_strategy(value: Any, expected: type, name: str):
    if value is None:
        raise ConfigurationError(f"`{name}` must not be None!")
    if not isinstance(value, expected):
        raise ConfigurationError(
            f"`{name}` must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value


class WordGenerator:
    """
    Generates pseudo-random words based on a sample set.

    Parameters
    ----------
    sampling_strategy : SamplingStrategy
        Provides the sample strings.
    sequencing_strategy : SequencingStrategy
        Cuts samples into chunks.
    spelling_strategy : SpellingStrategy
        Post-processes accepted words.
    parameters : GenerationParameters, optional
        Length, seed, entropy and ending settings. Mutually exclusive with
        keyword parameters, which are passed to ``GenerationParameters``.
    max_attempts : int, optional
        Attempts per batch slot (default: ``MAX_ATTEMPTS``).

    Raises
    ------
    ConfigurationError
        If a strategy is missing or a parameter is invalid.
    """

    def __init__(self,
                 sampling_strategy: SamplingStrategy,
                 sequencing_strategy: SequencingStrategy,
                 spelling_strategy: SpellingStrategy,
                 parameters: Optional[GenerationParameters] = None,
                 max_attempts: Optional[int] = None,
                 **parameter_overrides):
        self.sampling_strategy = _require_strategy(sampling_strategy, SamplingStrategy, 'sampling_strategy')
        self.sequencing_strategy = _require_strategy(sequencing_strategy, SequencingStrategy, 'sequencing_strategy')
        self.spelling_strategy = _require_strategy(spelling_strategy, SpellingStrategy, 'spelling_strategy')

        if parameters is not None and parameter_overrides:
            raise ConfigurationError("Pass either `parameters` or keyword parameters, not both")
        if parameters is None:
            parameters = GenerationParameters(**parameter_overrides)
        elif not isinstance(parameters, GenerationParameters):
            raise ConfigurationError(
                f"`parameters` must be GenerationParameters, got {type(parameters).__name__}"
            )
        self.parameters = parameters

        if max_attempts is None:
            max_attempts = MAX_ATTEMPTS
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
            raise ConfigurationError(f"`max_attempts` must be an integer >= 1, got {max_attempts!r}")
        self.max_attempts = max_attempts

    @classmethod
    def from_dict(cls,
                  data: Mapping[str, Any],
                  registry: 'StrategyRegistry') -> 'WordGenerator':
        """
        Build a generator from a plain mapping, e.g. a loaded YAML profile.

        Expected layout::

            sampling:   {definition_id: WordListSamplingStrategy, settings: {...}}
            sequencing: {definition_id: CharDepthSequencingStrategy, settings: {...}}
            spelling:   {definition_id: NoneSpellingStrategy}
            parameters: {target_length_min: 3, ...}
            max_attempts: 1000

        Missing parameters fall back to the ``generator`` config section.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Generator settings must be a mapping, got {type(data).__name__}")

        strategies = {}
        for kind in ('sampling', 'sequencing', 'spelling'):
            entry = data.get(kind)
            if entry is None:
                entry = {'definition_id': get_setting(f'{kind}.strategy')}
            strategies[kind] = registry.from_dict(entry, kind=kind)

        parameters = GenerationParameters.from_settings(**dict(data.get('parameters') or {}))
        max_attempts = data.get('max_attempts', get_setting('generator.max_attempts', MAX_ATTEMPTS))

        return cls(
            sampling_strategy=strategies['sampling'],
            sequencing_strategy=strategies['sequencing'],
            spelling_strategy=strategies['spelling'],
            parameters=parameters,
            max_attempts=max_attempts,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sampling': self.sampling_strategy.to_dict(),
            'sequencing': self.sequencing_strategy.to_dict(),
            'spelling': self.spelling_strategy.to_dict(),
            'parameters': self.parameters.to_dict(),
            'max_attempts': self.max_attempts,
        }

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def build_model(self) -> TransitionModel:
        """Sample, segment and aggregate into a fresh transition model."""
        if not self.sampling_strategy.is_fully_configured():
            raise ConfigurationError(
                f"Sampling strategy {self.sampling_strategy.definition_id} is not fully configured"
            )
        samples = self.sampling_strategy.get_samples()
        sequences = self.sequencing_strategy.get_sequences_of_set(samples)
        model = TransitionModelBuilder().build(sequences)
        if model.is_empty():
            raise ConfigurationError("The sample set does not contain any usable samples")
        logger.debug(f"Learned from {len(samples)} samples")
        return model

    def _generate_raw(self, count: int) -> List[str]:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ConfigurationError(f"`count` must be a non-negative integer, got {count!r}")
        if count == 0:
            return []

        model = self.build_model()
        seed = self.parameters.seed
        if seed is None:
            seed = new_seed(get_setting('generator.seed_length', 32))
        concatenator = ChunkConcatenator(model, SeededRandom(seed), self.parameters)

        slow_slot = get_setting('generator.slow_slot_warning', 250)
        results = []
        accepted = set()
        for slot in range(count):
            word = None
            last_error = None
            attempts = 0
            while word is None:
                if attempts >= self.max_attempts:
                    raise RetryExhaustedError(slot, attempts, last_error) from last_error
                attempts += 1
                try:
                    candidate = concatenator.generate()
                except GenerationLookupError as e:
                    last_error = e
                    logger.debug(f"Attempt {attempts} for slot {slot + 1} failed: {e}")
                    continue
                if candidate not in accepted:
                    word = candidate

            if slow_slot and attempts >= slow_slot:
                logger.warning(
                    f"Slot {slot + 1}/{count} needed {attempts} attempts; "
                    f"the sample set may be too small for this batch size"
                )
            accepted.add(word)
            results.append(word)

        logger.info(f"Generated {len(results)} words (seed={seed!r})")
        return results

    def generate(self, count: int) -> List[str]:
        """
        Generate ``count`` unique words.

        Raises:
            ConfigurationError: If the sampling strategy is not usable or
                count is negative
            RetryExhaustedError: If a unique word could not be produced
                within ``max_attempts`` for one slot
        """
        words = self._generate_raw(count)
        processed = []
        for word in words:
            result = self.spelling_strategy.apply(word)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(
                    f"{type(self.spelling_strategy).__name__}.apply is asynchronous; "
                    f"use generate_async() instead"
                )
            processed.append(result)
        return processed

    async def generate_async(self, count: int) -> List[str]:
        """Like ``generate``, but awaits asynchronous spelling strategies."""
        words = self._generate_raw(count)
        processed = []
        for word in words:
            result = self.spelling_strategy.apply(word)
            if inspect.isawaitable(result):
                result = await result
            processed.append(result)
        return processed


__all__ = [
    'WordGenerator',
    'MAX_ATTEMPTS',
]
