#!/usr/bin/env python3
"""
WordKit - Sample-Based Word Generator
=====================================

Generates pronounceable pseudo-random words that statistically resemble a
set of example words, using a seeded Markov-chain-like model of word
fragments.

Quick Start
-----------
    from wordkit import WordKit

    kit = WordKit()

    # Generate names resembling the samples
    names = kit.generate(10, samples=["Bob", "Bobby", "Steve", "Alice"],
                         depth=2, seed="Test", capitalize=True)

    # Or from a YAML generator profile
    generator = kit.generator_from_profile("elves.yaml")
    names = generator.generate(20)

Modules
-------
    wordkit.generators - Sampling, sequencing, transition model, generation
    wordkit.settings   - YAML application config
    wordkit.errors     - Exception hierarchy

CLI Usage
---------
    python -m wordkit generate -n 10 --samples "Bob,Bobby,Steve" --depth 2
    python -m wordkit generate -n 20 --file names.txt --capitalize
    python -m wordkit strategies
"""

__version__ = "0.1.0"
__author__ = "WordKit"

from pathlib import Path
from typing import Iterable, List, Optional, Union

from . import generators
from . import settings
from .errors import (
    WordKitError,
    ConfigurationError,
    GenerationLookupError,
    RetryExhaustedError,
)
from .generators import (
    WordGenerator,
    GenerationParameters,
    EndingPickMode,
    StrategyRegistry,
    default_registry,
    WordListSamplingStrategy,
    FileSamplingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
    NoneSpellingStrategy,
    BeginningCapitalsSpellingStrategy,
)
from .settings import get_setting, load_yaml_file


# =============================================================================
# Main Interface
# =============================================================================

class WordKit:
    """
    Convenience interface around WordGenerator.

    Strategies are resolved through the given registry (a fresh
    ``default_registry()`` if omitted). Settings not given explicitly come
    from the app config.
    """

    def __init__(self, registry: Optional[StrategyRegistry] = None):
        self.registry = registry or default_registry()

    def build_generator(self,
                        samples: Union[str, Iterable[str], None] = None,
                        file: Union[str, Path, None] = None,
                        separator: Optional[str] = None,
                        depth: Optional[int] = None,
                        delimiter: Optional[str] = None,
                        preserve_case: Optional[bool] = None,
                        capitalize: Optional[bool] = None,
                        max_attempts: Optional[int] = None,
                        **parameters) -> WordGenerator:
        """
        Build a generator from keyword settings.

        Args:
            samples: Samples as a list, or as one separator-delimited text
            file: Text file with samples (alternative to ``samples``)
            separator: Sample separator (default from config)
            depth: Chunk width in characters
            delimiter: Split samples on this delimiter instead of by width
            preserve_case: Keep the samples' letter case
            capitalize: Capitalize the first letter of generated words
            max_attempts: Attempts per batch slot
            **parameters: GenerationParameters fields (target_length_min,
                seed, entropy, ending_pick_mode, ...)
        """
        if samples is not None and file is not None:
            raise ConfigurationError("Pass either `samples` or `file`, not both")

        if file is not None:
            sampling = FileSamplingStrategy(path=str(file), separator=separator or "\n")
        elif samples is None or isinstance(samples, str):
            sampling = WordListSamplingStrategy(
                sample_set=samples or "",
                separator=separator or get_setting('sampling.separator', ","),
            )
        else:
            sampling = WordListSamplingStrategy.from_words(samples)

        if preserve_case is None:
            preserve_case = get_setting('sequencing.preserve_case', False)
        if delimiter is not None:
            sequencing = DelimiterSequencingStrategy(delimiter=delimiter, preserve_case=preserve_case)
        else:
            if depth is None:
                depth = get_setting('sequencing.depth', 1)
            sequencing = CharDepthSequencingStrategy(depth=depth, preserve_case=preserve_case)

        if capitalize is None:
            spelling = self.registry.new_instance(
                get_setting('spelling.strategy', 'NoneSpellingStrategy'), kind='spelling'
            )
        elif capitalize:
            spelling = BeginningCapitalsSpellingStrategy()
        else:
            spelling = NoneSpellingStrategy()

        if max_attempts is None:
            max_attempts = get_setting('generator.max_attempts')

        return WordGenerator(
            sampling_strategy=sampling,
            sequencing_strategy=sequencing,
            spelling_strategy=spelling,
            parameters=GenerationParameters.from_settings(**parameters),
            max_attempts=max_attempts,
        )

    def generate(self, count: int = 10, **kwargs) -> List[str]:
        """Build a generator from ``kwargs`` and generate ``count`` words."""
        return self.build_generator(**kwargs).generate(count)

    def generator_from_profile(self, path: Union[str, Path]) -> WordGenerator:
        """Load a generator from a YAML profile (see ``WordGenerator.from_dict``)."""
        return WordGenerator.from_dict(load_yaml_file(path), self.registry)


__all__ = [
    '__version__',
    'WordKit',
    'WordKitError',
    'ConfigurationError',
    'GenerationLookupError',
    'RetryExhaustedError',
    'WordGenerator',
    'GenerationParameters',
    'EndingPickMode',
    'StrategyRegistry',
    'default_registry',
    'generators',
    'settings',
]
