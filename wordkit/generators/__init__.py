#!/usr/bin/env python3
"""
Word Generators
===============
Markov-chain-like word generation from a sample set:
- Sampling: where the sample strings come from
- Sequencing: how samples are cut into chunks
- Probability: weighted start/ending/branch tables
- Concatenation: seeded, entropy-biased assembly of single words
- WordGenerator: unique batches with post-processing (spelling)
"""

from .random_seeded import (
    SeededRandom,
    new_seed,
)
from .strategy import Strategy
from .sampling import (
    SamplingStrategy,
    WordListSamplingStrategy,
    FileSamplingStrategy,
)
from .sequencing import (
    Chunk,
    SequencingStrategy,
    CharDepthSequencingStrategy,
    DelimiterSequencingStrategy,
)
from .spelling import (
    SpellingStrategy,
    NoneSpellingStrategy,
    BeginningCapitalsSpellingStrategy,
)
from .probability import (
    WeightedEntry,
    TransitionModel,
    TransitionModelBuilder,
    stack_frequencies,
    pick_weighted,
)
from .parameters import (
    EndingPickMode,
    GenerationParameters,
)
from .concatenator import ChunkConcatenator
from .word_generator import (
    WordGenerator,
    MAX_ATTEMPTS,
)
from .registry import (
    StrategyDefinition,
    StrategyRegistry,
    default_registry,
)

__all__ = [
    # RNG
    'SeededRandom',
    'new_seed',
    # Strategies
    'Strategy',
    'SamplingStrategy',
    'WordListSamplingStrategy',
    'FileSamplingStrategy',
    'Chunk',
    'SequencingStrategy',
    'CharDepthSequencingStrategy',
    'DelimiterSequencingStrategy',
    'SpellingStrategy',
    'NoneSpellingStrategy',
    'BeginningCapitalsSpellingStrategy',
    # Model
    'WeightedEntry',
    'TransitionModel',
    'TransitionModelBuilder',
    'stack_frequencies',
    'pick_weighted',
    # Generation
    'EndingPickMode',
    'GenerationParameters',
    'ChunkConcatenator',
    'WordGenerator',
    'MAX_ATTEMPTS',
    # Registry
    'StrategyDefinition',
    'StrategyRegistry',
    'default_registry',
]
