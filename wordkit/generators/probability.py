#!/usr/bin/env python3
"""
Transition Model
================
Aggregates the chunks of a segmented sample set into weighted tables:

- starts:   chunks that began a sample
- endings:  chunks that ended a sample
- branches: for every chunk, the chunks observed to follow it

Every table is "stacked": entries are sorted ascending by frequency and
carry a cumulative probability, the last entry being exactly 1.0. E.g.

    Chunk:       |  d  |  b  |  c  |  a  |
    Frequency:   |  1  |  2  |  2  |  3  |  total: 8
    Probability: |0.125|0.375|0.625|1.000|

A value drawn from [0, 1) selects the first entry whose cumulative
probability is >= the value.
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from ..errors import GenerationLookupError
from .sequencing import Chunk

logger = logging.getLogger(__name__)


# =============================================================================
# Weighted Tables
# =============================================================================

@dataclass(frozen=True)
class WeightedEntry:
    """A table entry with its cumulative probability."""
    value: str
    probability: float


WeightedTable = Tuple[WeightedEntry, ...]


def stack_frequencies(frequencies: Mapping[str, float]) -> WeightedTable:
    """
    Convert raw frequencies into a cumulative probability table.

    Candidates are sorted ascending by frequency; ties keep their insertion
    order. The last entry is clamped to 1.0 to absorb floating-point drift.
    """
    items = [(value, freq) for value, freq in frequencies.items() if freq > 0]
    if not items:
        return ()

    total = sum(freq for _, freq in items)
    items.sort(key=lambda item: item[1])

    table = []
    cumulative = 0.0
    for value, freq in items:
        cumulative += freq / total
        table.append(WeightedEntry(value, cumulative))
    table[-1] = WeightedEntry(table[-1].value, 1.0)
    return tuple(table)


def pick_weighted(table: WeightedTable, value: float) -> str:
    """Return the first entry whose cumulative probability is >= value."""
    for entry in table:
        if value <= entry.probability:
            return entry.value
    raise GenerationLookupError(f"Failed to get item for value '{value}' from list of {len(table)}")


# =============================================================================
# Transition Model
# =============================================================================

@dataclass(frozen=True)
class TransitionModel:
    """Weighted start, ending and branch tables of a sample set."""
    starts: WeightedTable = ()
    endings: WeightedTable = ()
    branches: Dict[str, WeightedTable] = field(default_factory=dict)
    # Every distinct chunk, uniformly weighted (entropy overrides pick from here)
    chunks: WeightedTable = ()
    # Every chunk that has a branch, weighted by outgoing frequency
    branch_sources: WeightedTable = ()

    @property
    def ending_values(self) -> FrozenSet[str]:
        return frozenset(entry.value for entry in self.endings)

    def is_empty(self) -> bool:
        return not self.starts


class TransitionModelBuilder:
    """Builds a TransitionModel from segmented samples."""

    def build(self, segmented_set: Iterable[List[Chunk]]) -> TransitionModel:
        edges = defaultdict(Counter)
        starts = Counter()
        endings = Counter()
        seen = Counter()

        for chunks in segmented_set:
            for i, chunk in enumerate(chunks):
                seen[chunk.text] += 1
                if chunk.is_start:
                    starts[chunk.text] += 1
                if chunk.is_end:
                    endings[chunk.text] += 1
                if i + 1 < len(chunks):
                    edges[chunk.text][chunks[i + 1].text] += 1

        branches = {source: stack_frequencies(targets) for source, targets in edges.items()}
        outgoing = {source: sum(targets.values()) for source, targets in edges.items()}

        model = TransitionModel(
            starts=stack_frequencies(starts),
            endings=stack_frequencies(endings),
            branches=branches,
            chunks=stack_frequencies({text: 1 for text in seen}),
            branch_sources=stack_frequencies(outgoing),
        )
        logger.debug(
            f"Built transition model: {len(model.chunks)} chunks, {len(model.starts)} starts, "
            f"{len(model.endings)} endings, {len(model.branches)} branches"
        )
        return model


__all__ = [
    'WeightedEntry',
    'WeightedTable',
    'TransitionModel',
    'TransitionModelBuilder',
    'stack_frequencies',
    'pick_weighted',
]
