#!/usr/bin/env python3
"""
Chunk Concatenator
==================
Synthesizes single words by walking a TransitionModel:

    Start -> Middle* -> End

1. Start: pick a starting chunk
2. Middle: keep picking followers of the previous chunk until the target
   length is reached
3. End: resolve the ending according to the EndingPickMode

Every pick may be overridden by a uniformly random chunk, with a chance
given by the entropy settings.

Note: target lengths are best-effort. Chunks wider than one character can
overshoot them.
"""

import math
from typing import List

from ..errors import GenerationLookupError
from .parameters import EndingPickMode, GenerationParameters
from .probability import TransitionModel, WeightedTable, pick_weighted
from .random_seeded import SeededRandom


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ChunkConcatenator:
    """
    Builds words from a transition model.

    Args:
        model: Weighted tables built from the sample set
        rng: Seeded RNG; advanced by every pick
        parameters: Target lengths, entropies and ending pick mode
    """

    def __init__(self,
                 model: TransitionModel,
                 rng: SeededRandom,
                 parameters: GenerationParameters):
        self.model = model
        self.rng = rng
        self.parameters = parameters
        self._endings = model.ending_values
        # A walk longer than the number of distinct chunks must have cycled
        self._max_ending_steps = max(1, len(model.chunks))

    def generate(self) -> str:
        """
        Generate a single word.

        Raises:
            GenerationLookupError: If a required pick set is empty, or no
                ending could be reached
        """
        params = self.parameters
        target_length = round_half_up(
            self.rng.range(params.target_length_min, params.target_length_max)
        )

        start = self._pick_from(self.model.starts, params.entropy_start)
        chunks = [start]
        length = len(start)

        while length < target_length:
            following = self._pick_following(chunks[-1])
            chunks.append(following)
            length += len(following)

        mode = params.ending_pick_mode
        if mode is not EndingPickMode.NONE and not self._start_is_complete(chunks, length, target_length):
            if mode is EndingPickMode.RANDOM:
                self._append_random_ending(chunks, length, target_length)
            else:
                chunks.append(self._follow_to_ending(chunks[-1]))

        return ''.join(chunks)

    def _start_is_complete(self, chunks: List[str], length: int, target_length: int) -> bool:
        """A lone start chunk that reaches the target and is a known ending needs no ending."""
        return len(chunks) == 1 and length >= target_length and chunks[0] in self._endings

    def _append_random_ending(self, chunks: List[str], length: int, target_length: int):
        ending = self._pick_from(self.model.endings, self.parameters.entropy_end)
        if length + len(ending) > target_length and len(chunks) > 1:
            chunks.pop()
        chunks.append(ending)

    def _follow_to_ending(self, previous: str) -> str:
        for _ in range(self._max_ending_steps):
            following = self._pick_following(previous)
            if following in self._endings:
                return following
            previous = following
        raise GenerationLookupError(
            f"No ending reached within {self._max_ending_steps} steps from '{previous}'"
        )

    def _pick_following(self, previous: str) -> str:
        """
        Pick a chunk that can follow ``previous``.

        Chunks that never had a follower continue from any branch source
        instead, so generation does not stall before the target length.
        """
        branch = self.model.branches.get(previous)
        if branch:
            return self._pick_from(branch, self.parameters.entropy_middle)
        if not self.model.branch_sources:
            raise GenerationLookupError(f"No continuation available after '{previous}'")
        return self._pick_from(self.model.branch_sources, self.parameters.entropy_middle)

    def _pick_from(self, table: WeightedTable, entropy: float) -> str:
        """Weighted pick from ``table``, or a random chunk with the entropy chance."""
        threshold = max(self.parameters.entropy, entropy)
        if self.rng.random() <= threshold:
            return pick_weighted(self.model.chunks, self.rng.random())
        return pick_weighted(table, self.rng.random())


__all__ = [
    'ChunkConcatenator',
    'round_half_up',
]
