#!/usr/bin/env python3
"""
Seeded Randomness
=================
Deterministic pseudo-random numbers for word generation.

A string seed is hashed into a 32-bit state (xmur3-style mixing). Every call
to ``random()`` advances that state and feeds it through one mulberry32
round, so the sequence of values is a pure function of the seed and the
number of calls, identical on every platform.

Unseeded runs draw a fresh seed from the ``secrets`` CSPRNG.
"""

import secrets
import string
from typing import Any

# =============================================================================
# 32-bit integer helpers
# =============================================================================

MASK_32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296

SEED_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiplication."""
    return (a * b) & MASK_32


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & MASK_32


def new_seed(length: int = 32) -> str:
    """Return a fresh random alphanumeric seed."""
    return ''.join(secrets.choice(SEED_ALPHABET) for _ in range(length))


# =============================================================================
# Seeded Random Number Generator
# =============================================================================

class SeededRandom:
    """
    Pseudo-random number generator driven by a string seed.

    Two instances created from the same seed return the same values for the
    same sequence of calls.
    """

    def __init__(self, seed: Any):
        self.seed = seed if isinstance(seed, str) else str(seed)
        self._state = self._hash_seed(self.seed)

    @staticmethod
    def _hash_seed(seed: str) -> int:
        """Mix the seed bytes, in order, into a 32-bit state."""
        data = seed.encode('utf-8')
        h = (1779033703 ^ len(data)) & MASK_32
        for byte in data:
            h = _imul(h ^ byte, 3432918353)
            h = _rotl(h, 13)
        return h

    def _next_state(self) -> int:
        h = self._state
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h = (h ^ (h >> 16)) & MASK_32
        self._state = h
        return h

    @staticmethod
    def _mulberry32(value: int) -> float:
        t = (value + 0x6D2B79F5) & MASK_32
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        return self._mulberry32(self._next_state())

    def range(self, minimum: float, maximum: float) -> float:
        """Return the next float scaled into [minimum, maximum)."""
        return self.random() * (maximum - minimum) + minimum


__all__ = [
    'SeededRandom',
    'new_seed',
    'SEED_ALPHABET',
]
