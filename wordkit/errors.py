#!/usr/bin/env python3
"""
WordKit Errors
==============
Exception hierarchy shared by the generation pipeline and the CLI.

- ConfigurationError: invalid construction parameters or missing strategies
- GenerationLookupError: a single generation attempt could not pick a chunk
- RetryExhaustedError: a batch slot ran out of attempts
"""

from typing import Optional


class WordKitError(Exception):
    """Base class for all wordkit errors."""


class ConfigurationError(WordKitError, ValueError):
    """Raised when a generator or strategy is constructed with invalid settings."""


class GenerationLookupError(WordKitError, LookupError):
    """Raised when a weighted pick finds no entry, or no continuation exists."""


class RetryExhaustedError(WordKitError, RuntimeError):
    """
    Raised when no new unique word could be produced for one slot of a batch.

    Attributes:
        slot: Zero-based index of the batch slot that failed
        attempts: Number of attempts spent on that slot
        cause: The last error raised by an attempt, if any
    """

    def __init__(self, slot: int, attempts: int, cause: Optional[BaseException] = None):
        self.slot = slot
        self.attempts = attempts
        self.cause = cause
        message = (
            f"Maximum number of tries to produce unique word exceeded "
            f"(slot {slot + 1}, {attempts} attempts)"
        )
        if cause is not None:
            message += f". Inner cause: {cause}"
        super().__init__(message)


__all__ = [
    'WordKitError',
    'ConfigurationError',
    'GenerationLookupError',
    'RetryExhaustedError',
]
