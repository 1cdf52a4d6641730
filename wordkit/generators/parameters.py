#!/usr/bin/env python3
"""
Generation Parameters
=====================
Numeric and enum knobs of a word generator, validated once at construction.
"""

from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import Any, Dict, Optional

from ..errors import ConfigurationError
from ..settings import get_setting


class EndingPickMode(Enum):
    """How (and if) the final chunk of a word is chosen."""
    NONE = "none"
    RANDOM = "random"
    FOLLOW_BRANCH = "follow_branch"

    @classmethod
    def parse(cls, value: Any) -> 'EndingPickMode':
        """Accept a member, its value or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_')
            for mode in cls:
                if key in (mode.value, mode.name.lower()):
                    return mode
        choices = ', '.join(mode.value for mode in cls)
        raise ConfigurationError(f"Unknown ending pick mode {value!r} (choose from: {choices})")


ENTROPY_FIELDS = ('entropy', 'entropy_start', 'entropy_middle', 'entropy_end')


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class GenerationParameters:
    """
    Parameters of a generation run.

    Attributes:
        target_length_min: Minimum length words *should* have
        target_length_max: Maximum length words *should* have
        seed: Randomization seed; a new random seed is used per call if None
        entropy: General chance (0-1) of picking any chunk at random
        entropy_start: Same, for the first chunk only
        entropy_middle: Same, for middle chunks (and follow-branch endings)
        entropy_end: Same, for randomly picked endings
        ending_pick_mode: How the last chunk of a word is chosen
    """
    target_length_min: int = 3
    target_length_max: int = 10
    seed: Optional[str] = None
    entropy: float = 0.0
    entropy_start: float = 0.0
    entropy_middle: float = 0.0
    entropy_end: float = 0.0
    ending_pick_mode: EndingPickMode = EndingPickMode.RANDOM

    def __post_init__(self):
        for name in ('target_length_min', 'target_length_max'):
            value = getattr(self, name)
            if not _is_integer(value) or value < 1:
                raise ConfigurationError(f"`{name}` must be an integer, greater or equal to 1! Got {value!r}")
        if self.target_length_min > self.target_length_max:
            raise ConfigurationError(
                f"`target_length_min` ({self.target_length_min}) must not exceed "
                f"`target_length_max` ({self.target_length_max})"
            )
        for name in ENTROPY_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real) or not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"`{name}` must be a number between 0 and 1, got {value!r}")
            object.__setattr__(self, name, float(value))
        if self.seed is not None and not isinstance(self.seed, str):
            object.__setattr__(self, 'seed', str(self.seed))
        object.__setattr__(self, 'ending_pick_mode', EndingPickMode.parse(self.ending_pick_mode))

    @classmethod
    def from_settings(cls, **overrides) -> 'GenerationParameters':
        """Build parameters from the ``generator`` config section plus overrides."""
        cfg = get_setting('generator', {}) or {}
        names = {f.name for f in fields(cls)}
        unknown = set(overrides) - names
        if unknown:
            raise ConfigurationError(f"Unknown generation parameters: {', '.join(sorted(unknown))}")
        values = {name: cfg[name] for name in names if name in cfg}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['ending_pick_mode'] = self.ending_pick_mode.value
        return data


__all__ = [
    'EndingPickMode',
    'GenerationParameters',
]
