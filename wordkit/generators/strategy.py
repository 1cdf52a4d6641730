#!/usr/bin/env python3
"""
Strategy Base Class
===================
Common base for the pluggable pipeline strategies (sampling, sequencing,
spelling). Each concrete strategy has a stable ``definition_id`` under which
it is known to a ``StrategyRegistry``, and can describe its own settings as
a plain mapping.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Strategy(ABC):
    """Base class for all pluggable strategies."""

    # Stable identifier used by the registry
    definition_id: str = ""
    # One of 'sampling', 'sequencing', 'spelling'
    kind: str = ""

    @abstractmethod
    def settings(self) -> Dict[str, Any]:
        """Return the constructor settings of this instance."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a mapping understood by ``StrategyRegistry.from_dict``."""
        return {
            'definition_id': self.definition_id,
            'settings': self.settings(),
        }

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.settings().items())
        return f"{type(self).__name__}({args})"
