#!/usr/bin/env python3
"""
Strategy Registry
=================
Maps stable string ids to strategy factories, so generators can be built
from plain settings (YAML profiles, CLI arguments).

Registries are explicit values; there is no process-wide instance. Use
``default_registry()`` for one preloaded with the built-in strategies and
register additional strategies on it as needed.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..errors import ConfigurationError
from .sampling import FileSamplingStrategy, WordListSamplingStrategy
from .sequencing import CharDepthSequencingStrategy, DelimiterSequencingStrategy
from .spelling import BeginningCapitalsSpellingStrategy, NoneSpellingStrategy
from .strategy import Strategy

STRATEGY_KINDS = ('sampling', 'sequencing', 'spelling')


@dataclass(frozen=True)
class StrategyDefinition:
    """Describes how to create one kind of strategy."""
    id: str
    kind: str
    factory: Callable[..., Strategy]
    description: str = ""

    def new_instance(self, settings: Optional[Mapping[str, Any]] = None) -> Strategy:
        try:
            return self.factory(**dict(settings or {}))
        except TypeError as e:
            raise ConfigurationError(f"Invalid settings for {self.id}: {e}") from e


class StrategyRegistry:
    """Lookup of strategy definitions by id."""

    def __init__(self):
        self._definitions: Dict[str, StrategyDefinition] = {}

    def register(self, definition: StrategyDefinition) -> StrategyDefinition:
        if definition.kind not in STRATEGY_KINDS:
            raise ConfigurationError(
                f"Unknown strategy kind '{definition.kind}' (choose from: {', '.join(STRATEGY_KINDS)})"
            )
        if definition.id in self._definitions:
            raise ConfigurationError(f"Strategy '{definition.id}' is already registered")
        self._definitions[definition.id] = definition
        return definition

    def register_class(self, cls: type, description: str = "") -> StrategyDefinition:
        """Register a Strategy subclass under its ``definition_id``."""
        doc = (cls.__doc__ or "").strip().splitlines()
        return self.register(StrategyDefinition(
            id=cls.definition_id,
            kind=cls.kind,
            factory=cls,
            description=description or (doc[0] if doc else ""),
        ))

    def get(self, definition_id: str) -> StrategyDefinition:
        definition = self._definitions.get(definition_id)
        if definition is None:
            available = ', '.join(sorted(self._definitions))
            raise ConfigurationError(
                f"Unknown strategy '{definition_id}'. Available strategies: {available}"
            )
        return definition

    def ids(self, kind: Optional[str] = None) -> List[str]:
        return [d.id for d in self._definitions.values() if kind is None or d.kind == kind]

    def definitions(self, kind: Optional[str] = None) -> List[StrategyDefinition]:
        return [d for d in self._definitions.values() if kind is None or d.kind == kind]

    def new_instance(self,
                     definition_id: str,
                     settings: Optional[Mapping[str, Any]] = None,
                     kind: Optional[str] = None) -> Strategy:
        definition = self.get(definition_id)
        if kind is not None and definition.kind != kind:
            raise ConfigurationError(
                f"Strategy '{definition_id}' is a {definition.kind} strategy, expected {kind}"
            )
        return definition.new_instance(settings)

    def from_dict(self, data: Mapping[str, Any], kind: Optional[str] = None) -> Strategy:
        """Create a strategy from ``{'definition_id': ..., 'settings': {...}}``."""
        if isinstance(data, str):
            return self.new_instance(data, kind=kind)
        if not isinstance(data, Mapping) or not data.get('definition_id'):
            raise ConfigurationError(f"Strategy settings need a 'definition_id', got {data!r}")
        return self.new_instance(data['definition_id'], data.get('settings'), kind=kind)

    def __contains__(self, definition_id: str) -> bool:
        return definition_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


def default_registry() -> StrategyRegistry:
    """Return a new registry holding the built-in strategies."""
    registry = StrategyRegistry()
    registry.register_class(WordListSamplingStrategy, "Samples from a separator-delimited list")
    registry.register_class(FileSamplingStrategy, "Samples read from a text file")
    registry.register_class(CharDepthSequencingStrategy, "Fixed-width character chunks")
    registry.register_class(DelimiterSequencingStrategy, "Chunks split on a delimiter")
    registry.register_class(NoneSpellingStrategy, "No post-processing")
    registry.register_class(BeginningCapitalsSpellingStrategy, "Capitalize the first letter")
    return registry


__all__ = [
    'StrategyDefinition',
    'StrategyRegistry',
    'default_registry',
    'STRATEGY_KINDS',
]
