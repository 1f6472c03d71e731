"""N-gram model tables for markovtext."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


MAX_ORDER = 3


@dataclass(frozen=True)
class NGramConfig:
    """Configuration for learning and generation."""
    output_length: int = 60
    trigrams_enabled: bool = False

    def __post_init__(self):
        if self.output_length < 1:
            raise ValueError(f"output_length must be positive, got {self.output_length}")


def context_key(tokens: Sequence[str]) -> str:
    """Serialize a context as a lookup key."""
    return ' '.join(tokens)


class NGramModel:
    """Order-1, order-2 and optional order-3 successor tables.

    Each table maps a context key to the successors seen after it, with
    duplicates kept so that a uniform pick over the tuple is weighted by
    observed frequency. Tables are read-only once built.
    """

    def __init__(self, corpus: Sequence[str], tables: Dict[int, Dict[str, Tuple[str, ...]]]):
        self.corpus = corpus
        self._tables = {
            order: MappingProxyType(table) for order, table in tables.items()
        }

    @classmethod
    def build(cls, corpus: Sequence[str], trigrams_enabled: bool = False) -> 'NGramModel':
        """Learn the tables in a single pass over the corpus."""
        max_order = MAX_ORDER if trigrams_enabled else 2
        tables: Dict[int, Dict[str, List[str]]] = {
            order: {} for order in range(1, max_order + 1)
        }

        for i in range(len(corpus)):
            for order, table in tables.items():
                # the last `order` tokens have no successor to record
                if i + order < len(corpus):
                    cls._insert(table, corpus[i:i + order], corpus[i + order])

        frozen = {
            order: {key: tuple(successors) for key, successors in table.items()}
            for order, table in tables.items()
        }
        return cls(corpus, frozen)

    @staticmethod
    def _insert(table: Dict[str, List[str]], context: Sequence[str], successor: str) -> None:
        table.setdefault(context_key(context), []).append(successor)

    @property
    def orders(self) -> List[int]:
        """Enabled orders, longest context first."""
        return sorted(self._tables, reverse=True)

    @property
    def trigrams_enabled(self) -> bool:
        return MAX_ORDER in self._tables

    def table(self, order: int) -> Mapping[str, Tuple[str, ...]]:
        return self._tables[order]

    def successors(self, context: Sequence[str]) -> Optional[Tuple[str, ...]]:
        """Return the successors recorded for a context, or None."""
        table = self._tables.get(len(context))
        if table is None:
            return None
        return table.get(context_key(context))

    def stats(self) -> Dict[int, int]:
        """Number of distinct contexts per order."""
        return {order: len(table) for order, table in self._tables.items()}
