"""
Ordered, append-only table of learned merge rules.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from typing_extensions import deprecated

from .errors import TrainingError
from .types import BASE_VOCAB_SIZE, Token, TokenPair


@dataclass(frozen=True)
class MergeRule:
    """A learned rewrite of ``pair`` into ``token``, learned at position ``rank``."""

    pair: TokenPair
    token: Token
    rank: int


class MergeTable:
    """
    Merge rules in the order they were learned.

    Rank 0 is the first merge learned and the new token of rank ``r`` is
    always ``256 + r``. Rules are never removed or changed once appended.

    Example:
       >>> table = MergeTable()
       >>> table.append((104, 101), 256)
       MergeRule(pair=(104, 101), token=256, rank=0)
       >>> table.rank((104, 101))
       0
    """

    def __init__(self) -> None:
        self._rules: list[MergeRule] = []
        # byte pair -> rule, for constant time lookups during encoding
        self._index: dict[TokenPair, MergeRule] = {}

    def append(self, pair: TokenPair, token: Token) -> MergeRule:
        """
        Record a new merge rule at the next rank.

        :raises TrainingError: If ``token`` is not the next dense id or
            ``pair`` already has a rule.
        """
        rank = len(self._rules)
        if token != BASE_VOCAB_SIZE + rank:
            raise TrainingError(
                f"merge token {token} breaks id order, expected {BASE_VOCAB_SIZE + rank}"
            )
        if pair in self._index:
            raise TrainingError(f"pair {pair} already merged")

        rule = MergeRule(pair=pair, token=token, rank=rank)
        self._rules.append(rule)
        self._index[pair] = rule
        return rule

    def rank(self, pair: TokenPair) -> int | None:
        """Return the rank of ``pair`` or ``None`` when it was never merged."""
        rule = self._index.get(pair)
        return None if rule is None else rule.rank

    def get(self, pair: TokenPair) -> MergeRule | None:
        """Return the rule for ``pair`` if one exists."""
        return self._index.get(pair)

    @deprecated("Reference linear scan for documentation only. Use `MergeTable.rank()`.")
    def scan_rank(self, pair: TokenPair) -> int | None:
        """
        Find the rank of ``pair`` by walking every rule in order.

        O(M) per query where M is the number of merges. Same result as
        ``rank()``.
        """
        for rule in self._rules:
            if rule.pair == pair:
                return rule.rank
        return None

    def as_dict(self) -> dict[TokenPair, Token]:
        """Return a ``pair -> token`` mapping in rank order."""
        return {rule.pair: rule.token for rule in self._rules}

    def __contains__(self, pair: object) -> bool:
        return pair in self._index

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[MergeRule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n_merges={len(self)})"
