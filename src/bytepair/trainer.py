"""Standalone BPE training module."""

from dataclasses import dataclass, field
import logging

from . import config
from ._bpe import bpe_freqs, bpe_merge, most_frequent_pair
from .merges import MergeTable
from .types import BASE_VOCAB_SIZE, Token
from .vocab import Vocabulary

log = logging.getLogger(__name__)


@dataclass
class BPETrainingResult:
    """Results from one BPE training run."""

    merges: MergeTable = field(default_factory=MergeTable)
    vocab: Vocabulary = field(default_factory=Vocabulary)
    n_merges_completed: int = 0


def train_bpe(
    tokens: list[Token],
    n_merges: int,
    verbose: bool = False,
) -> BPETrainingResult:
    """
    Learn up to ``n_merges`` merge rules from a token sequence.

    Each iteration counts all adjacent pairs, merges the most frequent one
    (earliest seen wins a tie) into the next token id, and records the rule.
    Training stops early once no pair occurs more than once.

    :param tokens: Input token sequence, typically raw bytes 0-255. Not mutated.
    :param n_merges: Maximum number of merge operations to perform. Zero or
        negative performs no merges.
    :param verbose: Log each learned merge when ``True``.
    :returns: Training output containing merge rules, vocab, and completed merge count.
    """
    result = BPETrainingResult()
    # working copy owned by this training run
    ids = list(tokens)

    for i in range(max(n_merges, 0)):
        best = most_frequent_pair(bpe_freqs(ids))
        # a pair seen once gains nothing from merging
        if best is None or best[1] <= 1:
            break

        pair, _ = best
        new_tok = BASE_VOCAB_SIZE + i
        ids = bpe_merge(ids, pair, new_tok)

        result.merges.append(pair, new_tok)
        result.vocab.add(new_tok, *pair)
        result.n_merges_completed += 1

        if verbose and config._is_enabled():
            log.info(f"Merge {i + 1}/{n_merges}: ({pair[0]}, {pair[1]}) -> {new_tok}")

    return result


class BPETrainer:
    """
    BPE trainer that learns merge operations from token sequences.

    Example:
       >>> tokens = list(b"hello hello")
       >>> trainer = BPETrainer()
       >>> result = trainer.train(tokens, n_merges=10)
       >>> print(f"Learned {result.n_merges_completed} merges")
       >>> print(f"Vocabulary size: {len(result.vocab)}")
    """

    def __init__(self) -> None:
        self.last_result: BPETrainingResult | None = None

    def train(
        self, tokens: list[Token], n_merges: int, verbose: bool = False
    ) -> BPETrainingResult:
        """
        Train BPE on a sequence of tokens.

        :param tokens: Sequence of token IDs (typically bytes 0-255).
        :param n_merges: Number of merge operations to learn.
        :param verbose: Whether to log merge operations.
        :return: Training results containing merges and vocabulary.
        """
        self.last_result = train_bpe(tokens, n_merges, verbose=verbose)
        return self.last_result


__all__ = ["BPETrainer", "BPETrainingResult", "train_bpe"]
