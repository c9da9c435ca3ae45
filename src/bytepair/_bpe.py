"""
Core Byte Pair Encoding (BPE) operations.
"""

from typing import TYPE_CHECKING

from .types import PairCounts, Token, TokenPair

if TYPE_CHECKING:
    from .merges import MergeTable


def bpe_freqs(tokens: list[Token]) -> PairCounts:
    """
    Compute the frequency of all consecutive token pairs in the token list.

    Overlapping pairs are all counted, so ``[a, a, a]`` yields ``(a, a)``
    twice. The returned dict iterates in the order each pair was first seen.

    :param tokens: List of tokens to analyze.
    :return: Mapping of token pairs to their occurrence counts.
    """
    pairs: PairCounts = {}

    for tok0, tok1 in zip(tokens, tokens[1:]):
        pairs[(tok0, tok1)] = pairs.get((tok0, tok1), 0) + 1

    return pairs


def most_frequent_pair(pairs: PairCounts) -> tuple[TokenPair, int] | None:
    """
    Return the pair with the highest count and that count.

    Ties go to the pair seen first, i.e. the earliest key in ``pairs``.
    """
    best: tuple[TokenPair, int] | None = None
    for pair, count in pairs.items():
        # strictly greater: an equal count never displaces an earlier pair
        if best is None or count > best[1]:
            best = (pair, count)
    return best


def bpe_merge(tokens: list[Token], target: TokenPair, new_tok: Token) -> list[Token]:
    """
    Merge all occurrences of a target token pair into a single new token.

    The scan runs left to right once. A matched pair consumes both of its
    tokens, so ``[a, a, a]`` merged on ``(a, a)`` gives ``[new, a]``.

    Note that some of the new tokens generated may be partial utf-8 sequences
    so they cannot be decoded into valid strings on their own.

    :param tokens: Original list of tokens, left untouched.
    :param target: The consecutive pair of tokens to merge.
    :param new_tok: The new token that replaces the target pair.
    :return: New token list with all target pairs replaced by ``new_tok``.
    """
    newtoks: list[Token] = []

    i = 0
    n = len(tokens)
    while i < n:
        # check if we can form a pair and it matches the target
        if i < n - 1 and tokens[i] == target[0] and tokens[i + 1] == target[1]:
            newtoks.append(new_tok)
            i += 2
        else:
            newtoks.append(tokens[i])
            i += 1

    return newtoks


def bpe_encode(tokens: list[Token], merges: "MergeTable") -> list[Token]:
    """
    Apply learned merges to a token sequence, lowest rank first.

    Pairs without a rule are ignored regardless of how often they occur. No
    new rules are created.

    :param tokens: List of tokens (initially bytes 0-255), left untouched.
    :param merges: Learned merge rules.
    :return: Compressed token sequence after applying learned merges.
    """
    # loop text compression using BPE algorithm
    while len(tokens) >= 2:
        bp_freqs = bpe_freqs(tokens)
        # retrieve the byte pair with the lowest merge rank
        # because higher rank tokens might depend on lower rank merged tokens
        pair = min(
            bp_freqs,
            key=lambda bp: merges.rank(bp) if bp in merges else float("inf"),
        )
        rule = merges.get(pair)
        # no merge rule for any pair left in the sequence
        if rule is None:
            break
        tokens = bpe_merge(tokens, pair, rule.token)

    return tokens
