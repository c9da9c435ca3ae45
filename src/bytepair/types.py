"""
Core types for tokenization.
"""

from typing import Final

from typing_extensions import TypeAliasType

Token = TypeAliasType("Token", int)
TokenBytes = TypeAliasType("TokenBytes", bytes)
TokenPair = TypeAliasType("TokenPair", tuple[Token, Token])
PairCounts = TypeAliasType("PairCounts", dict[TokenPair, int])

# ids 0..255 are the raw bytes
BASE_VOCAB_SIZE: Final[int] = 256
