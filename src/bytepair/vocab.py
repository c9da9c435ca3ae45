"""
Token id to byte expansion mapping.
"""

from collections.abc import Iterable, Iterator
import logging

from .errors import UnknownTokenError, VocabularyError
from .types import BASE_VOCAB_SIZE, Token, TokenBytes

log = logging.getLogger(__name__)


class Vocabulary:
    """
    Write-once mapping from every known token to the bytes it expands to.

    Seeded with the 256 single byte tokens. Each merge adds exactly one entry
    whose expansion is the concatenation of its two children.
    """

    def __init__(self) -> None:
        # mapping for base 256 tokens
        self._entries: list[TokenBytes] = [
            bytes([btok]) for btok in range(BASE_VOCAB_SIZE)
        ]

    def add(self, token: Token, left: Token, right: Token) -> TokenBytes:
        """
        Add the merged token ``token`` built from ``left`` and ``right``.

        :return: The byte expansion of the new token.
        :raises VocabularyError: If ``token`` is not the next free id.
        :raises UnknownTokenError: If either child is unknown.
        """
        if token != len(self._entries):
            raise VocabularyError(
                "tokens must be added in id order",
                vocab_size=len(self._entries),
                invalid_tok=token,
            )
        expansion = self[left] + self[right]
        self._entries.append(expansion)
        log.debug(f"added token {token} = ({left}, {right}) -> {expansion!r}")
        return expansion

    def expand(self, tokens: Iterable[Token]) -> bytes:
        """
        Concatenate the byte expansions of ``tokens`` in order.

        :raises UnknownTokenError: On the first token without an entry.
        """
        return b"".join(self[tok] for tok in tokens)

    def items(self) -> Iterator[tuple[Token, TokenBytes]]:
        return enumerate(self._entries)

    def __getitem__(self, token: Token) -> TokenBytes:
        # negative ids would otherwise index from the end of the list
        if not 0 <= token < len(self._entries):
            raise UnknownTokenError(
                "unknown token", vocab_size=len(self._entries), invalid_tok=token
            )
        return self._entries[token]

    def __contains__(self, token: object) -> bool:
        return isinstance(token, int) and 0 <= token < len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Token]:
        return iter(range(len(self._entries)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"
