"""
Base tokenizer interface for byte-level tokenization implementations.
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from typing_extensions import TypeAliasType

from .._sanitise import render_bytes
from ..config import TokenizerConfig
from ..merges import MergeTable
from ..parallel import ParallelMode, ParallelStrategy
from ..trainer import BPETrainingResult
from ..types import Token
from ..vocab import Vocabulary

log = logging.getLogger(__name__)

Text = TypeAliasType("Text", str | bytes | bytearray | memoryview)


def _to_bytes(text: Text) -> bytes:
    """Return the raw byte sequence of ``text``; ``str`` is UTF-8 encoded."""
    if isinstance(text, str):
        return text.encode("utf-8", errors="replace")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"expected str or bytes-like text, got {type(text).__name__}")


class Tokenizer(ABC):
    """
    Abstract base class for byte-level tokenizers.

    Holds the merge table and vocabulary. Training replaces both at once;
    encoding and decoding only read them, so a trained tokenizer can be
    shared between threads.
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """Initialize tokenizer with base 256 vocabulary and no merges."""
        super().__init__()
        self.config = config if config is not None else TokenizerConfig()
        # merges + vocab, always swapped as one object
        self._state = BPETrainingResult()
        # one writer at a time
        self._train_lock = threading.Lock()

    @property
    def merges(self) -> MergeTable:
        """Learned merge rules in rank order."""
        return self._state.merges

    @property
    def vocab(self) -> Vocabulary:
        """Token -> bytes mapping."""
        return self._state.vocab

    @property
    def n_merges(self) -> int:
        return len(self._state.merges)

    def vocab_size(self) -> int:
        """Return the number of tokens in the vocabulary."""
        return len(self._state.vocab)

    @abstractmethod
    def train(self, text: Text, vocab_size: int, verbose: bool = False) -> None:
        """Train tokenizer on byte sequence to learn merges up to target vocab size."""
        ...

    def encode(self, text: Text) -> list[Token]:
        """Encode text into a sequence of tokens."""
        data = _to_bytes(text)
        self.config.check_input(len(data))
        return self._encode_impl(data, self._state.merges)

    @abstractmethod
    def _encode_impl(self, data: bytes, merges: MergeTable) -> list[Token]:
        """Subclass-specific single-text encoding logic."""
        ...

    def decode(self, tokens: Sequence[Token]) -> bytes:
        """
        Decode a sequence of tokens back into raw bytes.

        :raises UnknownTokenError: If any token ID is not in the vocabulary.
        :raises InputTooLargeError: If ``tokens`` exceeds ``config.max_tokens``.
        """
        self.config.check_tokens(len(tokens))
        return self._state.vocab.expand(tokens)

    def decode_str(self, tokens: Sequence[Token], errors: str = "replace") -> str:
        """
        Decode tokens into text.

        :param errors: How to handle invalid UTF-8, passed to ``bytes.decode``.
        """
        return self.decode(tokens).decode("utf-8", errors=errors)

    def encode_batch(
        self,
        texts: Sequence[Text],
        num_workers: int | None = None,
        parallel_mode: ParallelMode | ParallelStrategy = ParallelMode.AUTO,
    ) -> list[list[Token]]:
        """
        Encode multiple texts with optional batch-level parallel processing.

        Parallelization happens across texts, never within one text, because
        merges can span arbitrary byte boundaries.

        :returns: Encoded token sequences in input order.
        """
        return self._run_batch(self.encode, texts, num_workers, parallel_mode)

    def decode_batch(
        self,
        token_batch: Sequence[Sequence[Token]],
        num_workers: int | None = None,
        parallel_mode: ParallelMode | ParallelStrategy = ParallelMode.AUTO,
    ) -> list[bytes]:
        """
        Decode multiple token sequences in batch.

        :raises UnknownTokenError: If any token ID is not in the vocabulary.
        """
        return self._run_batch(self.decode, token_batch, num_workers, parallel_mode)

    def _run_batch(
        self,
        fn: Callable,
        items: Sequence,
        num_workers: int | None,
        parallel_mode: ParallelMode | ParallelStrategy,
    ) -> list:
        """Apply ``fn`` to every item, in a thread pool when the mode allows it."""
        mode = ParallelMode.get(parallel_mode)

        if num_workers is None:
            workers = os.cpu_count() or 1
        else:
            workers = max(1, num_workers)

        def process_batch() -> list:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return list(pool.map(fn, items))

        match mode:
            case ParallelMode.OFF:
                return [fn(item) for item in items]
            case ParallelMode.BATCH:
                return process_batch()
            case ParallelMode.AUTO:
                if len(items) <= 1 or workers == 1:
                    return [fn(item) for item in items]
                return process_batch()

    def render_vocab(self) -> list[str]:
        """
        Return one human-readable line per vocabulary entry.

        Merged tokens show the children they were built from, e.g.
        ``[256] [h][e] -> he``.
        """
        state = self._state
        children = {rule.token: rule.pair for rule in state.merges}

        lines: list[str] = []
        for tok, b in state.vocab.items():
            subword = render_bytes(b)
            # token arises from merging: show derivation from child tokens
            if tok in children:
                ctok0, ctok1 = children[tok]
                subword0 = render_bytes(state.vocab[ctok0])
                subword1 = render_bytes(state.vocab[ctok1])
                lines.append(f"[{tok}] [{subword0}][{subword1}] -> {subword}")
            else:
                # one of base 256 tokens: no merging
                lines.append(f"[{tok}] {subword}")
        return lines

    def _swap_state(self, state: BPETrainingResult) -> None:
        """Replace merges and vocab in one assignment."""
        self._state = state
        log.debug(
            f"tokenizer state replaced: {len(state.merges)} merge rules, {len(state.vocab)} total tokens"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vocab_size={self.vocab_size()})"
