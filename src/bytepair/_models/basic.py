"""Basic byte-level tokenizer implementation."""

from typing_extensions import override
import logging

from .base import Text, Tokenizer, _to_bytes
from .._bpe import bpe_encode
from .._decorators import measure_time
from ..merges import MergeTable
from ..trainer import BPETrainingResult, train_bpe
from ..types import BASE_VOCAB_SIZE, Token

log = logging.getLogger(__name__)


class BasicTokenizer(Tokenizer):
    """
    Tokenizer that operates directly on byte sequences without regex splitting.

    Example:
       >>> tok = BasicTokenizer()
       >>> tok.train(b"hello world the sky is blue", vocab_size=300)
       >>> tok.encode(b"the")
       [116, 256]
    """

    @override
    @measure_time
    def train(self, text: Text, vocab_size: int, verbose: bool = False) -> None:
        """
        Train the tokenizer on raw bytes using byte-level BPE.

        Learns at most ``vocab_size - 256`` merges on top of the base byte
        vocabulary, fewer when the text runs out of repeated pairs. Any
        previous training is replaced.

        :param text: Training text; ``str`` is encoded as UTF-8.
        :param vocab_size: Target vocabulary size including the base 256 bytes.
            Values of 256 or less perform no merges.
        :param verbose: Log each learned merge when ``True``.
        :raises InputTooLargeError: If the text exceeds ``config.max_input_bytes``.
        """
        data = _to_bytes(text)
        self.config.check_input(len(data))

        # merges beyond base byte vocabulary
        n_merges = vocab_size - BASE_VOCAB_SIZE

        with self._train_lock:
            if n_merges <= 0:
                log.warning(
                    f"vocab size {vocab_size} leaves no room for merges, "
                    "tokenizer keeps the base byte vocabulary"
                )
                self._swap_state(BPETrainingResult())
                return

            result = train_bpe(list(data), n_merges, verbose=verbose)

            if result.n_merges_completed < n_merges:
                log.warning(
                    f"no more byte pairs to merge after {result.n_merges_completed} merges "
                    f"(requested {n_merges}) stopping early"
                )

            self._swap_state(result)

    @override
    def _encode_impl(self, data: bytes, merges: MergeTable) -> list[Token]:
        """Convert ``data`` to byte tokens and apply learned merges."""
        # convert each byte to [0-255] token range
        return bpe_encode(list(data), merges)
