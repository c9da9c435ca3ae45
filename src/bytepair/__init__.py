"""bytepair: Byte-level byte pair encoding tokenizer."""

from collections.abc import Sequence

from ._models.base import Text, Tokenizer
from ._models.basic import BasicTokenizer
from .config import TokenizerConfig, disable_progress, enable_progress
from .errors import (
    BytePairError,
    ConfigError,
    InputTooLargeError,
    TrainingError,
    UnknownTokenError,
    VocabularyError,
)
from .merges import MergeRule, MergeTable
from .parallel import ParallelMode, list_parallel_modes
from .trainer import BPETrainer, BPETrainingResult, train_bpe
from .types import Token
from .vocab import Vocabulary

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bytepair")
except PackageNotFoundError:
    __version__ = "dev"


def train(
    tokenizer: Tokenizer, text: Text, vocab_size: int, verbose: bool = False
) -> None:
    """Train ``tokenizer`` in place on ``text``."""
    tokenizer.train(text, vocab_size, verbose=verbose)


def encode(tokenizer: Tokenizer, text: Text) -> list[Token]:
    """Encode ``text`` with the merges ``tokenizer`` already learned."""
    return tokenizer.encode(text)


def decode(tokenizer: Tokenizer, tokens: Sequence[Token]) -> bytes:
    """Decode ``tokens`` to raw bytes; raises UnknownTokenError on unknown ids."""
    return tokenizer.decode(tokens)


__all__ = [
    "Tokenizer",
    "BasicTokenizer",
    "TokenizerConfig",
    "MergeRule",
    "MergeTable",
    "Vocabulary",
    "BPETrainer",
    "BPETrainingResult",
    "ParallelMode",
    "BytePairError",
    "ConfigError",
    "InputTooLargeError",
    "TrainingError",
    "UnknownTokenError",
    "VocabularyError",
    "train",
    "encode",
    "decode",
    "train_bpe",
    "enable_progress",
    "disable_progress",
    "list_parallel_modes",
]
