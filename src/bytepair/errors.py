"""Custom exception hierarchy for bytepair tokenization errors."""

from .types import Token


class BytePairError(Exception):
    """Base exception for all bytepair errors."""


class VocabularyError(BytePairError):
    """Raised when vocabulary operations fail."""

    def __init__(
        self,
        message: str,
        *,
        vocab_size: int | None = None,
        invalid_tok: Token | None = None,
    ) -> None:
        """Initialize with optional token and vocab_size that get appended to the message."""
        extra = " "
        if vocab_size is not None:
            extra += f"(vocab size: {vocab_size}) "
        # decoding: token not in model vocab
        if invalid_tok is not None:
            extra += f"(invalid token: {invalid_tok}) "
        super().__init__((message + extra).rstrip())
        self.vocab_size = vocab_size
        self.invalid_tok = invalid_tok


class UnknownTokenError(VocabularyError):
    """Raised when a token id has no vocabulary entry."""


class TrainingError(BytePairError):
    """Raised when tokenizer training fails."""

    def __init__(self, message: str, *, vocab_size: int | None = None) -> None:
        extra = f" (vocab size: {vocab_size})" if vocab_size is not None else ""
        super().__init__(message + extra)
        self.vocab_size = vocab_size


class InputTooLargeError(BytePairError):
    """Raised when an input exceeds a configured size limit."""

    def __init__(self, message: str, *, size: int, limit: int) -> None:
        super().__init__(f"{message} (size: {size}) (limit: {limit})")
        self.size = size
        self.limit = limit


class ConfigError(BytePairError):
    """Raised when a configuration value or option name is invalid."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name is not None:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__((message + extra).rstrip())
        self.invalid_name = invalid_name
        self.available = available
