"""Runtime configuration: input size limits and the progress switch."""

import os
from dataclasses import dataclass

from .errors import ConfigError, InputTooLargeError

MAX_INPUT_BYTES_ENV = "BYTEPAIR_MAX_INPUT_BYTES"
MAX_TOKENS_ENV = "BYTEPAIR_MAX_TOKENS"
DISABLE_PROGRESS_ENV = "BYTEPAIR_DISABLE_PROGRESS"

_enabled: bool = True


def enable_progress() -> None:
    """Enable per-merge progress lines for all bytepair operations."""
    global _enabled
    _enabled = True


def disable_progress() -> None:
    """Disable per-merge progress lines for all bytepair operations."""
    global _enabled
    _enabled = False


def _is_enabled() -> bool:
    """Check if progress is enabled (respects env var override)."""
    if os.environ.get(DISABLE_PROGRESS_ENV, "").strip() == "1":
        return False
    return _enabled


def _read_limit(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer: {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} must be positive: {value}")
    return value


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Limits applied by a tokenizer to its inputs.

    ``None`` means unbounded; working sequences always grow dynamically.
    """

    # bytes accepted by train() and encode()
    max_input_bytes: int | None = None
    # ids accepted by decode()
    max_tokens: int | None = None

    def __post_init__(self) -> None:
        for name in ("max_input_bytes", "max_tokens"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ConfigError(f"{name} must be positive: {value}")

    @classmethod
    def from_env(cls) -> "TokenizerConfig":
        """Build a config from ``BYTEPAIR_MAX_INPUT_BYTES`` and ``BYTEPAIR_MAX_TOKENS``."""
        return cls(
            max_input_bytes=_read_limit(MAX_INPUT_BYTES_ENV),
            max_tokens=_read_limit(MAX_TOKENS_ENV),
        )

    def check_input(self, size: int) -> None:
        """Raise InputTooLargeError if ``size`` bytes exceeds the input limit."""
        if self.max_input_bytes is not None and size > self.max_input_bytes:
            raise InputTooLargeError(
                "input too large", size=size, limit=self.max_input_bytes
            )

    def check_tokens(self, size: int) -> None:
        """Raise InputTooLargeError if ``size`` ids exceeds the token limit."""
        if self.max_tokens is not None and size > self.max_tokens:
            raise InputTooLargeError(
                "token sequence too large", size=size, limit=self.max_tokens
            )
