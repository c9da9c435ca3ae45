"""Tokenizer implementations for byte-level text processing."""

from .base import Tokenizer
from .basic import BasicTokenizer


__all__ = ["Tokenizer", "BasicTokenizer"]
