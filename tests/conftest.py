"""Shared fixtures for bytepair tests."""

import pytest

import bytepair as bp

DEMO_TEXT = b"hello world the sky is blue"
# classic BPE example with a known merge sequence
ABAC_TEXT = b"aaabdaaabac"


@pytest.fixture
def demo_tokenizer():
    """Return a BasicTokenizer trained on the demo sentence."""
    tok = bp.BasicTokenizer()
    tok.train(DEMO_TEXT, vocab_size=300, verbose=False)
    return tok


@pytest.fixture
def abac_tokenizer():
    """Return a BasicTokenizer trained on ``aaabdaaabac``."""
    tok = bp.BasicTokenizer()
    tok.train(ABAC_TEXT, vocab_size=300, verbose=False)
    return tok


@pytest.fixture(autouse=True)
def _progress_enabled(monkeypatch):
    """Keep the global progress switch and env override isolated per test."""
    monkeypatch.delenv("BYTEPAIR_DISABLE_PROGRESS", raising=False)
    bp.enable_progress()
    yield
    bp.enable_progress()
