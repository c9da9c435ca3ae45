"""Unit tests for the vocabulary store."""

import pytest

from bytepair.errors import UnknownTokenError, VocabularyError
from bytepair.vocab import Vocabulary


def test_seeded_with_byte_tokens():
    vocab = Vocabulary()
    assert len(vocab) == 256
    assert vocab[0] == b"\x00"
    assert vocab[104] == b"h"
    assert vocab[255] == b"\xff"


def test_add_concatenates_children():
    vocab = Vocabulary()
    assert vocab.add(256, 104, 101) == b"he"
    assert vocab.add(257, 256, 256) == b"hehe"
    assert vocab[257] == b"hehe"
    assert len(vocab) == 258


def test_add_requires_next_id():
    vocab = Vocabulary()
    with pytest.raises(VocabularyError):
        vocab.add(300, 1, 2)
    assert len(vocab) == 256


def test_add_rejects_unknown_child():
    vocab = Vocabulary()
    with pytest.raises(UnknownTokenError):
        vocab.add(256, 1, 999)
    assert len(vocab) == 256


def test_entries_are_write_once():
    """Re-adding an existing id is rejected."""
    vocab = Vocabulary()
    vocab.add(256, 1, 2)
    with pytest.raises(VocabularyError):
        vocab.add(256, 3, 4)
    assert vocab[256] == b"\x01\x02"


@pytest.mark.parametrize("token", [256, 99999, -1])
def test_unknown_token(token):
    vocab = Vocabulary()
    with pytest.raises(UnknownTokenError) as exc_info:
        vocab[token]
    assert exc_info.value.invalid_tok == token
    assert token not in vocab


def test_expand():
    vocab = Vocabulary()
    vocab.add(256, 97, 98)
    assert vocab.expand([256, 99, 256]) == b"abcab"
    assert vocab.expand([]) == b""


def test_items_in_id_order():
    vocab = Vocabulary()
    vocab.add(256, 97, 98)
    items = list(vocab.items())
    assert items[0] == (0, b"\x00")
    assert items[-1] == (256, b"ab")
    assert list(vocab)[-1] == 256
