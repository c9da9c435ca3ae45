"""Unit tests for BPE training."""

import logging

import pytest

import bytepair as bp
from bytepair.trainer import BPETrainer, train_bpe

from conftest import ABAC_TEXT, DEMO_TEXT


def _rules(result):
    return [(rule.pair, rule.token, rule.rank) for rule in result.merges]


# Golden merges
# ---------------------------------------------------------------------------


def test_demo_text_learns_single_merge():
    """Only ('h', 'e') repeats in the demo sentence, so training stops after it."""
    result = train_bpe(list(DEMO_TEXT), n_merges=44)
    assert _rules(result) == [((104, 101), 256, 0)]
    assert result.n_merges_completed == 1
    assert result.vocab[256] == b"he"


def test_abac_merge_sequence():
    """Ties after the first merge go to the pair seen first."""
    result = train_bpe(list(ABAC_TEXT), n_merges=44)
    assert _rules(result) == [
        ((97, 97), 256, 0),
        ((256, 97), 257, 1),
        ((257, 98), 258, 2),
    ]
    assert result.vocab[258] == b"aaab"


def test_tie_break_is_first_seen():
    result = train_bpe([1, 2, 3, 1, 2, 3], n_merges=1)
    assert _rules(result) == [((1, 2), 256, 0)]


# Stopping conditions
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("n_merges, expected", [(1, 1), (2, 2), (3, 3), (10, 3)])
def test_stops_at_requested_merges_or_exhaustion(n_merges, expected):
    result = train_bpe(list(ABAC_TEXT), n_merges=n_merges)
    assert result.n_merges_completed == expected
    assert len(result.merges) == expected
    assert len(result.vocab) == 256 + expected


@pytest.mark.parametrize("n_merges", [0, -5])
def test_no_merges_requested(n_merges):
    result = train_bpe(list(ABAC_TEXT), n_merges=n_merges)
    assert result.n_merges_completed == 0
    assert len(result.vocab) == 256


def test_unique_pairs_learn_nothing():
    """A pair seen only once is never merged."""
    result = train_bpe(list(b"abcdefg"), n_merges=10)
    assert result.n_merges_completed == 0


@pytest.mark.parametrize("tokens", [[], [42]])
def test_short_input_learns_nothing(tokens):
    assert train_bpe(tokens, n_merges=10).n_merges_completed == 0


def test_input_tokens_not_mutated():
    tokens = list(ABAC_TEXT)
    train_bpe(tokens, n_merges=10)
    assert tokens == list(ABAC_TEXT)


def test_repeated_byte_run():
    """Runs of one byte double up merge by merge."""
    result = train_bpe([7] * 16, n_merges=10)
    assert _rules(result) == [((7, 7), 256, 0), ((256, 256), 257, 1), ((257, 257), 258, 2)]
    assert result.vocab[258] == b"\x07" * 8


# Progress output
# ---------------------------------------------------------------------------


def test_verbose_logs_each_merge(caplog):
    caplog.set_level(logging.INFO, logger="bytepair.trainer")
    train_bpe(list(ABAC_TEXT), n_merges=44, verbose=True)
    assert [r.getMessage() for r in caplog.records if r.name == "bytepair.trainer"] == [
        "Merge 1/44: (97, 97) -> 256",
        "Merge 2/44: (256, 97) -> 257",
        "Merge 3/44: (257, 98) -> 258",
    ]


def test_quiet_by_default(caplog):
    caplog.set_level(logging.INFO, logger="bytepair.trainer")
    train_bpe(list(ABAC_TEXT), n_merges=44)
    assert not [r for r in caplog.records if r.name == "bytepair.trainer"]


def test_disable_progress_silences_verbose(caplog):
    caplog.set_level(logging.INFO, logger="bytepair.trainer")
    bp.disable_progress()
    train_bpe(list(ABAC_TEXT), n_merges=44, verbose=True)
    assert not [r for r in caplog.records if r.name == "bytepair.trainer"]


def test_env_var_silences_verbose(caplog, monkeypatch):
    caplog.set_level(logging.INFO, logger="bytepair.trainer")
    monkeypatch.setenv("BYTEPAIR_DISABLE_PROGRESS", "1")
    train_bpe(list(ABAC_TEXT), n_merges=44, verbose=True)
    assert not [r for r in caplog.records if r.name == "bytepair.trainer"]


# Trainer class
# ---------------------------------------------------------------------------


def test_trainer_keeps_last_result():
    trainer = BPETrainer()
    assert trainer.last_result is None
    result = trainer.train(list(ABAC_TEXT), n_merges=2)
    assert trainer.last_result is result
    assert result.n_merges_completed == 2


def test_training_is_deterministic():
    first = train_bpe(list(DEMO_TEXT * 3), n_merges=20)
    second = train_bpe(list(DEMO_TEXT * 3), n_merges=20)
    assert _rules(first) == _rules(second)
    assert list(first.vocab.items()) == list(second.vocab.items())
