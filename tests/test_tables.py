"""Tests for the jamo tables (tables.py)."""

import pytest

from romhan.tables import (
    CHOSEONG,
    JUNGSEONG,
    JONGSEONG,
    LETTERS,
    MAX_FINAL_LENGTH,
    MAX_TOKEN_LENGTH,
    SILENT_CHOSEONG,
)


def test_choseong_covers_every_initial_but_silent():
    assert set(CHOSEONG.values()) == set(range(19)) - {SILENT_CHOSEONG}


def test_jungseong_covers_every_vowel_once():
    assert sorted(JUNGSEONG.values()) == list(range(21))


def test_jongseong_covers_every_final_once():
    assert sorted(JONGSEONG.values()) == list(range(1, 28))


def test_aliases():
    assert CHOSEONG["gg"] == CHOSEONG["kk"] == 1
    assert CHOSEONG["dd"] == CHOSEONG["tt"] == 4
    assert CHOSEONG["r"] == CHOSEONG["l"] == 5
    assert CHOSEONG["bb"] == CHOSEONG["pp"] == 8


def test_final_only_spellings():
    for token in ("gs", "nj", "nh", "lg", "lm", "lb", "ls", "lt", "lp", "lh", "bs", "ng"):
        assert token in JONGSEONG
        assert token not in CHOSEONG


def test_token_lengths():
    for table in (CHOSEONG, JUNGSEONG, JONGSEONG):
        assert max(len(token) for token in table) <= MAX_TOKEN_LENGTH
    assert max(len(token) for token in JONGSEONG) == MAX_FINAL_LENGTH


def test_letters():
    assert LETTERS == set("abcdeghijklmnoprstuwy")
    assert not LETTERS & set("fqvxz")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CHOSEONG["x"] = 0
