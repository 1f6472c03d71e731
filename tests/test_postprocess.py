"""Tests for capitalization and terminal punctuation."""

import pytest

from markovtext.utils.postprocess import capitalize, ends_sentence, postprocess, render


def test_capitalizes_first_token():
    assert render(["hello", "world."]) == "Hello world."


def test_capitalizes_after_sentence_endings():
    tokens = ["a.", "b!", "c?", 'd"', "eâ€", "f", "g."]
    assert render(tokens) == 'A. B! C? D" Eâ€ F g.'


def test_no_capitalization_mid_sentence():
    assert render(["one,", "two;", "three:", "four."]) == "One, two; three: four."


def test_only_first_character_changes():
    assert capitalize("mcDonald") == "McDonald"
    assert capitalize("") == ""
    assert capitalize("1st") == "1st"


@pytest.mark.parametrize("last, expected", [
    ("end", "end..."),
    ("end,", "end,..."),
    ('end"', 'end"...'),
    ("end.", "end."),
    ("end!", "end!"),
    ("end?", "end?"),
    ("end...", "end..."),
])
def test_terminal_suffix(last, expected):
    assert postprocess(["start", last])[-1] == expected


def test_single_token():
    assert render(["word"]) == "Word..."
    assert render(["done."]) == "Done."


def test_empty_tokens_survive():
    assert postprocess(["a.", "", "b"]) == ["A.", "", "b..."]
    assert postprocess(["", "x"]) == ["", "x..."]


def test_does_not_modify_input():
    tokens = ["the", "end"]
    postprocess(tokens)
    assert tokens == ["the", "end"]


def test_empty_sequence():
    assert render([]) == ""


@pytest.mark.parametrize("tokens", [
    ["the", "cat", "sat"],
    ["the", "cat.", "sat", "on", "it!"],
    ["why?", "because", 'he"', "said"],
    ["x"],
    ["a.", "", "b"],
])
def test_post_processing_is_idempotent(tokens):
    once = render(tokens)
    assert render(once.split(" ")) == once


def test_ends_sentence():
    assert ends_sentence("stop.")
    assert ends_sentence('quote"')
    assert ends_sentence("curlyâ€")
    assert not ends_sentence("comma,")
    assert not ends_sentence("")
