"""Shared fixtures for markovtext tests."""

import pytest

from markovtext.data.corpus import tokenize
from markovtext.models.ngram import NGramModel


class ScriptedSampler:
    """Returns pre-set indices in order and records every range asked for."""

    def __init__(self, *indices):
        self.indices = list(indices)
        self.calls = []

    def index(self, n):
        self.calls.append(n)
        value = self.indices.pop(0) if self.indices else 0
        assert 0 <= value < n, f"scripted index {value} out of range {n}"
        return value


@pytest.fixture
def scripted():
    return ScriptedSampler


@pytest.fixture
def small_corpus():
    return tokenize("the cat sat. the dog ran.")


@pytest.fixture
def small_model(small_corpus):
    return NGramModel.build(small_corpus)
