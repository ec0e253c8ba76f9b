"""Shared fixtures for trie tests."""

import random
import string

import pytest

from wordtrie import CompressedTrie, ReferenceTrie, SetIndex

SAMPLE_WORDS = ["cat", "bat", "cake", "bake", "abcd", "somereallylongword"]


def random_words(seed: int, count: int = 300, min_len: int = 2, max_len: int = 15):
    """Generate unique lowercase words in shuffled order."""
    rng = random.Random(seed)
    words = {
        ''.join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(min_len, max_len)))
        for _ in range(count)
    }
    shuffled = sorted(words)
    rng.shuffle(shuffled)
    return shuffled


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture(params=[1, 7, 2017])
def random_word_list(request):
    """Three seeded batches of random words."""
    return random_words(request.param)


@pytest.fixture(params=[CompressedTrie, ReferenceTrie, SetIndex], ids=lambda cls: cls.__name__)
def index_cls(request):
    """Every WordIndex implementation."""
    return request.param


@pytest.fixture
def sample_trie(sample_words):
    """Compressed trie holding the sample words with values 1..6."""
    trie = CompressedTrie()
    for i, word in enumerate(sample_words, start=1):
        trie.insert(word, i)
    return trie
