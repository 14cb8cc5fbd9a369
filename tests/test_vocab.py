import pytest

from wordle.sampler import WordSampler
from wordle.vocab import WordVocab

WORD = "PILOT"


@pytest.fixture
def vocab():
    return WordVocab(["pilot", "plane", "able", "bears"])


def test_core_functionality(vocab):
    assert vocab.contains(WORD)
    assert vocab.contains("pIlOt")
    assert not vocab.contains("TRWEZ")
    assert len(vocab) == 4
    assert list(vocab) == ["PILOT", "PLANE", "ABLE", "BEARS"]
    assert vocab.word_at(2) == "ABLE"


def test_filter_by_length(vocab):
    five = vocab.filter_by_length(len(WORD))
    assert five.words() == ["PILOT", "PLANE", "BEARS"]
    assert len(vocab) == 4  # original untouched
    with pytest.raises(ValueError):
        vocab.filter_by_length(9)


def test_sampled_word_has_requested_length(vocab):
    five = vocab.filter_by_length(len(WORD))
    sampled = WordSampler(five, seed=1).choice_word()
    assert len(sampled) == len(WORD)
    assert five.contains(sampled)


def test_sampler_is_deterministic_when_seeded(vocab):
    assert WordSampler(vocab, seed=3).choice_word() == WordSampler(vocab, seed=3).choice_word()


def test_rejects_bad_words():
    with pytest.raises(ValueError):
        WordVocab([])
    with pytest.raises(ValueError):
        WordVocab(["pilot", "PILOT"])
    with pytest.raises(ValueError):
        WordVocab(["pi-lot"])
    with pytest.raises(TypeError):
        WordVocab(["pilot", 3])
    with pytest.raises(IndexError):
        WordVocab(["pilot"]).word_at(1)


def test_from_text(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("pilot\nPlane\n\nno-way\npilot\nnull\n")
    vocab = WordVocab.from_text(str(path))
    assert vocab.words() == ["PILOT", "PLANE", "NULL"]


def test_from_text_reads_whole_lines(tmp_path):
    # a comma is not a field separator: the line is just not a word
    path = tmp_path / "words.txt"
    path.write_text("don,t\npilot\nrock,n,roll\nable\n")
    assert WordVocab.from_text(str(path)).words() == ["PILOT", "ABLE"]
