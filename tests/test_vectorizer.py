import numpy as np
import pytest
from namevibe.errors import ContractError, CorruptModelError
from namevibe.ngrams import ngrams
from namevibe.vectorizer import NgramVectorizer


CORPUS = ["john", "jan", "johann"]


@pytest.fixture
def vectorizer():
    return NgramVectorizer(3).fit(CORPUS)


def test_fit_assigns_sorted_dense_indices(vectorizer):
    expected = sorted(
        {"_jo", "joh", "ohn", "hn_", "_ja", "jan", "an_", "oha", "han", "ann", "nn_"}
    )

    assert dict(vectorizer.vocabulary) == {gram: i for i, gram in enumerate(expected)}
    assert vectorizer.vocab_size == 11


def test_vocabulary_is_complete():
    corpus = ["anna", "hanna", "marianne", "", "x"]
    vectorizer = NgramVectorizer(3).fit(corpus)
    distinct = {gram for name in corpus for gram in ngrams(name, 3)}

    assert set(vectorizer.vocabulary) == distinct
    assert vectorizer.vocab_size == len(distinct)


def test_transform_counts_known_ngrams(vectorizer):
    vec = vectorizer.transform("john")
    vocab = vectorizer.vocabulary

    assert vec.shape == (11,)

    for gram in ("_jo", "joh", "ohn", "hn_"):
        assert vec[vocab[gram]] == 1

    assert vec.sum() == 4


def test_transform_ignores_unknown_ngrams(vectorizer):
    assert vectorizer.transform("zzz").tolist() == [0] * 11
    assert vectorizer.transform("").tolist() == [0] * 11


def test_transform_counts_repeats():
    vectorizer = NgramVectorizer(3).fit(["aaaa"])

    assert vectorizer.transform("aaaa")[vectorizer.vocabulary["aaa"]] == 2


def test_transform_is_deterministic(vectorizer):
    assert np.array_equal(vectorizer.transform("johann"), vectorizer.transform("johann"))


def test_refit_replaces_vocabulary(vectorizer):
    vectorizer.fit(["zoe"])

    assert set(vectorizer.vocabulary) == {"_zo", "zoe", "oe_"}


def test_transform_many_matches_transform(vectorizer):
    names = ["john", "jan", "zzz", "johann", ""]
    matrix = vectorizer.transform_many(names)

    assert matrix.shape == (5, 11)

    for i, name in enumerate(names):
        assert matrix[i].toarray().ravel().tolist() == vectorizer.transform(name).tolist()


def test_vocabulary_view_is_read_only(vectorizer):
    with pytest.raises(TypeError):
        vectorizer.vocabulary["new"] = 99


def test_invalid_n():
    with pytest.raises(ContractError):
        NgramVectorizer(0)


def test_dict_round_trip(vectorizer):
    restored = NgramVectorizer.from_dict(vectorizer.to_dict())

    assert restored.n == 3
    assert dict(restored.vocabulary) == dict(vectorizer.vocabulary)
    assert restored.transform("john").tolist() == vectorizer.transform("john").tolist()


def test_to_dict_layout(vectorizer):
    obj = vectorizer.to_dict()

    assert obj["n"] == 3
    assert obj["vocab"][0] == ["_ja", 0]
    assert [index for _, index in obj["vocab"]] == list(range(11))


@pytest.mark.parametrize(
    "obj",
    [
        {"vocab": [["_jo", 0]]},
        {"n": 3, "vocab": [["_jo", 0], ["joh", 0]]},
        {"n": 3, "vocab": [["_jo", 0], ["joh", 2]]},
        {"n": 3, "vocab": [["_jo", 0], ["_jo", 1]]},
        {"n": 3, "vocab": [["_j", 0]]},
        {"n": 0, "vocab": []},
        {"n": 3, "vocab": [["_jo", 0]], "extra": True},
    ],
)
def test_from_dict_rejects_malformed(obj):
    with pytest.raises(CorruptModelError):
        NgramVectorizer.from_dict(obj)
