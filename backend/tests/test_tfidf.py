import math
import threading

import pytest

from textcore.search.tfidf import TfIdfCorpusIndex


@pytest.fixture
def index():
    return TfIdfCorpusIndex()


@pytest.fixture
def pets_index(index):
    index.add_documents([
        "the cat sat on the mat",
        "the dog ran in the park",
        "cats and dogs are pets",
    ])
    return index


def test_known_document_scores_positive(pets_index):
    score = pets_index.score("the cat")
    assert score > 0
    assert math.isfinite(score)


def test_score_matches_formula(pets_index):
    # the: df=2, cat: df=1, N=3, 各 tf=1/2
    expected = 0.5 * math.log(4 / 3) + 0.5 * math.log(4 / 2)
    assert pets_index.score("the cat") == pytest.approx(expected)


def test_unknown_term_uses_smoothed_idf(pets_index):
    assert pets_index.idf("zebra") == pytest.approx(math.log(4))
    assert pets_index.score("zebra") == pytest.approx(math.log(4))


def test_term_present_everywhere_scores_zero(index):
    index.add_documents(["alpha beta", "alpha gamma"])
    # df=2, N=2 → ln(3/3) = 0
    assert index.score("alpha") == 0.0


@pytest.mark.parametrize("text", ["the cat", "anything at all", "بسم الله"])
def test_empty_corpus_scores_zero(index, text):
    assert index.score(text) == 0.0


@pytest.mark.parametrize("text", ["", "   ", "@#$%^&*()", None])
def test_empty_candidate_scores_zero(pets_index, text):
    assert pets_index.score(text) == 0.0


def test_single_word_document(index):
    index.add_documents(["word", "another"])
    assert index.score("word") > 0


def test_repeated_words(index):
    index.add_documents(["cat dog bird", "dog bird fish"])
    assert index.score("cat cat cat") == pytest.approx(math.log(3 / 2))


def test_arabic_candidate(index):
    index.add_documents(["بسم الله الرحمن الرحيم", "الحمد لله رب العالمين"])
    score = index.score("بِسْمِ اللَّهِ")
    assert score > 0
    assert math.isfinite(score)


def test_score_is_idempotent(pets_index):
    first = pets_index.score("the cat sat with the dogs")
    second = pets_index.score("the cat sat with the dogs")
    assert first == second


def test_score_does_not_mutate_corpus(pets_index):
    pets_index.score("brand new words")
    assert pets_index.size == 3
    assert pets_index.document_frequency("brand") == 0


def test_add_document_is_additive(index):
    for i, text in enumerate(["", "   ", None, "some content", "!!!"], start=1):
        index.add_document(text)
        assert len(index) == i


def test_document_frequency_counts_entries_not_occurrences(index):
    index.add_documents(["cat cat cat", "cat dog", "dog"])
    assert index.document_frequency("cat") == 2
    assert index.document_frequency("dog") == 2


def test_term_scores_in_first_occurrence_order(pets_index):
    terms = pets_index.term_scores("mat the cat the")
    assert list(terms) == ["mat", "the", "cat"]
    assert sum(terms.values()) == pytest.approx(pets_index.score("mat the cat the"))


def test_clear(pets_index):
    pets_index.clear()
    assert pets_index.size == 0
    assert pets_index.score("the cat") == 0.0


def test_large_corpus(index):
    for i in range(100):
        index.add_document(f"Document {i} with various content words")
    score = index.score("test document for performance evaluation")
    assert score >= 0
    assert math.isfinite(score)


def test_concurrent_ingestion_and_scoring(index):
    scores = []
    errors = []

    def writer(offset):
        for i in range(50):
            index.add_document(f"writer {offset} document {i}")

    def reader():
        try:
            for _ in range(50):
                scores.append(index.score("writer document"))
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert index.size == 200
    assert all(score >= 0 and math.isfinite(score) for score in scores)


def test_arabic_punctuation_does_not_change_score(index):
    index.add_documents(["مرحبا كيف حالك", "كيف الطقس اليوم"])
    assert index.score("حالك؟") == pytest.approx(index.score("حالك"))
    assert index.score("مرحبا، حالك") == pytest.approx(index.score("مرحبا حالك"))
