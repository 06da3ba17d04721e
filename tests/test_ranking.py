from termrank.documents import DocumentId
from termrank.ranking import rank_by_score, tfidf_sort_key

def test_ties_broken_by_id_regardless_of_input_order():
    ids = [DocumentId(x) for x in ("c", "a", "b")]
    assert rank_by_score(ids, lambda d: 1.0) == [DocumentId("a"), DocumentId("b"), DocumentId("c")]
    assert rank_by_score(reversed(ids), lambda d: 1.0) == [DocumentId("a"), DocumentId("b"), DocumentId("c")]

def test_score_descending():
    scores = {"a": 0.5, "b": 2.0, "c": 1.0}
    ranked = rank_by_score([DocumentId(k) for k in scores], lambda d: scores[d.id])
    assert [d.id for d in ranked] == ["b", "c", "a"]

def test_scores_computed_once_per_candidate():
    calls = []
    def score(d):
        calls.append(d)
        return 0.0
    rank_by_score([DocumentId("x"), DocumentId("y")], score)
    assert len(calls) == 2

def test_sort_key():
    assert tfidf_sort_key(2.0, DocumentId("a")) < tfidf_sort_key(1.0, DocumentId("a"))
    assert tfidf_sort_key(1.0, DocumentId("a")) < tfidf_sort_key(1.0, DocumentId("b"))
