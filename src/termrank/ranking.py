from typing import Callable, Iterable, List, Tuple

from .documents import DocumentId

def tfidf_sort_key(score: float, doc_id: DocumentId) -> Tuple[float, str]:
    """Higher score first; equal scores fall back to the id string, ascending."""
    return (-score, doc_id.id)

def rank_by_score(candidates: Iterable[DocumentId], score_of: Callable[[DocumentId], float]) -> List[DocumentId]:
    # score once per candidate; score_of may be expensive
    scored = [(doc_id, score_of(doc_id)) for doc_id in candidates]
    scored.sort(key=lambda x: tfidf_sort_key(x[1], x[0]))
    return [doc_id for doc_id, _ in scored]
