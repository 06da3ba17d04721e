"""
In-memory inverted index with tf-idf relevance ranking.

Documents are added one by one under a DocumentId and split into terms on
runs of non-word characters. With the default "preserve" case policy terms
are stored with their original casing: index lookups and IDF match terms
case-insensitively, while term frequency and the candidates of a relevance
lookup use the exact spelling. The "lower" policy lowercases every term at
ingestion and query time instead.
"""

from __future__ import annotations

import logging
import math
import threading
from collections import Counter
from typing import Dict, List, Set, TextIO, Union

from .config import EngineConfig
from .documents import DocumentId
from .ranking import rank_by_score
from .tokenizer import check_policy, normalize, tokenize

logger = logging.getLogger(__name__)

TextSource = Union[str, TextIO]


class UnknownDocumentError(ValueError):
    """Raised for a DocumentId that was never added to the engine."""

    def __init__(self, doc_id: DocumentId) -> None:
        super().__init__(f"Unknown document: {doc_id}")
        self.doc_id = doc_id


def _read_source(source: TextSource) -> str:
    if isinstance(source, str):
        return source
    with source:
        return source.read()


class SearchEngine:
    def __init__(self, case_policy: str = "preserve") -> None:
        self.case_policy = check_policy(case_policy)
        self.index: Dict[str, Set[DocumentId]] = {}
        self.tf: Dict[DocumentId, Dict[str, int]] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, cfg: EngineConfig) -> "SearchEngine":
        return cls(case_policy=cfg.case_policy)

    def _term(self, term: str) -> str:
        return normalize(term, self.case_policy)

    # ---------------------------- ingestion ---------------------------------

    def add_document(self, doc_id: DocumentId, source: TextSource) -> None:
        """
        Index a document. Re-adding a known id is a no-op.

        `source` is a string or a readable text stream; streams are closed
        once read. OSError from the stream propagates and nothing is indexed.
        """
        text = _read_source(source)
        counts = Counter(self._term(t) for t in tokenize(text))
        with self._lock:
            if doc_id in self.tf:
                logger.debug("Document %s already indexed; ignoring new content", doc_id)
                return
            for term in counts:
                self.index.setdefault(term, set()).add(doc_id)
            self.tf[doc_id] = dict(counts)
        logger.debug("Indexed %s: %d distinct terms, %d tokens", doc_id, len(counts), sum(counts.values()))

    # ----------------------------- queries ----------------------------------

    def index_lookup(self, term: str) -> Set[DocumentId]:
        """
        Documents containing any stored spelling of `term`, ignoring case.

        Spellings are compared after Unicode case folding (str.casefold), so
        "Straße" also matches "STRASSE".
        """
        folded = term.casefold()
        out: Set[DocumentId] = set()
        with self._lock:
            for key, docs in self.index.items():
                if key.casefold() == folded:
                    out |= docs
        return out

    def term_frequency(self, doc_id: DocumentId, term: str) -> int:
        with self._lock:
            counts = self.tf.get(doc_id)
            if counts is None:
                raise UnknownDocumentError(doc_id)
            return counts.get(self._term(term), 0)

    def inverse_document_frequency(self, term: str) -> float:
        """IDF = ln((1 + N) / (1 + M)), N documents in total, M containing the term."""
        with self._lock:
            n = len(self.tf)
            m = len(self.index_lookup(term))
        return math.log((1 + n) / (1 + m))

    def tf_idf(self, doc_id: DocumentId, term: str) -> float:
        return self.term_frequency(doc_id, term) * self.inverse_document_frequency(term)

    def relevance_lookup(self, term: str) -> List[DocumentId]:
        """Documents holding exactly `term`, best tf-idf first, ties by id."""
        with self._lock:
            candidates = self.index.get(self._term(term))
            if not candidates:
                return []
            idf = self.inverse_document_frequency(term)
            ranked = rank_by_score(candidates, lambda d: self.term_frequency(d, term) * idf)
        logger.debug("relevance_lookup(%r): %d candidates", term, len(ranked))
        return ranked

    # ------------------------- corpus statistics ----------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self.tf)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self.tf

    def document_ids(self) -> List[DocumentId]:
        with self._lock:
            return sorted(self.tf)

    def vocabulary(self) -> List[str]:
        with self._lock:
            return sorted(self.index)

    def dump(self) -> str:
        """Readable snapshot of the index and the term-frequency table."""
        with self._lock:
            mapping = {t: sorted(str(d) for d in self.index[t]) for t in sorted(self.index)}
            count = {str(d): dict(sorted(self.tf[d].items())) for d in sorted(self.tf)}
        return f"Mapping:\n{mapping}\ncount:\n{count}"

    __str__ = dump
