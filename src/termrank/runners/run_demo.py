"""
Index the two canonical sample documents and print lookups, IDF and rankings.

    python -m termrank.runners.run_demo --config configs/default.yaml
"""

from __future__ import annotations

import argparse
import io
import logging
from typing import Dict, Optional

from ..config import load_cfg
from ..documents import DocumentId
from ..engine import SearchEngine

SAMPLE_DOCS: Dict[str, str] = {
    "DOCUMENT1": "this is a a sample",
    "DOCUMENT2": "this is another another example example example",
}

QUERIES = ("this", "a", "sample", "example", "missing")

def build_engine(config_path: Optional[str]) -> SearchEngine:
    cfg = load_cfg(config_path)
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    engine = SearchEngine.from_config(cfg)
    for doc_id, text in SAMPLE_DOCS.items():
        engine.add_document(DocumentId(doc_id), io.StringIO(text))
    return engine

def main(config_path: Optional[str]) -> None:
    engine = build_engine(config_path)
    print(f"Documents: {len(engine)}")
    for q in QUERIES:
        ranked = [str(d) for d in engine.relevance_lookup(q)]
        print(f"{q}: idf={engine.inverse_document_frequency(q):.4f} ranked={ranked}")

if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/default.yaml")
    a = p.parse_args()
    main(a.config)
