import re
from typing import List

CASE_POLICIES = ("preserve", "lower")

_DELIM = re.compile(r"\W+")

def tokenize(text: str) -> List[str]:
    """Split on runs of non-word characters; casing is left untouched."""
    return [t for t in _DELIM.split(text) if t]

def normalize(term: str, case_policy: str = "preserve") -> str:
    if case_policy == "lower":
        return term.lower()
    return term

def check_policy(case_policy: str) -> str:
    if case_policy not in CASE_POLICIES:
        raise ValueError(f"Unknown case_policy: {case_policy!r} (expected one of {CASE_POLICIES})")
    return case_policy
