# talentgrid/utils/text_normalize.py
import re
from typing import Iterable, List, Optional

_SPACE_RE = re.compile(r"\s+")


def normalize(s: Optional[str]) -> str:
    """Lowercases, collapses inner whitespace, trims. Keeps tech punctuation (C++, C#, Node.js)."""
    if not s:
        return ""
    return _SPACE_RE.sub(" ", s).strip().lower()


def parse_csv(raw: Optional[str]) -> List[str]:
    """'React, node.js,,Go ' -> ['react', 'node.js', 'go']"""
    if not raw:
        return []
    return [t for t in (normalize(part) for part in raw.split(",")) if t]


def unique_normalized(values: Optional[Iterable[str]]) -> List[str]:
    """Normalize, drop blanks and case-insensitive duplicates; first occurrence wins."""
    seen = set()
    out: List[str] = []
    for v in values or []:
        key = normalize(v)
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(key)
    return out
