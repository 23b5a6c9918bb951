import unicodedata
from typing import Iterable, List, Optional, Sequence

from ports_db import PortRecord


# ---------------------------
# Normalization
# ---------------------------

def normalize(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def _fold_accents(s: str) -> str:
    s = unicodedata.normalize("NFD", s)
    return "".join(ch for ch in s if unicodedata.category(ch) != "Mn")


def sort_key(label: str):
    """
    Collation key close to a browser's localeCompare:
    accents and case only break ties, they never reorder base letters.
    Does not depend on the process locale.
    """
    folded = label.casefold()
    return (_fold_accents(folded), folded, label)


# ---------------------------
# Indexing
# ---------------------------

def build_index(
    records: Iterable[PortRecord],
    field: str,
    country: Optional[str] = None,
) -> List[str]:
    """
    Sorted, de-duplicated display labels of `field` ("name" or "country").
    With `country`, only records of that country (normalized) are used.
    The first occurrence in catalog order is the display form of a label.
    """
    wanted = normalize(country) if country is not None else None

    labels: List[str] = []
    seen = set()
    for rec in records:
        if wanted and normalize(rec.country) != wanted:
            continue
        display = (getattr(rec, field) or "").strip()
        key = normalize(display)
        if not key or key in seen:
            continue
        seen.add(key)
        labels.append(display)

    # sorted() is stable: equal keys keep catalog order
    return sorted(labels, key=sort_key)


def country_index(records: Iterable[PortRecord]) -> List[str]:
    return build_index(records, "country")


def port_index(records: Iterable[PortRecord], country: Optional[str] = None) -> List[str]:
    return build_index(records, "name", country)


# ---------------------------
# Exact resolution
# ---------------------------

def resolve_exact(candidates: Sequence[str], typed: Optional[str]) -> Optional[str]:
    """
    Returns the candidate equal to `typed` ignoring case and surrounding
    whitespace, or None. Blank input never matches.
    """
    v = normalize(typed)
    if not v:
        return None
    for c in candidates:
        if normalize(c) == v:
            return c
    return None
