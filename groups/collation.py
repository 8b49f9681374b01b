from __future__ import annotations

import unicodedata
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")

# Spanish treats ñ as its own letter right after n.
_ENYE_SLOT = "n\uffff"


def collation_key(text: str) -> str:
    """Case- and accent-insensitive sort key following Spanish order."""
    folded = []
    for char in str(text or ""):
        if char in ("ñ", "Ñ"):
            folded.append(_ENYE_SLOT)
            continue
        for part in unicodedata.normalize("NFKD", char):
            if not unicodedata.combining(part):
                folded.append(part)
    return "".join(folded).casefold()


def collate_sorted(values: Iterable[T], key: Callable[[T], str]) -> List[T]:
    return sorted(values, key=lambda value: collation_key(key(value)))
