"""Rank candidate component names by specificity and drop the ones a kept name already covers."""
from __future__ import annotations

import re
from typing import Iterable, List

from complens.extraction.patterns import is_reserved_name
from complens.utils.config import RESERVED_PREFIX

_PASCAL_FULL_RE = re.compile(r"^[A-Z][a-z]+(?:[A-Z][a-z0-9]*)+$")


def specificity_key(name: str, prefix: str = RESERVED_PREFIX) -> tuple:
    """Reserved-prefix names, then PascalCase, then longer before shorter."""
    return (
        not is_reserved_name(name, prefix),
        not _PASCAL_FULL_RE.match(name),
        -len(name),
    )


def resolve_specificity(candidates: Iterable[str], prefix: str = RESERVED_PREFIX) -> List[str]:
    """
    Trim, drop empties, dedupe, sort by specificity, then keep a name only when no
    already-kept name contains it (case-insensitive).
    ["Button", "CfaSubmitButton"] -> ["CfaSubmitButton"].
    """
    unique = list(dict.fromkeys(c.strip() for c in candidates if c and c.strip()))
    unique.sort(key=lambda n: specificity_key(n, prefix))
    kept: List[str] = []
    for name in unique:
        lower = name.lower()
        if any(lower in k.lower() for k in kept):
            continue
        kept.append(name)
    return kept
