from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Protocol


class _Identified(Protocol):
    id: int


def next_id(siblings: Iterable[_Identified]) -> int:
    """Return one past the highest sibling id, or 1 for an empty collection.

    Ids freed by deleting the highest entity are handed out again.
    """
    return max((sibling.id for sibling in siblings), default=0) + 1


_LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


def parse_id(raw: str) -> int:
    """Read the leading integer of a path segment; anything else is id 0.

    No entity ever has id 0, so a malformed id is simply not found.
    """
    match = _LEADING_INTEGER.match(raw or "")
    return int(match.group()) if match else 0
