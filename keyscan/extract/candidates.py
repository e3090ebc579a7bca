import re
from typing import Iterable, Union

from pydantic import BaseModel

from keyscan.common.constants import UNABLE_TO_RESOLVE_VALUE

WHITESPACE = re.compile(r"\s")


def prettify_key(value: str) -> str:
    """Remove every whitespace character, so diagnostics stay on one line"""
    return WHITESPACE.sub("", value)


class UnresolvedKey(BaseModel):
    """A translation reference whose key could not be inferred from source"""

    diagnostic: str = ""

    class Config:
        frozen = True

    @classmethod
    def from_source(cls, text: str) -> "UnresolvedKey":
        return cls(diagnostic=prettify_key(text))

    @property
    def label(self) -> str:
        return f"{UNABLE_TO_RESOLVE_VALUE}:{self.diagnostic}"

    def __str__(self) -> str:
        return self.label


KeyCandidate = Union[str, tuple[str, ...], UnresolvedKey]


def merge_candidates(*groups: Iterable[KeyCandidate]) -> list[KeyCandidate]:
    """Concatenate candidate groups, dropping duplicates but keeping first-seen order"""
    merged: dict[KeyCandidate, None] = {}

    for group in groups:
        for candidate in group:
            if isinstance(candidate, list):
                candidate = tuple(candidate)
            merged.setdefault(candidate, None)

    return list(merged)
