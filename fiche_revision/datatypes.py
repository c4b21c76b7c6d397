from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Tuple, Any

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str

@dataclass(frozen=True)
class ScoredSentence:
    sentence: Sentence
    score: float
    tokens: Tuple[str, ...] = ()  # non-stopword tokens used for the score

@dataclass(frozen=True)
class Fiche:
    title: str = ""
    headings: Tuple[str, ...] = field(default_factory=tuple)
    key_terms: Tuple[str, ...] = field(default_factory=tuple)
    definitions: Tuple[str, ...] = field(default_factory=tuple)
    important_points: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.headings or self.key_terms
                    or self.definitions or self.important_points)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        return {k: (list(v) if isinstance(v, tuple) else v) for k, v in data.items()}

FrequencyTable = Dict[str, int]  # token -> count over the whole document
