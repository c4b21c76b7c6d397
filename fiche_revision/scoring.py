from __future__ import annotations
import math
from typing import Dict, Iterable, List, Optional
from .datatypes import FrequencyTable, ScoredSentence, Sentence
from .preprocessing import FRENCH_STOPWORDS, content_tokens, tokenize

DEFAULT_MAX_SENTENCES = 5

MAX_SENTENCES_BY_LENGTH: Dict[str, int] = {
    "short": 4,
    "medium": 7,
    "long": 12,
}

def max_sentences_for(length_option: Optional[str]) -> int:
    return MAX_SENTENCES_BY_LENGTH.get(length_option or "", DEFAULT_MAX_SENTENCES)

def build_frequency(tokens: Iterable[str]) -> FrequencyTable:
    """Occurrences of each non-stopword token, keyed in first-seen order."""
    freq: FrequencyTable = {}
    for tok in tokens:
        if tok in FRENCH_STOPWORDS:
            continue
        freq[tok] = freq.get(tok, 0) + 1
    return freq

def sentence_score(tokens: List[str], freq: FrequencyTable) -> float:
    """
    score = sum(freq[t]) / sqrt(n)  over the n non-stopword tokens of the sentence.
    A sentence without scoring tokens gets 0.
    """
    total = sum(freq.get(t, 0) for t in tokens)
    return total / math.sqrt(len(tokens) or 1)

def score_sentences(sentences: List[Sentence], freq: FrequencyTable) -> List[ScoredSentence]:
    scored: List[ScoredSentence] = []
    for s in sentences:
        toks = content_tokens(tokenize(s.text))
        scored.append(ScoredSentence(sentence=s, score=sentence_score(toks, freq), tokens=tuple(toks)))
    return scored

def rank_sentences(sentences: List[Sentence], freq: FrequencyTable, max_sentences: int) -> List[Sentence]:
    # sorted() is stable: equal scores keep document order
    scored = score_sentences(sentences, freq)
    ranked = sorted(scored, key=lambda x: x.score, reverse=True)
    return [x.sentence for x in ranked[:max(0, max_sentences)]]
