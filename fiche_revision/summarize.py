from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Optional
from .datatypes import Fiche
from .errors import EmptyInputError
from .preprocessing import segment_sentences, tokenize
from .features import extract_headings, extract_definitions, extract_key_terms
from .scoring import build_frequency, rank_sentences, max_sentences_for

logger = logging.getLogger(__name__)

_TITLE_STRIP_RE = re.compile(r"[#\r\n]+")

@dataclass
class FicheConfig:
    key_term_count: int = 8
    title_max_length: int = 100

def extract_title(text: str, max_length: int = 100) -> str:
    first = next((l for l in text.split('\n') if l.strip()), '')
    # also trim the blank left by "# " markup: "## Titre" -> "Titre", not " Titre"
    return _TITLE_STRIP_RE.sub('', first).strip()[:max_length]

def ensure_text(text: Optional[str]) -> str:
    """Reject blank input before it reaches the summarizer."""
    if text is None or not text.strip():
        raise EmptyInputError("Colle d'abord ton cours !")
    return text

def summarize(text: str, length_option: Optional[str] = None, config: Optional[FicheConfig] = None) -> Fiche:
    # Pipeline glue
    cfg = config or FicheConfig()
    if not text or not text.strip():
        return Fiche()

    sentences = segment_sentences(text)
    freq = build_frequency(tokenize(text))
    max_sentences = max_sentences_for(length_option)
    points = rank_sentences(sentences, freq, max_sentences)

    fiche = Fiche(
        title=extract_title(text, max_length=cfg.title_max_length),
        headings=tuple(extract_headings(text)),
        key_terms=tuple(extract_key_terms(text, top_n=cfg.key_term_count)),
        definitions=tuple(extract_definitions(text)),
        important_points=tuple(s.text for s in points),
    )
    logger.debug(
        "fiche built: %d sentences, %d distinct terms, %d points kept (max %d), %d headings, %d definitions",
        len(sentences), len(freq), len(fiche.important_points), max_sentences,
        len(fiche.headings), len(fiche.definitions),
    )
    return fiche
