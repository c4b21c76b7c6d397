from __future__ import annotations
import re
from collections import Counter
from typing import List
from .preprocessing import FRENCH_STOPWORDS, split_lines, tokenize

RE_MD_HEADING = re.compile(r"^#{1,3}\s+")
RE_SECTION_WORD = re.compile(r"^(?:chapitre|section|partie)\b", re.I)

DEFINITION_MARKERS = (
    "Définition", "définition", "On appelle", "est appelé",
    "se définit", "s'appelle", "signifie",
)
# "Terme: Définition" / "Terme - Définition"
RE_TERM_DEFINITION = re.compile(r"^\w[\w\s-]{2,}[:-]\s*[A-ZÀ-ÖØ-ÞŒŸ]")

MIN_CAPS_HEADING = 5
MIN_KEY_TERM_LENGTH = 3

def _is_caps_line(line: str) -> bool:
    if len(line) < MIN_CAPS_HEADING:
        return False
    first = line[0]
    if not (first.isalpha() and first.isupper()):
        return False
    return all(ch.isupper() or ch.isdigit() or ch.isspace() or ch == '-' for ch in line[1:])

def is_heading(line: str) -> bool:
    line = line.strip()
    if not line:
        return False
    return bool(RE_MD_HEADING.match(line) or RE_SECTION_WORD.match(line) or _is_caps_line(line))

def is_definition(line: str) -> bool:
    line = line.strip()
    if not line:
        return False
    if any(marker in line for marker in DEFINITION_MARKERS):
        return True
    return RE_TERM_DEFINITION.match(line) is not None

def extract_headings(text: str) -> List[str]:
    return [l for l in split_lines(text) if is_heading(l)]

def extract_definitions(text: str) -> List[str]:
    return [l for l in split_lines(text) if is_definition(l)]

def extract_key_terms(text: str, top_n: int = 6) -> List[str]:
    """
    Most frequent content words of the document.
    Stopwords and tokens shorter than 3 characters are ignored; equal counts
    keep the order in which the terms first appear.
    """
    counts = Counter(
        t for t in tokenize(text)
        if t not in FRENCH_STOPWORDS and len(t) >= MIN_KEY_TERM_LENGTH
    )
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [term for term, _ in ordered[:max(0, top_n)]]
