from __future__ import annotations
import re
from typing import List, Iterable
from .datatypes import Sentence

_NEWLINES_RE = re.compile(r"(?:\r?\n)+")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]?")

FRENCH_STOPWORDS = frozenset({
    # articles, determiners
    'le','la','les','l\'','un','une','des','du','de','au','aux','ce','cet','cette','ces',
    'mon','ma','mes','ton','ta','tes','son','sa','ses','notre','nos','votre','vos','leur','leurs',
    'chaque','quel','quelle','quels','quelles','aucuns','tous','tout','toute','toutes','tels',
    # pronouns
    'je','tu','il','elle','on','nous','vous','ils','elles','me','te','se','moi','toi','lui',
    'eux','soi','y','en','cela','ceci','ça','ceux','celle','celles','celui','qui','que','quoi',
    'dont','où','sien','même','c\'est','qu\'il','qu\'elle','n\'est','d\'un','d\'une',
    # conjunctions, prepositions, adverbs
    'et','ou','ni','mais','donc','or','car','si','comme','quand','lorsque','puis','alors',
    'ainsi','aussi','encore','avant','après','avec','sans','sous','sur','dans','par','pour',
    'vers','chez','entre','depuis','pendant','selon','dedans','dehors','hors','ici','là',
    'juste','maintenant','moins','plus','peu','trop','très','bien','seulement','tandis',
    'tellement','parce','pourquoi','comment','ne','pas','non','oui','déjà','ci','à',
    # common verb forms
    'être','est','sont','suis','es','sommes','êtes','était','étaient','étais','étions','été',
    'sera','seront','soit','soyez','avoir','a','ai','as','avons','avez','ont','avait','eu',
    'fait','faites','faire','font','peut','peuvent','doit','devrait','vont','voient','vu',
    # frequent filler nouns
    'autre','autres','bon','début','dos','essai','état','fois','mine','mot','nommés',
    'nouveaux','parole','personnes','pièce','plupart','sujet','valeur','voie',
})

def is_stopword(token: str) -> bool:
    return token.lower() in FRENCH_STOPWORDS

def _keep_char(ch: str) -> bool:
    # letters only: digits, ², ₂, ½ and punctuation all become separators
    return ch.isalpha() or ch.isspace() or ch in "'-"

def tokenize(text: str) -> List[str]:
    """Lowercased word tokens; apostrophes and hyphens stay inside a token."""
    cleaned = ''.join(ch if _keep_char(ch) else ' ' for ch in text.lower())
    return cleaned.split()

def content_tokens(tokens: Iterable[str]) -> List[str]:
    return [t for t in tokens if t not in FRENCH_STOPWORDS]

def split_sentences(text: str) -> List[str]:
    # Greedy split on . ! ? ; abbreviations and decimals are split too
    flat = _NEWLINES_RE.sub(' ', text)
    parts = [m.group(0).strip() for m in _SENTENCE_RE.finditer(flat)]
    return [p for p in parts if p]

def segment_sentences(text: str) -> List[Sentence]:
    return [Sentence(idx=i, text=s) for i, s in enumerate(split_sentences(text))]

def split_lines(text: str) -> List[str]:
    lines = (l.strip() for l in re.split(r"\r?\n", text))
    return [l for l in lines if l]
