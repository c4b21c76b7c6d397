from .datatypes import Sentence, ScoredSentence, Fiche, FrequencyTable
from .errors import FicheError, EmptyInputError, UnsupportedFormatError, ExtractionError
from .preprocessing import FRENCH_STOPWORDS, is_stopword, tokenize, split_sentences, segment_sentences
from .scoring import build_frequency, score_sentences, rank_sentences, max_sentences_for
from .features import is_heading, is_definition, extract_headings, extract_definitions, extract_key_terms
from .summarize import FicheConfig, summarize, extract_title, ensure_text
