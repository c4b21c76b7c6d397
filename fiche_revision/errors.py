from __future__ import annotations


class FicheError(Exception):
    """Base error for the fiche generator's surrounding layer."""


class EmptyInputError(FicheError, ValueError):
    """Raised when there is no text to summarize."""


class UnsupportedFormatError(FicheError, ValueError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Format de fichier non supporté : {filename}. Utilise .txt, .md ou .pdf.")


class ExtractionError(FicheError):
    """Raised when text cannot be read out of an uploaded file."""
