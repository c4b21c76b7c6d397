"""Tests for heading, definition and key term detection."""

import pytest

from fiche_revision.features import (
    extract_definitions,
    extract_headings,
    extract_key_terms,
    is_definition,
    is_heading,
)
from fiche_revision.preprocessing import FRENCH_STOPWORDS, tokenize


class TestIsHeading:
    """Tests for the heading predicate."""

    @pytest.mark.parametrize("line", [
        "# Introduction",
        "## Partie technique",
        "### Conclusion",
        "Chapitre 2 : la cellule",
        "chapitre premier",
        "SECTION B",
        "Partie 3",
        "RESUME GENERAL",
        "CHAPITRE 1",
        "RÉVISIONS - BAC 2024",
        "   TITRE EN MAJUSCULES   ",
    ])
    def test_headings(self, line: str) -> None:
        assert is_heading(line)

    @pytest.mark.parametrize("line", [
        "Ok",
        "OUI",
        "#### Trop profond",
        "#SansEspace",
        "Chapitres multiples",
        "Le soleil est une étoile.",
        "2024 - 2025",
        "RESUME general",
        "",
        "   ",
    ])
    def test_not_headings(self, line: str) -> None:
        assert not is_heading(line)


class TestIsDefinition:
    """Tests for the definition predicate."""

    @pytest.mark.parametrize("line", [
        "Définition: Le soleil est une étoile.",
        "Rappel de la définition du vecteur",
        "On appelle mitose la division cellulaire.",
        "Ce phénomène est appelé osmose.",
        "La vitesse se définit comme une distance par unité de temps.",
        "Cette molécule s'appelle l'ATP.",
        "Photosynthèse signifie synthèse par la lumière.",
        "Photosynthèse: Processus de conversion de la lumière.",
        "Mitose - Division cellulaire",
        "Écosystème : Ensemble formé par une biocénose et son biotope",
        "Eau:Élément vital",
    ])
    def test_definitions(self, line: str) -> None:
        assert is_definition(line)

    @pytest.mark.parametrize("line", [
        "Le soleil chauffe la Terre.",
        "Ab: Trop court",
        "Remarque: voir plus loin",
        ": Sans terme",
        "",
    ])
    def test_not_definitions(self, line: str) -> None:
        assert not is_definition(line)


class TestExtractors:
    """Tests for the line-based extractors."""

    def test_headings_keep_document_order(self, cours_text: str) -> None:
        assert extract_headings(cours_text) == [
            "# La photosynthèse",
            "Chapitre 1 : les végétaux",
            "RESUME GENERAL",
        ]

    def test_definitions_keep_document_order(self, cours_text: str) -> None:
        assert extract_definitions(cours_text) == [
            "Photosynthèse: Processus par lequel les plantes produisent du glucose.",
            "On appelle chlorophylle le pigment vert des feuilles.",
        ]

    def test_duplicate_definitions_are_kept(self) -> None:
        text = "Mitose: Division.\nMitose: Division."
        assert extract_definitions(text) == ["Mitose: Division.", "Mitose: Division."]

    def test_empty_text(self) -> None:
        assert extract_headings("") == []
        assert extract_definitions("") == []


class TestExtractKeyTerms:
    """Tests for extract_key_terms()."""

    def test_most_frequent_first(self, soleil_text: str) -> None:
        terms = extract_key_terms(soleil_text, 8)
        assert terms[:2] == ["soleil", "terre"]
        assert len(terms) == 8

    def test_default_top_n_is_six(self, cours_text: str) -> None:
        assert len(extract_key_terms(cours_text)) == 6

    def test_excludes_stopwords_and_short_tokens(self, cours_text: str) -> None:
        terms = extract_key_terms(cours_text, 50)
        assert terms
        for term in terms:
            assert len(term) >= 3
            assert term not in FRENCH_STOPWORDS

    def test_terms_are_unique_document_tokens(self, cours_text: str) -> None:
        terms = extract_key_terms(cours_text, 50)
        assert len(terms) == len(set(terms))
        assert set(terms) <= set(tokenize(cours_text))

    def test_ties_follow_first_occurrence(self) -> None:
        assert extract_key_terms("zèbre lion zèbre girafe lion", 3) == ["zèbre", "lion", "girafe"]

    def test_deterministic(self, cours_text: str) -> None:
        assert extract_key_terms(cours_text, 8) == extract_key_terms(cours_text, 8)

    def test_empty(self) -> None:
        assert extract_key_terms("", 6) == []
        assert extract_key_terms("le la de du", 6) == []
