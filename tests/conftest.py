"""Shared fixtures for the fiche generator tests."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure `import fiche_revision` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


class FakeUpload(io.BytesIO):
    """Minimal stand-in for a Streamlit UploadedFile."""

    def __init__(self, data: bytes, name: str) -> None:
        super().__init__(data)
        self.name = name


@pytest.fixture()
def soleil_text() -> str:
    return (
        "CHAPITRE 1\n"
        "Définition: Le soleil est une étoile. Le soleil chauffe la Terre. "
        "La Terre tourne autour du soleil."
    )


@pytest.fixture()
def cours_text() -> str:
    """A longer course with headings, definitions and many sentences."""
    return (
        "# La photosynthèse\n"
        "Chapitre 1 : les végétaux\n"
        "Photosynthèse: Processus par lequel les plantes produisent du glucose.\n"
        "On appelle chlorophylle le pigment vert des feuilles.\n"
        "Les plantes captent la lumière. La lumière fournit l'énergie nécessaire. "
        "Les feuilles contiennent la chlorophylle. La chlorophylle absorbe la lumière rouge et bleue. "
        "Le glucose est stocké sous forme d'amidon! Les racines absorbent l'eau. "
        "Pourquoi les feuilles sont-elles vertes? Parce que la chlorophylle réfléchit le vert.\n"
        "RESUME GENERAL\n"
        "Les plantes transforment la lumière en énergie chimique."
    )


@pytest.fixture()
def make_upload():
    return FakeUpload


@pytest.fixture()
def pdf_bytes() -> bytes:
    """Two-page PDF built in memory."""
    import fitz

    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "CHAPITRE UN", fontsize=14)
    page.insert_text((72, 100), "Le soleil chauffe la Terre.", fontsize=11)
    page = doc.new_page()
    page.insert_text((72, 72), "La Terre tourne autour du soleil.", fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data
