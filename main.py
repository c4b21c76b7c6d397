from __future__ import annotations
import io
import logging
import streamlit as st
import pandas as pd
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fiche_revision.config import LENGTH_OPTIONS, load_config, configure_logging
from fiche_revision.errors import FicheError
from fiche_revision.loaders import SUPPORTED_EXTENSIONS, load_text_from_file, upload_fingerprint
from fiche_revision.preprocessing import segment_sentences, tokenize
from fiche_revision.scoring import build_frequency, score_sentences, max_sentences_for
from fiche_revision.summarize import summarize, ensure_text
from fiche_revision.render import render_markdown, render_text, render_html

logger = logging.getLogger(__name__)

PLACEHOLDER = (
    "Colle ton cours ici (ou dépose un fichier .txt / .pdf). Exemple :\n\n"
    "CHAPITRE 1\nDéfinition: La photosynthèse est le processus ..."
)

def draw_term_chart(freq, top_n: int = 15):
    """Horizontal bar chart of the most frequent terms, returned as a PNG buffer."""
    top = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)[:top_n]
    fig, ax = plt.subplots(figsize=(8, max(2, 0.4 * len(top))))
    if top:
        terms, counts = zip(*top)
        ax.barh(list(reversed(terms)), list(reversed(counts)), color='steelblue', alpha=0.8)
    ax.set_xlabel("Occurrences")
    ax.set_title("Termes les plus fréquents (hors mots vides)", fontsize=12, fontweight='bold')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    st.sidebar.header("Paramètres")
    length_label = st.sidebar.selectbox(
        "Longueur de la fiche",
        list(LENGTH_OPTIONS.keys()),
        help="Nombre de points clés : Courte 4, Standard 5, Moyenne 7, Longue 12",
    )
    st.sidebar.header("Debug")
    debug_mode = st.sidebar.checkbox("Afficher les étapes du calcul", value=False)
    return length_label, debug_mode

def debug_pipeline(text: str, length_option):
    """Show term frequencies and sentence scores behind the fiche."""
    st.header("🔍 Détails du calcul")

    sentences = segment_sentences(text)
    tokens = tokenize(text)
    freq = build_frequency(tokens)
    scored = score_sentences(sentences, freq)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Phrases", len(sentences))
    with col2:
        st.metric("Mots (tokens)", len(tokens))
    with col3:
        st.metric("Termes distincts", len(freq))

    with st.expander("Fréquence des termes", expanded=True):
        if freq:
            st.image(draw_term_chart(freq))
            freq_df = pd.DataFrame(
                sorted(freq.items(), key=lambda kv: kv[1], reverse=True),
                columns=["Terme", "Occurrences"],
            )
            st.dataframe(freq_df, use_container_width=True, height=250)
        else:
            st.warning("Aucun terme significatif trouvé")

    with st.expander("Score des phrases", expanded=True):
        if not scored:
            st.warning("Aucune phrase détectée")
            return
        ranked_ids = [x.sentence.idx for x in sorted(scored, key=lambda x: x.score, reverse=True)]
        kept = set(ranked_ids[:max_sentences_for(length_option)])
        scores_df = pd.DataFrame([{
            "Phrase #": x.sentence.idx + 1,
            "Score": round(x.score, 3),
            "Termes": ", ".join(x.tokens[:8]) + ("..." if len(x.tokens) > 8 else ""),
            "Retenue": "✅" if x.sentence.idx in kept else "❌",
            "Texte": x.sentence.text[:80] + "..." if len(x.sentence.text) > 80 else x.sentence.text,
        } for x in scored])
        st.dataframe(scores_df, use_container_width=True)

        values = np.array([x.score for x in scored])
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Score min", f"{values.min():.3f}")
        with col2:
            st.metric("Score max", f"{values.max():.3f}")
        with col3:
            st.metric("Moyenne", f"{np.mean(values):.3f}")
        with col4:
            st.metric("Écart-type", f"{np.std(values):.3f}")

def show_fiche(fiche, length_label: str):
    main_md, aside_md = render_markdown(fiche, length_label)
    left, right = st.columns([2, 1])
    with left:
        st.markdown(main_md)
    with right:
        st.markdown(aside_md or "_Aucun terme ni définition détecté._")

    col1, col2 = st.columns(2)
    with col1:
        st.download_button("📄 Télécharger (.txt)", render_text(fiche, length_label),
                           file_name="fiche.txt", mime="text/plain")
    with col2:
        st.download_button("🖨️ Version imprimable (.html)", render_html(fiche, length_label),
                           file_name="fiche.html", mime="text/html")

def main():
    cfg = load_config()
    configure_logging(cfg)

    st.title("Générateur de fiche de révision")
    st.write("Colle ton cours ou dépose un fichier pour obtenir une fiche : plan, définitions, termes-clés et points importants.")

    length_label, debug_mode = create_sidebar_controls()
    length_option = LENGTH_OPTIONS[length_label]

    uploaded_file = st.file_uploader(
        "Choisir un fichier",
        type=list(SUPPORTED_EXTENSIONS),
        help="Formats acceptés : .txt, .md, .pdf",
    )
    if uploaded_file is not None and st.session_state.get("loaded_file") != upload_fingerprint(uploaded_file):
        try:
            with st.spinner("⏳ Extraction du texte (patienter)..."):
                st.session_state["input_text"] = load_text_from_file(uploaded_file, max_bytes=cfg.max_upload_bytes)
            st.session_state["loaded_file"] = upload_fingerprint(uploaded_file)
        except FicheError as e:
            st.error(str(e))
        except Exception as e:
            logger.exception("Unexpected error while reading %s", uploaded_file.name)
            st.error("Impossible de lire le fichier.")
            st.exception(e)

    text = st.text_area("Cours", key="input_text", height=250, placeholder=PLACEHOLDER)

    if st.button("Générer la fiche", type="primary"):
        try:
            text = ensure_text(text)
            with st.spinner("Génération de la fiche..."):
                fiche = summarize(text, length_option)
            logger.info("Fiche generated (%s): %d points, %d key terms",
                        length_option or "default", len(fiche.important_points), len(fiche.key_terms))

            st.markdown("---")
            show_fiche(fiche, length_label)
            if debug_mode:
                st.markdown("---")
                debug_pipeline(text, length_option)
        except FicheError as e:
            st.warning(str(e))
        except Exception as e:
            logger.exception("Fiche generation failed")
            st.error(f"Une erreur s'est produite lors de la génération : {str(e)}")
            st.exception(e)

if __name__ == "__main__":
    main()
