from __future__ import annotations
import html
from typing import List, Tuple
from .datatypes import Fiche

DEFAULT_TITLE = "Fiche de révision"
SOURCE_LABEL = "cours"

H_POINTS = "Résumé — Points clés"
H_PLAN = "Plan (détecté)"
H_TERMS = "Termes-clés"
H_DEFS = "Définitions"

def _title(fiche: Fiche) -> str:
    return fiche.title or DEFAULT_TITLE

def render_markdown(fiche: Fiche, length_label: str = "") -> Tuple[str, str]:
    """Return (main column, aside column) as Markdown."""
    main: List[str] = [f"## {_title(fiche)}", f"*Source : {SOURCE_LABEL} — Longueur : {length_label or 'Standard'}*"]
    if fiche.important_points:
        main.append(f"### {H_POINTS}")
        main.extend(f"- {p}" for p in fiche.important_points)
    if fiche.headings:
        main.append(f"### {H_PLAN}")
        main.extend(f"- {h}" for h in fiche.headings)

    aside: List[str] = []
    if fiche.key_terms:
        aside.append(f"### {H_TERMS}")
        aside.append(" ".join(f"`{t}`" for t in fiche.key_terms))
    if fiche.definitions:
        aside.append(f"### {H_DEFS}")
        aside.extend(f"> {d}\n" for d in fiche.definitions)
    return "\n\n".join(main), "\n\n".join(aside)

def render_text(fiche: Fiche, length_label: str = "") -> str:
    lines = [_title(fiche), f"Source : {SOURCE_LABEL}", f"Longueur : {length_label or 'Standard'}", ""]
    if fiche.important_points:
        lines.append(H_POINTS)
        lines.extend(f"- {p}" for p in fiche.important_points)
        lines.append("")
    if fiche.headings:
        lines.append(H_PLAN)
        lines.extend(f"• {h}" for h in fiche.headings)
        lines.append("")
    if fiche.key_terms:
        lines.append(H_TERMS)
        lines.append(", ".join(fiche.key_terms))
        lines.append("")
    if fiche.definitions:
        lines.append(H_DEFS)
        lines.extend(fiche.definitions)
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"

_CSS = """
body { font-family: Georgia, serif; margin: 2em; color: #222; }
.fiche { display: flex; gap: 2em; }
.main { flex: 2; }
.aside { flex: 1; border-left: 2px solid #ddd; padding-left: 1em; }
.title { font-size: 1.6em; font-weight: bold; }
.meta { color: #777; font-size: 0.9em; margin-bottom: 1em; }
.term-tag { display: inline-block; background: #eef; border-radius: 4px; padding: 2px 6px; margin: 2px; }
@media print { .fiche { display: block; } .aside { border: none; padding: 0; } }
"""

def render_html(fiche: Fiche, length_label: str = "") -> str:
    """Standalone printable two-column page; all fiche text is escaped."""
    esc = html.escape
    main = [
        f'<div class="title">{esc(_title(fiche))}</div>',
        f'<div class="meta"><div>Source: {SOURCE_LABEL}</div><div>Longueur: {esc(length_label or "Standard")}</div></div>',
    ]
    if fiche.important_points:
        items = "\n".join(f"<li>{esc(p)}</li>" for p in fiche.important_points)
        main.append(f'<div class="section"><h3>{H_POINTS}</h3><ul>\n{items}\n</ul></div>')
    if fiche.headings:
        items = "\n".join(f"<p>• {esc(h)}</p>" for h in fiche.headings)
        main.append(f'<div class="section"><h3>{H_PLAN}</h3>\n{items}</div>')

    aside = []
    if fiche.key_terms:
        tags = "".join(f'<span class="term-tag">{esc(t)}</span>' for t in fiche.key_terms)
        aside.append(f'<div class="section"><h3>{H_TERMS}</h3>{tags}</div>')
    if fiche.definitions:
        items = "\n".join(f"<p>{esc(d)}</p>" for d in fiche.definitions)
        aside.append(f'<div class="section"><h3>{H_DEFS}</h3>\n{items}</div>')

    return (
        "<!DOCTYPE html>\n<html lang=\"fr\">\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{esc(_title(fiche))}</title>\n<style>{_CSS}</style>\n</head>\n<body>\n"
        '<div class="fiche">\n'
        f'<div class="main">\n{chr(10).join(main)}\n</div>\n'
        f'<div class="aside">\n{chr(10).join(aside)}\n</div>\n'
        "</div>\n</body>\n</html>\n"
    )
