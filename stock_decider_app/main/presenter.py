from dataclasses import dataclass
import html
from typing import Optional

import streamlit as st

from decision_engine import DecisionResult, DecisionType, StyleTag


@dataclass(frozen=True)
class Style:
    background: str
    text: str
    border: str


ICONS = {
    DecisionType.BUY: "✅",
    DecisionType.NOT_BUY: "❌",
    DecisionType.NO_DECISION: "❓",
    DecisionType.ERROR: "⚠️",
}

STYLES = {
    StyleTag.BUY:         Style(background="#f0fdf4", text="#166534", border="#16a34a"),
    StyleTag.NOT_BUY:     Style(background="#fef2f2", text="#991b1b", border="#dc2626"),
    StyleTag.NO_DECISION: Style(background="#fffbeb", text="#92400e", border="#f59e0b"),
    StyleTag.ERROR:       Style(background="#fef2f2", text="#b91c1c", border="#ef4444"),
}

NOTES_LABEL = "✍️ සටහන (Notes):"


def icon_for(kind: DecisionType) -> str:
    return ICONS[kind]


def style_for(tag: StyleTag) -> Style:
    return STYLES[tag]


def notes_to_show(notes: Optional[str]) -> Optional[str]:
    """Notes appear under the result only when they are not blank."""
    if notes is None or not notes.strip():
        return None
    return notes


def result_card_html(result: DecisionResult, notes: Optional[str] = None) -> str:
    # Result card, also reused by the printable report
    s = style_for(result.style)
    shown = notes_to_show(notes)
    notes_html = ""
    if shown is not None:
        notes_html = f"""
        <div class="notes" style="margin-top:1.5rem;padding-top:1rem;border-top:1px solid {s.border};text-align:left;">
            <strong style="display:block;font-size:0.875rem;opacity:0.75;margin-bottom:0.25rem;">{html.escape(NOTES_LABEL)}</strong>
            <p style="font-size:0.875rem;white-space:pre-wrap;margin:0;">{html.escape(shown)}</p>
        </div>
        """
    return f"""
    <div class="result result-{result.style.value}" style="
        margin-top:2rem;
        padding:1.5rem;
        border-radius:0.75rem;
        border-left:4px solid {s.border};
        background:{s.background};
        color:{s.text};
        text-align:center;
        ">
        <div style="font-size:2rem;margin-bottom:0.5rem;">{icon_for(result.type)}</div>
        <h3 style="font-size:1.25rem;font-weight:700;margin:0 0 0.5rem 0;color:{s.text};">{html.escape(result.title)}</h3>
        <span style="display:block;font-weight:500;opacity:0.9;">{html.escape(result.reason)}</span>
        {notes_html}
    </div>
    """


def render_result(result: Optional[DecisionResult], notes: Optional[str] = None) -> None:
    if result is None:
        return
    st.markdown(result_card_html(result, notes), unsafe_allow_html=True)


def render_field_error(message: str) -> None:
    st.markdown(
        f"<span style='color:#ef4444;font-size:0.8rem;'>{html.escape(message)}</span>",
        unsafe_allow_html=True,
    )
