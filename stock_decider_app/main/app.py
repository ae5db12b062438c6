from datetime import datetime

import streamlit as st

from config import APP_TITLE, APP_SUBTITLE
from decision_engine import DecisionType, Sentiment, evaluate
from form_state import (
    RESULT_KEY,
    INPUT_KEY,
    init_state,
    current_input,
    clear_errors_on_edit,
    record_result,
    has_error,
)
from log_setup import configure_logging
from presenter import render_result, render_field_error
from report import build_report_html, report_filename

SENTIMENT_LABELS = {
    Sentiment.NEUTRAL.value: "Neutral (මධ්‍යස්ථ)",
    Sentiment.POSITIVE.value: "Positive (ධනාත්මක / Bullish)",
    Sentiment.NEGATIVE.value: "Negative (ඍණාත්මක / Bearish)",
}

logger = configure_logging()


def _on_edit():
    clear_errors_on_edit(st.session_state)


def _get_decision():
    x = current_input(st.session_state)
    result = evaluate(x)
    record_result(st.session_state, result, x)

    code = x.company_code.strip().upper() or "-"
    if result.type == DecisionType.ERROR:
        logger.warning("Rejected input for %s: field=%s", code, result.error_field)
    else:
        logger.info("Decision for %s: %s (pe=%s, rsi=%s, sentiment=%s)",
                    code, result.type.value, x.pe_ratio, x.rsi_ratio, x.sentiment.value)


def _on_print():
    evaluated = st.session_state.get(INPUT_KEY)
    code = evaluated.company_code.strip().upper() if evaluated is not None else ""
    logger.info("Printable report downloaded for %s", code or "-")


#  App setup
st.set_page_config(page_title=APP_SUBTITLE, layout="centered")
st.markdown(f"<h2 style='text-align:center;margin-bottom:0;'>🧮 {APP_TITLE}</h2>", unsafe_allow_html=True)
st.markdown(f"<p style='text-align:center;color:#64748b;font-size:0.875rem;'>{APP_SUBTITLE}</p>",
            unsafe_allow_html=True)

init_state(st.session_state)

#  Main inputs
st.text_input(
    "සමාගම් කේතය (Company Code):",
    placeholder="උදා: LOLC, DIAL, NEST",
    key="company_code",
    on_change=_on_edit,
)

c1, c2 = st.columns(2)
with c1:
    st.text_input("PE අනුපාතය (Price-to-Earnings):", key="pe_ratio", on_change=_on_edit)
    if has_error(st.session_state, "pe"):
        render_field_error("PE අනුපාතය 0 ට වඩා වැඩි විය යුතුයි (PE must be > 0)")
with c2:
    st.text_input("RSI අනුපාතය (Relative Strength Index):", key="rsi_ratio", on_change=_on_edit)
    if has_error(st.session_state, "rsi"):
        render_field_error("RSI අනුපාතය 0 - 100 (RSI must be 0-100)")

st.selectbox(
    "ඔබගේ හැඟීම් (Your Sentiment):",
    options=list(SENTIMENT_LABELS.keys()),
    format_func=lambda v: SENTIMENT_LABELS[v],
    key="sentiment",
    on_change=_on_edit,
)

#  Thresholds
with st.container(border=True):
    st.markdown("**⚙️ අභිරුචි තීරණ සීමාවන් (Custom Thresholds)**")
    t1, t2 = st.columns(2)
    with t1:
        st.text_input("PE 'Buy' සීමාව (පහළ අගය - Default: 10):", key="pe_threshold", on_change=_on_edit)
    with t2:
        st.text_input("RSI 'Buy' සීමාව (පහළ අගය - Default: 32):", key="rsi_threshold", on_change=_on_edit)

#  Notes
st.text_area(
    "ආයෝජනයට අදාළ සටහන් / අවදානම් සාධක:",
    placeholder="උදා: නව කළමනාකාරීත්වය හොඳයි, හෝ වෙළෙඳපොළ අවදානම ඉහළයි.",
    height=100,
    key="notes",
    on_change=_on_edit,
)

#  Actions
st.button("තීරණය ගන්න (Get Decision)", type="primary", use_container_width=True, on_click=_get_decision)

result = st.session_state.get(RESULT_KEY)
evaluated = st.session_state.get(INPUT_KEY)
draft = current_input(st.session_state)
st.download_button(
    "🖨️ මුද්‍රණය කරන්න / PDF ලෙස සුරකින්න",
    data=build_report_html(evaluated, result) if result is not None else "",
    file_name=report_filename(evaluated.company_code if evaluated is not None else ""),
    mime="text/html",
    use_container_width=True,
    disabled=result is None,
    on_click=_on_print,
)

#  Result
render_result(result, draft.notes)

st.markdown(
    f"<div style='margin-top:2rem;text-align:center;color:#94a3b8;font-size:0.75rem;'>"
    f"&copy; {datetime.now().year} {APP_SUBTITLE}</div>",
    unsafe_allow_html=True,
)
