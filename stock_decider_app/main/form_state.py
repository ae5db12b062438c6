"""
Draft form state kept between Streamlit reruns.

`state` is anything dict-like; in the app it is `st.session_state`, whose
widget keys are the draft field names below.
"""
from typing import MutableMapping

from config import DEFAULT_DRAFT
from decision_engine import DecisionResult, ScreeningInput

DRAFT_KEYS = tuple(DEFAULT_DRAFT.keys())
ERRORS_KEY = "field_errors"
RESULT_KEY = "last_result"
INPUT_KEY  = "last_input"


def init_state(state: MutableMapping) -> None:
    for key, value in DEFAULT_DRAFT.items():
        state.setdefault(key, value)
    state.setdefault(ERRORS_KEY, {})
    state.setdefault(RESULT_KEY, None)
    state.setdefault(INPUT_KEY, None)


def current_input(state: MutableMapping) -> ScreeningInput:
    return ScreeningInput.from_draft({k: state.get(k, DEFAULT_DRAFT[k]) for k in DRAFT_KEYS})


def clear_errors_on_edit(state: MutableMapping) -> None:
    """
    Any edit clears every field flag, whichever field was touched.
    """
    if state.get(ERRORS_KEY):
        state[ERRORS_KEY] = {}


def record_result(state: MutableMapping, result: DecisionResult, evaluated: ScreeningInput) -> None:
    """
    Store the newest result with the input that produced it, and flag the
    field it rejected, if any.
    """
    state[RESULT_KEY] = result
    state[INPUT_KEY] = evaluated
    if result.error_field:
        errors = dict(state.get(ERRORS_KEY) or {})
        errors[result.error_field] = True
        state[ERRORS_KEY] = errors


def has_error(state: MutableMapping, field: str) -> bool:
    return bool((state.get(ERRORS_KEY) or {}).get(field))
