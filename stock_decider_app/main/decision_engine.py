from dataclasses import dataclass
from enum import Enum
import re
from typing import Mapping, Optional, Union

import numpy as np

from config import (
    DEFAULT_PE_THRESHOLD,
    DEFAULT_RSI_THRESHOLD,
    OVERVALUED_PE,
    OVERBOUGHT_RSI,
    RSI_MIN,
    RSI_MAX,
)

NumberLike = Union[str, int, float, None]


class Sentiment(str, Enum):
    NEUTRAL = "Neutral"
    POSITIVE = "Positive"
    NEGATIVE = "Negative"


class DecisionType(str, Enum):
    BUY = "buy"
    NOT_BUY = "not-buy"
    NO_DECISION = "no-decision"
    ERROR = "error"


class StyleTag(str, Enum):
    BUY = "buy"
    NOT_BUY = "not_buy"
    NO_DECISION = "no_decision"
    ERROR = "error"


_STYLE_BY_TYPE = {
    DecisionType.BUY: StyleTag.BUY,
    DecisionType.NOT_BUY: StyleTag.NOT_BUY,
    DecisionType.NO_DECISION: StyleTag.NO_DECISION,
    DecisionType.ERROR: StyleTag.ERROR,
}

ERROR_TITLE       = "දෝෂයකි (Error)"
BUY_TITLE         = "✅ BUY (මිල දී ගන්න)"
NOT_BUY_TITLE     = "❌ Not Buy (මිල දී නොගන්න)"
NO_DECISION_TITLE = "⚠️ No Decision (තීරණයක් නැත)"


@dataclass(frozen=True)
class ScreeningInput:
    pe_ratio: NumberLike
    rsi_ratio: NumberLike
    sentiment: Sentiment = Sentiment.NEUTRAL
    company_code: str = ""
    pe_threshold: NumberLike = "10"
    rsi_threshold: NumberLike = "32"
    notes: str = ""

    @classmethod
    def from_draft(cls, draft: Mapping) -> "ScreeningInput":
        """Build an input from the form draft (plain strings)."""
        return cls(
            pe_ratio=draft.get("pe_ratio", ""),
            rsi_ratio=draft.get("rsi_ratio", ""),
            sentiment=Sentiment(draft.get("sentiment", Sentiment.NEUTRAL.value)),
            company_code=draft.get("company_code") or "",
            pe_threshold=draft.get("pe_threshold", ""),
            rsi_threshold=draft.get("rsi_threshold", ""),
            notes=draft.get("notes") or "",
        )


@dataclass(frozen=True)
class DecisionResult:
    type: DecisionType
    title: str
    reason: str
    style: StyleTag
    error_field: Optional[str] = None


# ASCII digits only: "12.5abc" -> 12.5, "  7" -> 7, "abc" and "８" -> nothing
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_number(raw: NumberLike) -> float:
    """
    Read the leading number of a form value. Returns NaN when nothing parses.
    """
    if raw is None:
        return float("nan")
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    m = _NUMBER_PREFIX.match(str(raw).lstrip())
    if m is None:
        return float("nan")
    return float(m.group(0))


def resolve_threshold(raw: NumberLike, default: float) -> float:
    """Unparseable or zero thresholds fall back to the default."""
    v = parse_number(raw)
    if np.isnan(v) or v == 0:
        return float(default)
    return v


def format_number(x: float) -> str:
    if np.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def code_display(company_code: Optional[str]) -> str:
    code = (company_code or "").strip()
    return f"({code.upper()})" if code else ""


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


class DecisionEngine:
    def __init__(self, overvalued_pe: float = OVERVALUED_PE, overbought_rsi: float = OVERBOUGHT_RSI):
        if overvalued_pe <= 0:
            raise ValueError(f"overvalued_pe must be > 0, got {overvalued_pe}")
        if not (RSI_MIN < overbought_rsi <= RSI_MAX):
            raise ValueError(
                f"overbought_rsi must be in ({format_number(RSI_MIN)}, {format_number(RSI_MAX)}], "
                f"got {overbought_rsi}"
            )
        self.overvalued_pe = float(overvalued_pe)
        self.overbought_rsi = float(overbought_rsi)

    def _result(self, kind: DecisionType, code: str, title: str, reason: str,
                error_field: Optional[str] = None) -> DecisionResult:
        return DecisionResult(
            type=kind,
            title=_join(code, title),
            reason=reason,
            style=_STYLE_BY_TYPE[kind],
            error_field=error_field,
        )

    def decide(self, x: ScreeningInput) -> DecisionResult:
        code = code_display(x.company_code)
        pe = parse_number(x.pe_ratio)
        rsi = parse_number(x.rsi_ratio)
        pe_t = resolve_threshold(x.pe_threshold, DEFAULT_PE_THRESHOLD)
        rsi_t = resolve_threshold(x.rsi_threshold, DEFAULT_RSI_THRESHOLD)

        # 校验
        if np.isnan(pe) or pe <= 0:
            return self._result(
                DecisionType.ERROR, code, ERROR_TITLE,
                _join(code, "PE අනුපාතය නිවැරදිව ඇතුළත් කරන්න (0 ට වඩා වැඩි විය යුතුයි). "
                            "PE must be valid and > 0."),
                error_field="pe",
            )

        if np.isnan(rsi) or rsi < RSI_MIN or rsi > RSI_MAX:
            lo, hi = format_number(RSI_MIN), format_number(RSI_MAX)
            return self._result(
                DecisionType.ERROR, code, ERROR_TITLE,
                _join(code, f"RSI අනුපාතය {lo} ත් {hi} ත් අතර විය යුතුය. "
                            f"RSI must be between {lo} and {hi}."),
                error_field="rsi",
            )

        ceiling = format_number(self.overvalued_pe)
        overbought = format_number(self.overbought_rsi)

        # Order matters: the zones overlap for some custom thresholds
        if pe < pe_t and rsi < rsi_t:
            return self._result(
                DecisionType.BUY, code, BUY_TITLE,
                f"PE අනුපාතය ({format_number(pe_t)} ට අඩු) සහ RSI අනුපාතය ({format_number(rsi_t)} ට අඩු) වේ. "
                f"PE below {format_number(pe_t)} and RSI below {format_number(rsi_t)}.",
            )

        if pe > self.overvalued_pe and rsi >= self.overbought_rsi:
            return self._result(
                DecisionType.NOT_BUY, code, NOT_BUY_TITLE,
                f"PE අනුපාතය ({ceiling} ට වැඩි - Overvalued) සහ RSI අනුපාතය ({overbought} ට වැඩි - Overbought) වේ. "
                f"PE above {ceiling} and RSI at or above {overbought}.",
            )

        if pe_t <= pe <= self.overvalued_pe and rsi_t <= rsi < self.overbought_rsi:
            if x.sentiment == Sentiment.POSITIVE:
                return self._result(
                    DecisionType.BUY, code, BUY_TITLE,
                    "මධ්‍යස්ථ තාක්ෂණික දත්ත; ඔබේ හැඟීම් (Positive) හේතුවෙන් Buy. "
                    "Neutral technicals; Buy because of your Positive sentiment.",
                )
            if x.sentiment == Sentiment.NEGATIVE:
                return self._result(
                    DecisionType.NOT_BUY, code, NOT_BUY_TITLE,
                    "මධ්‍යස්ථ තාක්ෂණික දත්ත; ඔබේ හැඟීම් (Negative) හේතුවෙන් Not Buy. "
                    "Neutral technicals; Not Buy because of your Negative sentiment.",
                )
            return self._result(
                DecisionType.NO_DECISION, code, NO_DECISION_TITLE,
                "මධ්‍යස්ථ තාක්ෂණික දත්ත සහ මධ්‍යස්ථ හැඟීම් (Neutral). "
                "Neutral technicals and neutral sentiment.",
            )

        return self._result(
            DecisionType.NO_DECISION, code, NO_DECISION_TITLE,
            "දත්ත මිශ්‍රයි, පැහැදිලි තීරණයක් නැත. පරීක්ෂා කරන්න. "
            "Mixed data, no clear decision; inspect manually.",
        )


_DEFAULT_ENGINE = DecisionEngine()


def evaluate(x: ScreeningInput) -> DecisionResult:
    return _DEFAULT_ENGINE.decide(x)
