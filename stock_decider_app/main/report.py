"""Printable decision page; the browser's print dialog turns it into paper or PDF."""

from datetime import datetime
import html
from typing import Optional

import pandas as pd

from config import APP_TITLE, APP_SUBTITLE
from decision_engine import DecisionResult, ScreeningInput
from presenter import result_card_html


def report_filename(company_code: Optional[str], when: Optional[datetime] = None) -> str:
    date_stamp = (when or datetime.now()).strftime("%Y%m%d")
    code = (company_code or "").strip().upper()
    code = "".join(ch for ch in code if ch.isalnum() or ch in "-_")
    return f"{code}_decision_{date_stamp}.html" if code else f"decision_{date_stamp}.html"


def inputs_table(x: ScreeningInput) -> pd.DataFrame:
    rows = [
        ("සමාගම් කේතය (Company Code)", (x.company_code or "").strip().upper() or "-"),
        ("PE අනුපාතය (PE Ratio)", x.pe_ratio),
        ("RSI අනුපාතය (RSI Ratio)", x.rsi_ratio),
        ("ඔබගේ හැඟීම් (Sentiment)", x.sentiment.value),
        ("PE 'Buy' සීමාව (PE Threshold)", x.pe_threshold),
        ("RSI 'Buy' සීමාව (RSI Threshold)", x.rsi_threshold),
    ]
    df = pd.DataFrame(rows, columns=["Field", "Value"])
    df["Value"] = df["Value"].map(lambda v: "" if v is None else str(v))
    return df


def build_report_html(x: ScreeningInput, result: DecisionResult, when: Optional[datetime] = None) -> str:
    """Generate a standalone HTML page for one evaluation."""
    generated = (when or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    table = inputs_table(x).to_html(index=False, escape=True, border=0, classes="inputs")
    card = result_card_html(result, x.notes)
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{html.escape(APP_SUBTITLE)} - {html.escape(result.title)}</title>
<style>
  body {{ font-family: sans-serif; max-width: 42rem; margin: 2rem auto; color: #1e293b; }}
  h2 {{ text-align: center; margin-bottom: 0; }}
  .subtitle {{ text-align: center; color: #64748b; font-size: 0.875rem; margin-top: 0.25rem; }}
  table.inputs {{ width: 100%; border-collapse: collapse; margin-top: 1.5rem; }}
  table.inputs th, table.inputs td {{ text-align: left; padding: 0.4rem 0.6rem; border-bottom: 1px solid #e2e8f0; }}
  .generated {{ margin-top: 2rem; text-align: center; color: #94a3b8; font-size: 0.75rem; }}
  @media print {{
    body {{ margin: 0; max-width: none; }}
    .result {{ border: 4px solid #000 !important; background: #fff !important; color: #000 !important; }}
    .result h3 {{ color: #000 !important; }}
  }}
</style>
</head>
<body onload="window.print()">
<h2>{html.escape(APP_TITLE)}</h2>
<p class="subtitle">{html.escape(APP_SUBTITLE)}</p>
{table}
{card}
<p class="generated">Generated: {generated}</p>
</body>
</html>
"""
