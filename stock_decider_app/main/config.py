from pathlib import Path
import os


APP_TITLE    = "කොටස් ආයෝජන තීරක"
APP_SUBTITLE = "Stock Investment Decider"

# Decision thresholds
DEFAULT_PE_THRESHOLD  = 10.0
DEFAULT_RSI_THRESHOLD = 32.0
OVERVALUED_PE  = 25.0
OVERBOUGHT_RSI = 70.0
RSI_MIN = 0.0
RSI_MAX = 100.0

# Initial form values
DEFAULT_DRAFT = {
    "company_code": "",
    "pe_ratio": "15",
    "rsi_ratio": "50",
    "sentiment": "Neutral",
    "pe_threshold": "10",
    "rsi_threshold": "32",
    "notes": "",
}

# Logging
LOG_DIR   = Path(os.environ.get("STOCK_DECIDER_LOG_DIR") or Path.cwd() / "logs")
LOG_FILE  = LOG_DIR / "stock_decider.log"
LOG_LEVEL = os.environ.get("STOCK_DECIDER_LOG_LEVEL", "INFO").upper()


def ensure_log_dir():
    """
    Create the log directory if it is missing
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR
