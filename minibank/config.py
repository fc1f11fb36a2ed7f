"""
Central Configuration File (SSOT).
"""
from .currency import Currency

# --- Conversion defaults (demo scenario) ---
DEFAULT_EXCHANGE_RATES = {
    Currency.USD: "1.1",
    Currency.EUR: "0.9",
    Currency.UAH: "38",
}
DEFAULT_FIXED_RATE = "0.5"

# --- Account numbering ---
# First number handed out by the process-wide counter.
FIRST_ACCOUNT_NUMBER: int = 1234343

# --- Notifications ---
NOTIFICATION_TEMPLATE = "{channel} notification: Your account balance has changed. Current balance: {balance}"

# --- Logging ---
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
