"""Date formatting and reference generation for gateway requests"""

import time
from datetime import date, datetime

TRANSACTION_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
STATEMENT_DATE_FORMAT = "%Y-%m-%d"


def format_transaction_date(moment: datetime) -> str:
    """Format a timestamp as the gateway's transactionDate (YYYY-MM-DD HH:MM:SS)"""
    return moment.strftime(TRANSACTION_DATE_FORMAT)


def format_statement_date(day: date) -> str:
    return day.strftime(STATEMENT_DATE_FORMAT)


def generate_transaction_ref(prefix: str) -> str:
    """Second-resolution reference; callers issuing bursts should add their own suffix"""
    return f"{prefix}_{int(time.time())}"
